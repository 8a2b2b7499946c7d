"""
Courses / Instructors / Classrooms API integration tests.
"""

from httpx import AsyncClient


async def _post(client: AsyncClient, path: str, payload: dict) -> dict:
    resp = await client.post(path, json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


class TestCoursesAPI:

    async def test_create_course(self, client: AsyncClient):
        body = await _post(client, "/api/v1/courses", {
            "name": "Computer Science",
            "duration_years": 4,
            "required_equipment": "Projector",
            "prerequisites": ["Mathematics"],
        })
        assert body["name"] == "Computer Science"
        assert body["duration_years"] == 4
        assert body["prerequisites"] == ["Mathematics"]
        assert body["id"]

    async def test_create_course_defaults(self, client: AsyncClient):
        body = await _post(client, "/api/v1/courses", {"name": "Art", "duration_years": 0})
        assert body["required_equipment"] == ""
        assert body["prerequisites"] == []

    async def test_create_course_empty_name(self, client: AsyncClient):
        resp = await client.post("/api/v1/courses", json={"name": "", "duration_years": 3})
        assert resp.status_code == 422
        assert resp.json() == {
            "error": "InvalidPayload",
            "message": "Ensure 'name' and 'duration_years' are provided.",
        }

    async def test_create_course_negative_duration(self, client: AsyncClient):
        resp = await client.post("/api/v1/courses", json={"name": "Art", "duration_years": -1})
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidPayload"

    async def test_list_courses_empty(self, client: AsyncClient):
        resp = await client.get("/api/v1/courses")
        assert resp.status_code == 404
        assert resp.json() == {"error": "NotFound", "message": "No courses found."}

    async def test_list_and_lookup(self, client: AsyncClient):
        created = await _post(client, "/api/v1/courses", {"name": "Physics", "duration_years": 3})

        resp = await client.get("/api/v1/courses")
        assert resp.status_code == 200
        assert resp.json()["total"] == 1
        assert resp.json()["courses"][0] == created

        resp = await client.get(f"/api/v1/courses/{created['id']}")
        assert resp.json() == created

        resp = await client.get("/api/v1/courses/by-name/Physics")
        assert resp.json() == created

    async def test_course_not_found(self, client: AsyncClient):
        resp = await client.get("/api/v1/courses/by-name/Alchemy")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Course with name Alchemy not found."


class TestInstructorsAPI:

    async def test_create_instructor(self, client: AsyncClient):
        body = await _post(client, "/api/v1/instructors", {
            "name": "Dr. Byron",
            "availability": ["08:00-10:00"],
            "preferred_times": ["08:00-10:00"],
        })
        assert body["name"] == "Dr. Byron"
        assert body["availability"] == ["08:00-10:00"]

    async def test_create_instructor_empty_name(self, client: AsyncClient):
        resp = await client.post("/api/v1/instructors", json={"name": ""})
        assert resp.status_code == 422
        assert resp.json()["message"] == "Ensure 'name' is provided."

    async def test_list_instructors_empty(self, client: AsyncClient):
        resp = await client.get("/api/v1/instructors")
        assert resp.status_code == 404
        assert resp.json()["message"] == "No instructors found."

    async def test_available(self, client: AsyncClient):
        early = await _post(client, "/api/v1/instructors", {
            "name": "Early", "availability": ["08:00-10:00"],
        })
        await _post(client, "/api/v1/instructors", {
            "name": "Late", "availability": ["14:00-16:00"],
        })

        resp = await client.get("/api/v1/instructors/available", params={"time_slot": "08:00-10:00"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 1
        assert body["instructors"][0]["id"] == early["id"]

    async def test_available_none(self, client: AsyncClient):
        await _post(client, "/api/v1/instructors", {"name": "Late", "availability": ["14:00-16:00"]})
        resp = await client.get("/api/v1/instructors/available", params={"time_slot": "08:00"})
        assert resp.status_code == 404
        assert resp.json()["error"] == "NotFound"

    async def test_available_requires_time_slot(self, client: AsyncClient):
        resp = await client.get("/api/v1/instructors/available")
        assert resp.status_code == 422

    async def test_lookup(self, client: AsyncClient):
        created = await _post(client, "/api/v1/instructors", {"name": "Dr. Ada"})
        assert (await client.get(f"/api/v1/instructors/{created['id']}")).json() == created
        assert (await client.get("/api/v1/instructors/by-name/Dr. Ada")).json() == created

        resp = await client.get("/api/v1/instructors/missing")
        assert resp.status_code == 404


class TestClassroomsAPI:

    async def test_create_and_list(self, client: AsyncClient):
        created = await _post(client, "/api/v1/classrooms", {
            "name": "Lab 101", "capacity": 30, "equipment": "Computers",
        })
        assert created["capacity"] == 30

        resp = await client.get("/api/v1/classrooms")
        assert resp.status_code == 200
        assert resp.json() == {"classrooms": [created], "total": 1}

        resp = await client.get(f"/api/v1/classrooms/{created['id']}")
        assert resp.json() == created

    async def test_create_classroom_empty_name(self, client: AsyncClient):
        resp = await client.post("/api/v1/classrooms", json={"name": "", "capacity": 10})
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidPayload"

    async def test_list_classrooms_empty(self, client: AsyncClient):
        resp = await client.get("/api/v1/classrooms")
        assert resp.status_code == 404
        assert resp.json() == {"error": "NotFound", "message": "No classrooms found."}


class TestFieldLimits:
    """Integers must fit SQLite INTEGER; text fields have no length cap."""

    MAX_INT64 = 2**63 - 1

    async def test_classroom_capacity_upper_bound(self, client: AsyncClient):
        body = await _post(client, "/api/v1/classrooms", {"name": "Huge", "capacity": self.MAX_INT64})
        assert body["capacity"] == self.MAX_INT64

        resp = await client.post("/api/v1/classrooms", json={"name": "Big", "capacity": 2**63})
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidPayload"

    async def test_course_duration_upper_bound(self, client: AsyncClient):
        body = await _post(client, "/api/v1/courses", {"name": "Forever", "duration_years": self.MAX_INT64})
        assert body["duration_years"] == self.MAX_INT64

        resp = await client.post("/api/v1/courses", json={"name": "Longer", "duration_years": 2**64})
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidPayload"

    async def test_long_names_accepted(self, client: AsyncClient):
        long_name = "N" * 1000

        course = await _post(client, "/api/v1/courses", {"name": long_name, "duration_years": 1})
        instructor = await _post(client, "/api/v1/instructors", {"name": long_name})
        classroom = await _post(client, "/api/v1/classrooms", {"name": long_name, "capacity": 1})

        assert course["name"] == long_name
        assert instructor["name"] == long_name
        assert classroom["name"] == long_name

        resp = await client.get(f"/api/v1/courses/by-name/{long_name}")
        assert resp.json()["id"] == course["id"]
