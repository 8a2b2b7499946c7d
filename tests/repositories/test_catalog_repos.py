"""
Course, Instructor, Classroom and Timetable repository tests.
"""

from db.models import Course, Instructor, Classroom, Timetable
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from repositories.timetable_repo import TimetableRepository


class TestCourseRepository:

    async def test_json_prerequisites_round_trip(self, course_repo: CourseRepository):
        await course_repo.add(Course(
            id="c1", name="Algorithms", duration_years=1,
            required_equipment="", prerequisites=["Discrete Math", "Programming"],
        ))
        fetched = await course_repo.get_by_id("c1")
        assert fetched.prerequisites == ["Discrete Math", "Programming"]

    async def test_get_by_name(self, course_repo: CourseRepository):
        await course_repo.add(Course(id="c1", name="Algorithms", duration_years=1))
        assert (await course_repo.get_by_name("Algorithms")).id == "c1"
        assert await course_repo.get_by_name("algorithms") is None

    async def test_get_by_name_first_in_key_order(self, course_repo: CourseRepository):
        await course_repo.add(Course(id="z", name="Physics", duration_years=3))
        await course_repo.add(Course(id="m", name="Physics", duration_years=2))
        assert (await course_repo.get_by_name("Physics")).id == "m"


class TestInstructorRepository:

    async def test_list_available_exact_match(self, instructor_repo: InstructorRepository):
        await instructor_repo.add(Instructor(id="i1", name="A", availability=["08:00-10:00"]))
        await instructor_repo.add(Instructor(id="i2", name="B", availability=["10:00-12:00"]))
        await instructor_repo.add(Instructor(id="i3", name="C", availability=["08:00-10:00", "14:00-16:00"]))

        available = await instructor_repo.list_available("08:00-10:00")
        assert [i.id for i in available] == ["i1", "i3"]

        assert await instructor_repo.list_available("08:00") == []

    async def test_list_available_empty_availability(self, instructor_repo: InstructorRepository):
        await instructor_repo.add(Instructor(id="i1", name="A"))
        assert await instructor_repo.list_available("08:00-10:00") == []

    async def test_get_by_name(self, instructor_repo: InstructorRepository):
        await instructor_repo.add(Instructor(id="i1", name="Grace"))
        assert (await instructor_repo.get_by_name("Grace")).id == "i1"
        assert await instructor_repo.get_by_name("Nobody") is None


class TestClassroomRepository:

    async def test_add_and_get(self, classroom_repo: ClassroomRepository):
        await classroom_repo.add(Classroom(id="r1", name="Hall A", capacity=120, equipment="Projector"))
        fetched = await classroom_repo.get_by_id("r1")
        assert fetched.capacity == 120
        assert fetched.equipment == "Projector"


class TestTimetableRepository:

    async def test_dangling_references_are_stored(self, timetable_repo: TimetableRepository):
        await timetable_repo.add(Timetable(
            id="t1", course_id="missing-course", instructor_id="missing-instructor",
            classroom_id="missing-room", time_slot="08:00-10:00",
        ))
        fetched = await timetable_repo.get_by_id("t1")
        assert fetched.course_id == "missing-course"

    async def test_list_by_course(self, timetable_repo: TimetableRepository):
        await timetable_repo.add_all([
            Timetable(id="t2", course_id="c1", instructor_id="i", classroom_id="r", time_slot="x"),
            Timetable(id="t1", course_id="c1", instructor_id="i", classroom_id="r", time_slot="y"),
            Timetable(id="t3", course_id="c2", instructor_id="i", classroom_id="r", time_slot="z"),
        ])
        entries = await timetable_repo.list_by_course("c1")
        assert [t.id for t in entries] == ["t1", "t2"]

    async def test_list_by_course_paginates_in_order(self, timetable_repo: TimetableRepository):
        await timetable_repo.add_all([
            Timetable(id=f"t{i}", course_id="c1", instructor_id="i", classroom_id="r", time_slot="x")
            for i in (3, 1, 2)
        ])

        assert await timetable_repo.count_by_course("c1") == 3
        assert await timetable_repo.count_by_course("c2") == 0

        page = await timetable_repo.list_by_course("c1", limit=2, offset=1)
        assert [t.id for t in page] == ["t2", "t3"]
