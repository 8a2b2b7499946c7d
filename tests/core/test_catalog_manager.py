"""
CatalogManager: courses, instructors and classrooms.
"""

import pytest

from core.catalog_manager import CatalogManager
from core.errors import RecordNotFoundError, InvalidPayloadError
from db.models import Course, Instructor, Classroom


class TestCourses:

    async def test_create_course(self, catalog_manager: CatalogManager):
        course = await catalog_manager.create_course(
            name="Mathematics", duration_years=3, prerequisites=["Algebra"],
        )
        assert course.id
        assert course.required_equipment == ""
        assert course.prerequisites == ["Algebra"]

    async def test_create_course_without_name(self, catalog_manager: CatalogManager):
        with pytest.raises(InvalidPayloadError) as exc_info:
            await catalog_manager.create_course(name="", duration_years=1)
        assert exc_info.value.message == "Ensure 'name' and 'duration_years' are provided."

    async def test_get_course_by_name(self, catalog_manager: CatalogManager, test_course: Course):
        assert (await catalog_manager.get_course_by_name("Computer Science")).id == test_course.id

    async def test_get_course_by_name_not_found(self, catalog_manager: CatalogManager):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await catalog_manager.get_course_by_name("Alchemy")
        assert exc_info.value.message == "Course with name Alchemy not found."

    async def test_get_course(self, catalog_manager: CatalogManager, test_course: Course):
        assert (await catalog_manager.get_course(test_course.id)).name == "Computer Science"
        with pytest.raises(RecordNotFoundError):
            await catalog_manager.get_course("missing")

    async def test_get_courses_empty(self, catalog_manager: CatalogManager):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await catalog_manager.get_courses()
        assert exc_info.value.message == "No courses found."

    async def test_get_courses_paginated(self, catalog_manager: CatalogManager):
        for i in range(3):
            await catalog_manager.create_course(name=f"Course {i}", duration_years=1)

        page, total = await catalog_manager.get_courses(limit=2, offset=2)
        assert total == 3
        assert len(page) == 1


class TestInstructors:

    async def test_create_instructor_without_name(self, catalog_manager: CatalogManager):
        with pytest.raises(InvalidPayloadError) as exc_info:
            await catalog_manager.create_instructor(name="")
        assert exc_info.value.message == "Ensure 'name' is provided."

    async def test_defaults_to_empty_lists(self, catalog_manager: CatalogManager):
        instructor = await catalog_manager.create_instructor(name="Grace")
        assert instructor.availability == []
        assert instructor.preferred_times == []

    async def test_get_instructor_by_name(
        self, catalog_manager: CatalogManager, test_instructor: Instructor
    ):
        assert (await catalog_manager.get_instructor_by_name("Dr. Byron")).id == test_instructor.id
        with pytest.raises(RecordNotFoundError):
            await catalog_manager.get_instructor_by_name("Nobody")

    async def test_get_available_instructors(
        self, catalog_manager: CatalogManager, test_instructor: Instructor
    ):
        await catalog_manager.create_instructor(name="Late", availability=["16:00-18:00"])

        available = await catalog_manager.get_available_instructors("10:00-12:00")
        assert [i.id for i in available] == [test_instructor.id]

    async def test_get_available_instructors_none(
        self, catalog_manager: CatalogManager, test_instructor: Instructor
    ):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await catalog_manager.get_available_instructors("20:00-22:00")
        assert exc_info.value.message == "No instructors found."

    async def test_get_instructors(self, catalog_manager: CatalogManager, test_instructor: Instructor):
        instructors, total = await catalog_manager.get_instructors()
        assert total == 1
        assert instructors[0].id == test_instructor.id

    async def test_get_instructor(self, catalog_manager: CatalogManager, test_instructor: Instructor):
        assert (await catalog_manager.get_instructor(test_instructor.id)).name == "Dr. Byron"
        with pytest.raises(RecordNotFoundError):
            await catalog_manager.get_instructor("missing")


class TestClassrooms:

    async def test_create_classroom_without_name(self, catalog_manager: CatalogManager):
        with pytest.raises(InvalidPayloadError):
            await catalog_manager.create_classroom(name="", capacity=10)

    async def test_get_classrooms_empty(self, catalog_manager: CatalogManager):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await catalog_manager.get_classrooms()
        assert exc_info.value.message == "No classrooms found."

    async def test_get_classroom(self, catalog_manager: CatalogManager, test_classroom: Classroom):
        fetched = await catalog_manager.get_classroom(test_classroom.id)
        assert fetched.capacity == 30
        with pytest.raises(RecordNotFoundError):
            await catalog_manager.get_classroom("missing")
