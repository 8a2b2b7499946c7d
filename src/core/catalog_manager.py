"""
课程 / 教师 / 教室管理器

三类实体都是扁平记录，写入时只校验 name 非空。
"""

from typing import List, Optional, Tuple, TypeVar
from uuid import uuid4

from core.errors import RecordNotFoundError, InvalidPayloadError
from db.models import Course, Instructor, Classroom
from repositories.base import BaseRepository
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from utils.logger import get_logger

logger = get_logger("Timetable")

T = TypeVar("T")


async def _list_or_raise(
    repo: BaseRepository,
    empty_message: str,
    limit: Optional[int],
    offset: Optional[int],
) -> Tuple[List[T], int]:
    """分页列出实体；集合为空时抛出 RecordNotFoundError"""
    total = await repo.count()
    if total == 0:
        raise RecordNotFoundError(empty_message)
    items = await repo.get_all(limit=limit, offset=offset)
    return items, total


class CatalogManager:
    """
    课程、教师、教室的创建与查询

    使用方式：
        manager = CatalogManager(
            CourseRepository(session),
            InstructorRepository(session),
            ClassroomRepository(session),
        )
    """

    def __init__(
        self,
        courses: CourseRepository,
        instructors: InstructorRepository,
        classrooms: ClassroomRepository,
    ):
        self.courses = courses
        self.instructors = instructors
        self.classrooms = classrooms

    # ========================================
    # 课程
    # ========================================

    async def create_course(
        self,
        name: str,
        duration_years: int = 0,
        required_equipment: str = "",
        prerequisites: Optional[List[str]] = None,
    ) -> Course:
        """
        创建课程

        Raises:
            InvalidPayloadError: name 为空
        """
        if not name:
            raise InvalidPayloadError("Ensure 'name' and 'duration_years' are provided.")

        course = Course(
            id=str(uuid4()),
            name=name,
            duration_years=duration_years,
            required_equipment=required_equipment or "",
            prerequisites=list(prerequisites or []),
        )
        await self.courses.add(course)

        logger.info(f"Course created: {course.name} (id={course.id})")
        return course

    async def get_course(self, course_id: str) -> Course:
        course = await self.courses.get_by_id(course_id)
        if course is None:
            raise RecordNotFoundError(f"Course with id {course_id} not found.")
        return course

    async def get_course_by_name(self, name: str) -> Course:
        course = await self.courses.get_by_name(name)
        if course is None:
            raise RecordNotFoundError(f"Course with name {name} not found.")
        return course

    async def get_courses(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[List[Course], int]:
        return await _list_or_raise(self.courses, "No courses found.", limit, offset)

    # ========================================
    # 教师
    # ========================================

    async def create_instructor(
        self,
        name: str,
        availability: Optional[List[str]] = None,
        preferred_times: Optional[List[str]] = None,
    ) -> Instructor:
        """
        创建教师

        Raises:
            InvalidPayloadError: name 为空
        """
        if not name:
            raise InvalidPayloadError("Ensure 'name' is provided.")

        instructor = Instructor(
            id=str(uuid4()),
            name=name,
            availability=list(availability or []),
            preferred_times=list(preferred_times or []),
        )
        await self.instructors.add(instructor)

        logger.info(f"Instructor created: {instructor.name} (id={instructor.id})")
        return instructor

    async def get_instructor(self, instructor_id: str) -> Instructor:
        instructor = await self.instructors.get_by_id(instructor_id)
        if instructor is None:
            raise RecordNotFoundError(f"Instructor with id {instructor_id} not found.")
        return instructor

    async def get_instructor_by_name(self, name: str) -> Instructor:
        instructor = await self.instructors.get_by_name(name)
        if instructor is None:
            raise RecordNotFoundError(f"Instructor with name {name} not found.")
        return instructor

    async def get_available_instructors(self, time_slot: str) -> List[Instructor]:
        """
        查询在指定时间段有空的教师

        Raises:
            RecordNotFoundError: 没有任何教师在该时间段有空
        """
        instructors = await self.instructors.list_available(time_slot)
        if not instructors:
            raise RecordNotFoundError("No instructors found.")
        return instructors

    async def get_instructors(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[List[Instructor], int]:
        return await _list_or_raise(self.instructors, "No instructors found.", limit, offset)

    # ========================================
    # 教室
    # ========================================

    async def create_classroom(
        self,
        name: str,
        capacity: int = 0,
        equipment: str = "",
    ) -> Classroom:
        """
        创建教室

        Raises:
            InvalidPayloadError: name 为空
        """
        if not name:
            raise InvalidPayloadError("Ensure 'name' is provided.")

        classroom = Classroom(
            id=str(uuid4()),
            name=name,
            capacity=capacity,
            equipment=equipment or "",
        )
        await self.classrooms.add(classroom)

        logger.info(f"Classroom created: {classroom.name} (id={classroom.id})")
        return classroom

    async def get_classroom(self, classroom_id: str) -> Classroom:
        classroom = await self.classrooms.get_by_id(classroom_id)
        if classroom is None:
            raise RecordNotFoundError(f"Classroom with id {classroom_id} not found.")
        return classroom

    async def get_classrooms(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[List[Classroom], int]:
        return await _list_or_raise(self.classrooms, "No classrooms found.", limit, offset)
