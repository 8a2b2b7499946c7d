"""
课表管理器

职责：
1. 手动创建课表条目（只校验三个 id 非空，不检查引用是否存在）
2. 自动生成课表：课程 × 教师 × 教室 的全组合，统一使用默认时间段

自动生成不做任何冲突检测：同一教师 / 教室在同一时间段
会被重复安排，重复调用也会产生重复条目。
"""

from typing import List, Optional, Tuple
from uuid import uuid4

from core.errors import RecordNotFoundError, InvalidPayloadError
from db.models import Timetable
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from repositories.timetable_repo import TimetableRepository
from utils.logger import get_logger

logger = get_logger("Timetable")

DEFAULT_TIME_SLOT = "08:00-10:00"


class TimetableManager:
    """
    课表管理器

    使用方式：
        manager = TimetableManager(
            TimetableRepository(session),
            CourseRepository(session),
            InstructorRepository(session),
            ClassroomRepository(session),
            default_time_slot=config.AUTO_TIMETABLE_SLOT,
        )
        entries = await manager.create_auto_timetable()
    """

    def __init__(
        self,
        timetables: TimetableRepository,
        courses: CourseRepository,
        instructors: InstructorRepository,
        classrooms: ClassroomRepository,
        default_time_slot: str = DEFAULT_TIME_SLOT,
    ):
        self.timetables = timetables
        self.courses = courses
        self.instructors = instructors
        self.classrooms = classrooms
        self.default_time_slot = default_time_slot

    async def create_timetable(
        self,
        course_id: str,
        instructor_id: str,
        classroom_id: str,
        time_slot: str = "",
    ) -> Timetable:
        """
        创建一条课表

        Raises:
            InvalidPayloadError: 任一 id 为空
        """
        if not course_id or not instructor_id or not classroom_id:
            raise InvalidPayloadError(
                "Ensure 'course_id', 'instructor_id', and 'classroom_id' are provided."
            )

        entry = Timetable(
            id=str(uuid4()),
            course_id=course_id,
            instructor_id=instructor_id,
            classroom_id=classroom_id,
            time_slot=time_slot or "",
        )
        await self.timetables.add(entry)

        logger.info(f"Timetable created: {entry}")
        return entry

    async def get_timetable(self, timetable_id: str) -> Timetable:
        entry = await self.timetables.get_by_id(timetable_id)
        if entry is None:
            raise RecordNotFoundError(f"Timetable with id {timetable_id} not found.")
        return entry

    async def get_timetables(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        course_id: Optional[str] = None,
    ) -> Tuple[List[Timetable], int]:
        """
        列出课表

        Args:
            course_id: 只列出该课程的条目

        Raises:
            RecordNotFoundError: 没有任何（匹配的）条目
        """
        if course_id is not None:
            total = await self.timetables.count_by_course(course_id)
            if total == 0:
                raise RecordNotFoundError("No timetables found.")
            entries = await self.timetables.list_by_course(course_id, limit=limit, offset=offset)
            return entries, total

        total = await self.timetables.count()
        if total == 0:
            raise RecordNotFoundError("No timetables found.")
        entries = await self.timetables.get_all(limit=limit, offset=offset)
        return entries, total

    async def create_auto_timetable(self) -> List[Timetable]:
        """
        生成 课程 × 教师 × 教室 的全部组合

        遍历顺序：课程（外层）→ 教师 → 教室（内层），各自按主键顺序。
        所有条目在同一个事务中写入。任一集合为空时返回空列表。

        Returns:
            新生成的课表条目
        """
        courses = await self.courses.get_all()
        instructors = await self.instructors.get_all()
        classrooms = await self.classrooms.get_all()

        generated = [
            Timetable(
                id=str(uuid4()),
                course_id=course.id,
                instructor_id=instructor.id,
                classroom_id=classroom.id,
                time_slot=self.default_time_slot,
            )
            for course in courses
            for instructor in instructors
            for classroom in classrooms
        ]

        if generated:
            await self.timetables.add_all(generated)

        logger.info(
            f"Auto timetable generated: {len(generated)} entries "
            f"({len(courses)} courses x {len(instructors)} instructors x "
            f"{len(classrooms)} classrooms, slot={self.default_time_slot})"
        )
        return generated
