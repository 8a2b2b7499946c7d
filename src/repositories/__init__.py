"""
数据访问层模块 (Repository Layer)

提供数据库操作的抽象接口，遵循 Repository 模式。
所有数据库操作都通过 ORM 进行。
"""

from repositories.base import BaseRepository
from repositories.user_repo import UserRepository
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from repositories.timetable_repo import TimetableRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CourseRepository",
    "InstructorRepository",
    "ClassroomRepository",
    "TimetableRepository",
]
