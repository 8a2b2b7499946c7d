"""
数据库层模块
提供数据库连接管理和 ORM 模型定义
"""

from db.database import DatabaseManager, create_test_database_manager
from db.models import (
    Base,
    UserRole,
    User,
    Course,
    Instructor,
    Classroom,
    Timetable,
)

__all__ = [
    # Database Manager
    "DatabaseManager",
    "create_test_database_manager",
    # ORM Models
    "Base",
    "UserRole",
    "User",
    "Course",
    "Instructor",
    "Classroom",
    "Timetable",
]
