"""
SQLAlchemy ORM 模型定义

表结构：
- users: 用户表（email 唯一）
- courses: 课程表
- instructors: 教师表
- classrooms: 教室表
- timetables: 课表条目

各表之间不建外键：课表条目引用的 course/instructor/classroom
可以不存在，也不做级联删除。
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from sqlalchemy import (
    String,
    Text,
    BigInteger,
    JSON,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)


# SQLite INTEGER 为有符号 64 位
MAX_INT64 = 2**63 - 1


def utc_now_iso() -> str:
    """当前 UTC 时间（ISO-8601 字符串）"""
    return datetime.now(timezone.utc).isoformat()


class UserRole(str, Enum):
    """用户角色（只做记录，不做权限校验）"""
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class Base(DeclarativeBase):
    """SQLAlchemy 声明式基类"""
    pass


class User(Base):
    """
    用户表

    password 字段只存 bcrypt 哈希，不会出现在任何响应里。
    owner 记录创建该用户的调用方。
    """
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # 创建者（调用方标识）
    owner: Mapped[str] = mapped_column(Text, nullable=False)

    # 用户名不要求唯一
    username: Mapped[str] = mapped_column(Text, nullable=False, index=True)

    hashed_password: Mapped[str] = mapped_column(String(128), nullable=False)

    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)

    # student / instructor / admin
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=UserRole.STUDENT.value)

    created_at: Mapped[str] = mapped_column(
        String(40),
        default=utc_now_iso,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"


class Course(Base):
    """课程表"""
    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    duration_years: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    required_equipment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # 先修课程（名称或 id，均不校验）
    prerequisites: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, name={self.name})>"


class Instructor(Base):
    """
    教师表

    availability 与 preferred_times 都是时间段字符串列表，
    例如 ["08:00-10:00", "10:00-12:00"]。
    """
    __tablename__ = "instructors"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    availability: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    preferred_times: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Instructor(id={self.id}, name={self.name})>"


class Classroom(Base):
    """教室表"""
    __tablename__ = "classrooms"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    capacity: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    equipment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Classroom(id={self.id}, name={self.name}, capacity={self.capacity})>"


class Timetable(Base):
    """
    课表条目

    course_id / instructor_id / classroom_id 只是普通字符串列，
    不是外键。
    """
    __tablename__ = "timetables"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    course_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    instructor_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    classroom_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    time_slot: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return (
            f"<Timetable(id={self.id}, course={self.course_id}, "
            f"instructor={self.instructor_id}, classroom={self.classroom_id}, "
            f"slot={self.time_slot})>"
        )
