"""
Shared pytest fixtures for the timetable service.

Every test gets a fresh in-memory SQLite database, so no cleanup
between tests is needed.
"""

import os

# --- env must be set before any api/utils import ---
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from core.catalog_manager import CatalogManager
from core.timetable_manager import TimetableManager
from core.user_manager import UserManager
from db.database import create_test_database_manager, DatabaseManager
from db.models import User, Course, Instructor, Classroom, UserRole
from repositories.user_repo import UserRepository
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from repositories.timetable_repo import TimetableRepository


STRONG_PASSWORD = "Passw0rd"


# ============================================================
# Database fixtures
# ============================================================


@pytest.fixture
async def db_manager() -> DatabaseManager:
    """Function-scoped in-memory SQLite database."""
    manager = create_test_database_manager()
    await manager.initialize()
    yield manager
    await manager.close()


@pytest.fixture
async def db_session(db_manager: DatabaseManager) -> AsyncSession:
    async with db_manager.session() as session:
        yield session


# ============================================================
# Repository fixtures
# ============================================================


@pytest.fixture
def user_repo(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def course_repo(db_session: AsyncSession) -> CourseRepository:
    return CourseRepository(db_session)


@pytest.fixture
def instructor_repo(db_session: AsyncSession) -> InstructorRepository:
    return InstructorRepository(db_session)


@pytest.fixture
def classroom_repo(db_session: AsyncSession) -> ClassroomRepository:
    return ClassroomRepository(db_session)


@pytest.fixture
def timetable_repo(db_session: AsyncSession) -> TimetableRepository:
    return TimetableRepository(db_session)


# ============================================================
# Manager fixtures
# ============================================================


@pytest.fixture
def user_manager(user_repo: UserRepository) -> UserManager:
    return UserManager(user_repo)


@pytest.fixture
def catalog_manager(
    course_repo: CourseRepository,
    instructor_repo: InstructorRepository,
    classroom_repo: ClassroomRepository,
) -> CatalogManager:
    return CatalogManager(course_repo, instructor_repo, classroom_repo)


@pytest.fixture
def timetable_manager(
    timetable_repo: TimetableRepository,
    course_repo: CourseRepository,
    instructor_repo: InstructorRepository,
    classroom_repo: ClassroomRepository,
) -> TimetableManager:
    return TimetableManager(timetable_repo, course_repo, instructor_repo, classroom_repo)


# ============================================================
# Pre-created record fixtures
# ============================================================


@pytest.fixture
async def test_user(user_manager: UserManager) -> User:
    """A pre-created student."""
    return await user_manager.create_user(
        username="alice",
        password=STRONG_PASSWORD,
        email="alice@example.edu",
        role=UserRole.STUDENT,
        owner="tester",
    )


@pytest.fixture
async def test_course(catalog_manager: CatalogManager) -> Course:
    return await catalog_manager.create_course(
        name="Computer Science",
        duration_years=4,
        required_equipment="Computers",
        prerequisites=["Mathematics"],
    )


@pytest.fixture
async def test_instructor(catalog_manager: CatalogManager) -> Instructor:
    return await catalog_manager.create_instructor(
        name="Dr. Byron",
        availability=["08:00-10:00", "10:00-12:00"],
        preferred_times=["08:00-10:00"],
    )


@pytest.fixture
async def test_classroom(catalog_manager: CatalogManager) -> Classroom:
    return await catalog_manager.create_classroom(
        name="Lab 101",
        capacity=30,
        equipment="Computers",
    )
