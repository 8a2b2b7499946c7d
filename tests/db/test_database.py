"""
DatabaseManager tests: URL handling, transactional sessions, reset.
"""

import pytest
from sqlalchemy import select, text

from db.database import DatabaseManager, DEFAULT_DATABASE_URL
from db.models import Course


def test_default_url():
    manager = DatabaseManager()
    assert manager.database_url == DEFAULT_DATABASE_URL
    assert manager.is_sqlite
    assert not manager.is_memory
    assert not manager.is_initialized


def test_memory_url(db_manager: DatabaseManager):
    assert db_manager.is_memory


async def test_session_commits(db_manager: DatabaseManager):
    async with db_manager.session() as session:
        session.add(Course(id="c1", name="Physics", duration_years=3))

    async with db_manager.session() as session:
        course = await session.get(Course, "c1")
        assert course is not None
        assert course.name == "Physics"


async def test_session_rolls_back_on_error(db_manager: DatabaseManager):
    with pytest.raises(RuntimeError):
        async with db_manager.session() as session:
            session.add(Course(id="c1", name="Physics", duration_years=3))
            await session.flush()
            raise RuntimeError("boom")

    async with db_manager.session() as session:
        assert await session.get(Course, "c1") is None


async def test_reset_drops_rows(db_manager: DatabaseManager):
    async with db_manager.session() as session:
        session.add(Course(id="c1", name="Physics", duration_years=3))

    await db_manager.reset()

    async with db_manager.session() as session:
        result = await session.execute(select(Course))
        assert result.scalars().all() == []


async def test_file_database_creates_parent_dir(tmp_path):
    db_path = tmp_path / "nested" / "timetable.db"
    manager = DatabaseManager(f"sqlite+aiosqlite:///{db_path}")
    try:
        await manager.initialize()
        assert db_path.parent.is_dir()
        assert manager.is_initialized

        async with manager.session() as session:
            mode = (await session.execute(text("PRAGMA journal_mode"))).scalar()
        assert mode == "wal"
    finally:
        await manager.close()
    assert not manager.is_initialized
