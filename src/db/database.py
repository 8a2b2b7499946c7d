"""
数据库管理器

DatabaseManager 持有异步引擎和 session 工厂，API 进程内全局唯一；
每个请求通过 session() 拿到独立的 AsyncSession。

SQLite 文件库开启 WAL；内存库（测试用）固定单连接。
SQLite 连接关闭驱动的隐式事务，由 SQLAlchemy 显式 BEGIN，SAVEPOINT 才能正常工作。
"""

from pathlib import Path
from typing import Any, Dict, Optional, AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    AsyncEngine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from db.models import Base
from utils.logger import get_logger

logger = get_logger("Timetable")

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///data/timetable.db"
MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA cache_size=-64000",  # 64MB
)


class DatabaseManager:
    """
    课表数据库管理器

    使用方式：
        db_manager = DatabaseManager(config.DATABASE_URL)
        await db_manager.initialize()

        async with db_manager.session() as session:
            repo = CourseRepository(session)
            ...
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        self.url = make_url(database_url or DEFAULT_DATABASE_URL)
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

        logger.info(f"DatabaseManager created with URL: {self.url.render_as_string(hide_password=True)}")

    @property
    def database_url(self) -> str:
        return self.url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    @property
    def is_memory(self) -> bool:
        return self.is_sqlite and self.url.database in (None, "", ":memory:")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    def _engine_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"echo": self.echo}
        if not self.is_sqlite:
            return kwargs

        kwargs["connect_args"] = {"check_same_thread": False}
        if self.is_memory:
            # 每个连接各自一份内存库，只能共用一个连接
            kwargs["poolclass"] = StaticPool
        else:
            Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)
        return kwargs

    def _install_sqlite_hooks(self, engine: AsyncEngine) -> None:
        pragmas = () if self.is_memory else SQLITE_PRAGMAS

        @event.listens_for(engine.sync_engine, "connect")
        def _on_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            for pragma in pragmas:
                cursor.execute(pragma)
            cursor.close()

        @event.listens_for(engine.sync_engine, "begin")
        def _on_begin(conn):
            conn.exec_driver_sql("BEGIN")

    async def initialize(self) -> None:
        """创建引擎、配置 pragma、建表（重复调用无副作用）"""
        if self.is_initialized:
            return

        self._engine = create_async_engine(self.url, **self._engine_kwargs())
        if self.is_sqlite:
            self._install_sqlite_hooks(self._engine)

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Database ready ({', '.join(Base.metadata.tables)})")

    async def reset(self) -> None:
        """删除并重建全部表（seed 脚本 --reset 使用）"""
        await self.initialize()
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        logger.warning("All timetable tables dropped and recreated")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        获取一个事务性 session

        正常退出 → commit
        抛出异常 → rollback 后继续抛出
        """
        await self.initialize()

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection closed")


def create_test_database_manager() -> DatabaseManager:
    """内存库 DatabaseManager，测试专用"""
    return DatabaseManager(MEMORY_DATABASE_URL)
