"""
FastAPI 依赖注入

提供请求级别的数据库 session 和 manager 实例。

依赖注入链路：
    HTTP Request
        │
        ▼
    get_db_session()        # 创建独立的 AsyncSession
        │
        ├──► get_user_manager()
        ├──► get_catalog_manager()
        └──► get_timetable_manager()

生命周期：
    - DatabaseManager: 全局单例，管理连接池
    - AsyncSession: 请求独立，请求成功 commit，失败 rollback
    - Repository/Manager: 请求独立，绑定到请求的 session
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.config import config
from core.user_manager import UserManager
from core.catalog_manager import CatalogManager
from core.timetable_manager import TimetableManager
from db.database import DatabaseManager
from repositories.user_repo import UserRepository
from repositories.course_repo import CourseRepository
from repositories.instructor_repo import InstructorRepository
from repositories.classroom_repo import ClassroomRepository
from repositories.timetable_repo import TimetableRepository
from utils.logger import get_logger

logger = get_logger("Timetable")


# ============================================================
# 全局单例（跨请求共享）
# ============================================================

_db_manager: Optional[DatabaseManager] = None


async def init_globals() -> None:
    """
    应用启动时初始化全局单例

    在 FastAPI lifespan 中调用。
    """
    global _db_manager

    _db_manager = DatabaseManager(config.DATABASE_URL)
    await _db_manager.initialize()
    logger.info("Database manager initialized")


async def close_globals() -> None:
    """
    应用关闭时清理全局单例

    在 FastAPI lifespan 中调用。
    """
    global _db_manager

    if _db_manager:
        await _db_manager.close()
        logger.info("Database manager closed")

    _db_manager = None


def get_db_manager() -> DatabaseManager:
    """
    获取 DatabaseManager 单例

    Returns:
        DatabaseManager 实例
    """
    if _db_manager is None:
        raise RuntimeError("DatabaseManager not initialized. Call init_globals() first.")
    return _db_manager


# ============================================================
# 请求级别依赖（每个请求独立）
# ============================================================

async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    每个请求获得独立的数据库 session

    请求成功 → 自动 commit
    请求失败 → 自动 rollback

    Yields:
        AsyncSession: 数据库会话
    """
    db_manager = get_db_manager()
    async with db_manager.session() as session:
        yield session


async def get_user_manager(
    session: AsyncSession = Depends(get_db_session),
) -> UserManager:
    """每个请求获得独立的 UserManager"""
    return UserManager(UserRepository(session))


async def get_catalog_manager(
    session: AsyncSession = Depends(get_db_session),
) -> CatalogManager:
    """每个请求获得独立的 CatalogManager"""
    return CatalogManager(
        CourseRepository(session),
        InstructorRepository(session),
        ClassroomRepository(session),
    )


async def get_timetable_manager(
    session: AsyncSession = Depends(get_db_session),
) -> TimetableManager:
    """
    每个请求获得独立的 TimetableManager

    自动生成使用的时间段来自 config.AUTO_TIMETABLE_SLOT。
    """
    return TimetableManager(
        TimetableRepository(session),
        CourseRepository(session),
        InstructorRepository(session),
        ClassroomRepository(session),
        default_time_slot=config.AUTO_TIMETABLE_SLOT,
    )


# ============================================================
# 调用方与分页参数
# ============================================================

async def get_caller(
    x_caller: Optional[str] = Header(None, description="Caller principal recorded as owner"),
) -> str:
    """
    获取调用方标识（只用于记录 owner，不做认证）
    """
    return x_caller or config.DEFAULT_CALLER


class Pagination:
    """limit/offset 分页参数，limit 不超过 MAX_PAGE_SIZE"""

    def __init__(
        self,
        limit: Optional[int] = Query(None, ge=1, description="Max records to return"),
        offset: int = Query(0, ge=0, description="Records to skip"),
    ):
        if limit is None:
            limit = config.DEFAULT_PAGE_SIZE
        self.limit = min(limit, config.MAX_PAGE_SIZE)
        self.offset = offset
