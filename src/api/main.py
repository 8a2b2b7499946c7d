"""
FastAPI 应用入口

创建 FastAPI 应用实例，配置中间件、异常处理器和路由。
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import config
from api.dependencies import init_globals, close_globals
from api.errors import register_exception_handlers
from api.routers import users, courses, instructors, classrooms, timetables
from utils.logger import get_logger, set_global_debug

logger = get_logger("Timetable")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理

    启动时：初始化数据库
    关闭时：释放连接
    """
    logger.info("Starting Timetable API...")
    await init_globals()
    logger.info("Timetable API started successfully")

    yield

    logger.info("Shutting down Timetable API...")
    await close_globals()
    logger.info("Timetable API shutdown complete")


def create_app() -> FastAPI:
    """
    创建 FastAPI 应用

    Returns:
        配置好的 FastAPI 应用实例
    """
    if config.DEBUG:
        set_global_debug(True)

    app = FastAPI(
        title="Timetable API",
        description="Users, courses, instructors, classrooms and timetables",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(app)

    app.include_router(users.router, prefix="/api/v1/users", tags=["users"])
    app.include_router(courses.router, prefix="/api/v1/courses", tags=["courses"])
    app.include_router(instructors.router, prefix="/api/v1/instructors", tags=["instructors"])
    app.include_router(classrooms.router, prefix="/api/v1/classrooms", tags=["classrooms"])
    app.include_router(timetables.router, prefix="/api/v1/timetables", tags=["timetables"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
