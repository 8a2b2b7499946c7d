"""
API 配置

包含服务器配置、CORS 配置、分页默认值、数据库和课表生成配置。
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseSettings):
    """
    API 配置类

    可通过 TIMETABLE_ 前缀的环境变量覆盖配置项。
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMETABLE_",
        case_sensitive=False,
    )

    # 服务器配置
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS 配置
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # 分页默认值
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 500

    # 数据库配置
    DATABASE_URL: str = "sqlite+aiosqlite:///data/timetable.db"

    # 自动生成课表时使用的时间段
    AUTO_TIMETABLE_SLOT: str = "08:00-10:00"

    # 未携带 X-Caller 头时记录的创建者
    DEFAULT_CALLER: str = "anonymous"


# 全局配置实例
config = APIConfig()
