"""
Core模块
提供业务管理器和领域异常
"""

from core.errors import (
    ServiceError,
    RecordNotFoundError,
    InvalidPayloadError,
    DuplicateRecordError,
)

from core.user_manager import UserManager
from core.catalog_manager import CatalogManager
from core.timetable_manager import TimetableManager, DEFAULT_TIME_SLOT


__all__ = [
    # Errors
    "ServiceError",
    "RecordNotFoundError",
    "InvalidPayloadError",
    "DuplicateRecordError",

    # Managers
    "UserManager",
    "CatalogManager",
    "TimetableManager",
    "DEFAULT_TIME_SLOT",
]
