"""
Timetable API Layer

FastAPI-based API for the campus timetable records service.
"""

from .config import config

__all__ = ["config"]
