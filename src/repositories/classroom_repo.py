"""
教室 Repository
"""

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Classroom
from repositories.base import BaseRepository


class ClassroomRepository(BaseRepository[Classroom]):
    """教室 Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Classroom)
