"""
课程 Repository
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Course
from repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    """课程 Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Course)

    async def get_by_name(self, name: str) -> Optional[Course]:
        """根据课程名查询（精确匹配，区分大小写）"""
        return await self.find_first(Course.name, name)
