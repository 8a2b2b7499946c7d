"""
课表 Repository
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Timetable
from repositories.base import BaseRepository


class TimetableRepository(BaseRepository[Timetable]):
    """课表 Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Timetable)

    async def list_by_course(
        self,
        course_id: str,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Timetable]:
        """列出某门课程的课表条目"""
        return await self.find_all(Timetable.course_id == course_id, limit=limit, offset=offset)

    async def count_by_course(self, course_id: str) -> int:
        return await self.count(Timetable.course_id == course_id)
