"""
教师 Repository

availability 存在 JSON 列里，按时间段筛选在 Python 侧完成，
避免依赖特定数据库的 JSON 函数。
"""

from typing import Optional, List

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Instructor
from repositories.base import BaseRepository


class InstructorRepository(BaseRepository[Instructor]):
    """教师 Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Instructor)

    async def get_by_name(self, name: str) -> Optional[Instructor]:
        """根据姓名查询教师"""
        return await self.find_first(Instructor.name, name)

    async def list_available(self, time_slot: str) -> List[Instructor]:
        """
        列出 availability 中包含指定时间段的教师

        Args:
            time_slot: 时间段字符串，精确匹配

        Returns:
            按主键顺序排列的教师列表
        """
        instructors = await self.get_all()
        return [i for i in instructors if time_slot in (i.availability or [])]
