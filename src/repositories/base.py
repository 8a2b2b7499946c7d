"""
Repository 基类

列表查询一律按主键升序返回，分页在 SQL 里完成。
"""

from abc import ABC
from typing import TypeVar, Generic, Optional, List, Any, Type

from sqlalchemy import Select, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Base


T = TypeVar("T", bound=Base)


class BaseRepository(ABC, Generic[T]):
    """
    Repository 抽象基类

    子类只需绑定模型，并按需补充查询：
        class CourseRepository(BaseRepository[Course]):
            def __init__(self, session: AsyncSession):
                super().__init__(session, Course)

            async def get_by_name(self, name: str) -> Optional[Course]:
                return await self.find_first(Course.name, name)
    """

    def __init__(self, session: AsyncSession, model_class: Type[T]):
        self._session = session
        self._model_class = model_class

    @property
    def session(self) -> AsyncSession:
        return self._session

    def _ordered(self, *criteria: Any) -> Select:
        return select(self._model_class).where(*criteria).order_by(self._model_class.id)

    # ========================================
    # 查询
    # ========================================

    async def get_by_id(self, id: Any) -> Optional[T]:
        return await self._session.get(self._model_class, id)

    async def find_all(
        self,
        *criteria: Any,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[T]:
        """
        按主键升序列出满足条件的实体

        Args:
            *criteria: SQLAlchemy 过滤表达式，例如 Timetable.course_id == "c1"
            limit: 限制返回数量
            offset: 跳过前 N 条
        """
        query = self._ordered(*criteria)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def get_all(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[T]:
        return await self.find_all(limit=limit, offset=offset)

    async def find_first(self, column: Any, value: Any) -> Optional[T]:
        """按某列精确匹配，返回主键顺序下的第一条"""
        result = await self._session.execute(self._ordered(column == value).limit(1))
        return result.scalars().first()

    async def count(self, *criteria: Any) -> int:
        query = select(func.count()).select_from(self._model_class).where(*criteria)
        result = await self._session.execute(query)
        return result.scalar_one()

    # ========================================
    # 写入（flush 到当前事务，由 session 上下文统一提交）
    # ========================================

    async def add(self, entity: T) -> T:
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def add_all(self, entities: List[T]) -> List[T]:
        """批量写入，同一个事务内"""
        self._session.add_all(entities)
        await self._session.flush()
        for entity in entities:
            await self._session.refresh(entity)
        return entities

    async def update(self, entity: T) -> T:
        """实体须已在当前 Session 中"""
        await self._session.flush()
        await self._session.refresh(entity)
        return entity
