"""
用户 Repository

提供用户的 CRUD 操作。
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import User
from repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """用户 Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """根据 email 查询用户（email 唯一）"""
        return await self.find_first(User.email, email)

    async def get_by_username(self, username: str) -> Optional[User]:
        """根据用户名查询用户，重名时返回主键顺序下的第一个"""
        return await self.find_first(User.username, username)

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None
