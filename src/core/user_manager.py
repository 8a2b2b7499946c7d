"""
用户管理器

职责：
1. 注册用户：必填字段、邮箱格式、邮箱唯一、密码强度校验
2. 按 id / email / 用户名查询
3. 修改用户角色

角色只做记录，不参与任何权限判断。
"""

from typing import List, Optional, Tuple
from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from core.errors import (
    ServiceError,
    RecordNotFoundError,
    InvalidPayloadError,
    DuplicateRecordError,
)
from core.passwords import hash_password
from core.validators import (
    is_valid_email,
    is_strong_password,
    missing_fields,
    PASSWORD_RULE_MESSAGE,
)
from db.models import User, UserRole, utc_now_iso
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger("Timetable")

ANONYMOUS_OWNER = "anonymous"


class UserManager:
    """
    用户管理器

    使用方式：
        async with db_manager.session() as session:
            manager = UserManager(UserRepository(session))
            user = await manager.create_user(...)
    """

    def __init__(self, repository: Optional[UserRepository] = None):
        """
        Args:
            repository: UserRepository 实例，可以稍后通过 set_repository 设置
        """
        self.repository = repository

    def set_repository(self, repository: UserRepository) -> None:
        self.repository = repository

    def _ensure_repository(self) -> UserRepository:
        """确保 Repository 已设置"""
        if self.repository is None:
            raise RuntimeError("UserManager: repository not configured")
        return self.repository

    async def create_user(
        self,
        username: str,
        password: str,
        email: str,
        role: UserRole = UserRole.STUDENT,
        owner: str = ANONYMOUS_OWNER,
    ) -> User:
        """
        注册新用户

        校验顺序：必填字段 → 邮箱格式 → 邮箱唯一 → 密码强度

        Args:
            username: 用户名（可重复）
            password: 明文密码，只保存哈希
            email: 邮箱（唯一）
            role: 用户角色
            owner: 调用方标识

        Returns:
            新建的 User

        Raises:
            InvalidPayloadError: 必填字段为空
            ServiceError: 邮箱格式不合法或密码强度不够
            DuplicateRecordError: 邮箱已存在
        """
        repo = self._ensure_repository()

        if missing_fields(username=username, password=password, email=email):
            raise InvalidPayloadError(
                "Ensure 'username', 'password', and 'email' are provided."
            )

        if not is_valid_email(email):
            raise ServiceError("Invalid email address.")

        if await repo.email_exists(email):
            raise DuplicateRecordError("Email address already exists.")

        if not is_strong_password(password):
            raise ServiceError(PASSWORD_RULE_MESSAGE)

        user = User(
            id=str(uuid4()),
            owner=owner or ANONYMOUS_OWNER,
            username=username,
            hashed_password=hash_password(password),
            email=email,
            role=UserRole(role).value,
            created_at=utc_now_iso(),
        )

        try:
            # 并发注册同一邮箱时由唯一索引兜底；只回滚到保存点，同一 session 里之前的写入保留
            async with repo.session.begin_nested():
                await repo.add(user)
        except IntegrityError:
            raise DuplicateRecordError("Email address already exists.")

        logger.info(f"User created: {user.username} (id={user.id}, role={user.role})")
        return user

    async def get_user(self, user_id: str) -> User:
        """按 id 查询用户"""
        user = await self._ensure_repository().get_by_id(user_id)
        if user is None:
            raise RecordNotFoundError(f"User with id {user_id} not found.")
        return user

    async def get_user_by_email(self, email: str) -> User:
        """按邮箱查询用户"""
        user = await self._ensure_repository().get_by_email(email)
        if user is None:
            raise RecordNotFoundError(f"User with email {email} not found.")
        return user

    async def get_user_by_username(self, username: str) -> User:
        """按用户名查询用户（重名时取第一个）"""
        user = await self._ensure_repository().get_by_username(username)
        if user is None:
            raise RecordNotFoundError(f"User with username {username} not found.")
        return user

    async def get_users(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[List[User], int]:
        """
        列出用户

        Returns:
            (当前页用户, 用户总数)

        Raises:
            RecordNotFoundError: 一个用户都没有
        """
        repo = self._ensure_repository()
        total = await repo.count()
        if total == 0:
            raise RecordNotFoundError("No users found.")
        users = await repo.get_all(limit=limit, offset=offset)
        return users, total

    async def change_user_role(self, user_id: str, role: UserRole) -> User:
        """修改用户角色"""
        repo = self._ensure_repository()
        user = await repo.get_by_id(user_id)
        if user is None:
            raise RecordNotFoundError("User not found.")

        previous = user.role
        user.role = UserRole(role).value
        await repo.update(user)

        logger.info(f"User role changed: {user.username} ({previous} -> {user.role})")
        return user
