"""
Users Router

处理用户相关的 API 端点：
- POST /api/v1/users - 注册用户
- GET /api/v1/users - 用户列表
- GET /api/v1/users/{user_id} - 按 id 查询
- GET /api/v1/users/by-email/{email} - 按邮箱查询
- GET /api/v1/users/by-username/{username} - 按用户名查询
- PUT /api/v1/users/{user_id}/role - 修改角色

角色只做记录，任何调用方都可以调用这些端点。
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_manager, get_caller, Pagination
from api.schemas.users import (
    CreateUserRequest,
    ChangeRoleRequest,
    UserResponse,
    UserListResponse,
)
from core.user_manager import UserManager

router = APIRouter()


@router.post("", response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    caller: str = Depends(get_caller),
    manager: UserManager = Depends(get_user_manager),
):
    """注册用户，caller 记录为 owner"""
    user = await manager.create_user(
        username=request.username,
        password=request.password,
        email=request.email,
        role=request.role,
        owner=caller,
    )
    return UserResponse.model_validate(user)


@router.get("", response_model=UserListResponse)
async def list_users(
    page: Pagination = Depends(),
    manager: UserManager = Depends(get_user_manager),
):
    """列出用户（没有用户时返回 404）"""
    users, total = await manager.get_users(limit=page.limit, offset=page.offset)
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        total=total,
    )


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    manager: UserManager = Depends(get_user_manager),
):
    user = await manager.get_user_by_email(email)
    return UserResponse.model_validate(user)


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    manager: UserManager = Depends(get_user_manager),
):
    user = await manager.get_user_by_username(username)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    manager: UserManager = Depends(get_user_manager),
):
    user = await manager.get_user(user_id)
    return UserResponse.model_validate(user)


@router.put("/{user_id}/role", response_model=UserResponse)
async def change_user_role(
    user_id: str,
    request: ChangeRoleRequest,
    manager: UserManager = Depends(get_user_manager),
):
    """修改用户角色"""
    user = await manager.change_user_role(user_id, request.role)
    return UserResponse.model_validate(user)
