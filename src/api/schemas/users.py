"""
User-related Pydantic schemas

Defines request and response models for user endpoints.
The stored password hash is never part of a response.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from db.models import UserRole


# ============================================================
# Request Models
# ============================================================

class CreateUserRequest(BaseModel):
    """POST /api/v1/users request body"""
    username: str = Field(..., description="Username (not unique)")
    password: str = Field(..., description="6-20 chars with a digit, a lowercase and an uppercase letter")
    email: str = Field(..., description="Unique email address")
    role: UserRole = Field(UserRole.STUDENT, description="student, instructor or admin")


class ChangeRoleRequest(BaseModel):
    """PUT /api/v1/users/{user_id}/role request body"""
    role: UserRole = Field(..., description="New role")


# ============================================================
# Response Models
# ============================================================

class UserResponse(BaseModel):
    """Single user"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner: str
    username: str
    email: str
    role: UserRole
    created_at: str


class UserListResponse(BaseModel):
    """GET /api/v1/users response"""
    users: List[UserResponse]
    total: int
