"""
Classroom-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from db.models import MAX_INT64


class CreateClassroomRequest(BaseModel):
    """POST /api/v1/classrooms request body"""
    name: str = Field(..., description="Classroom name")
    capacity: int = Field(..., ge=0, le=MAX_INT64, description="Seat count")
    equipment: str = Field("", description="Installed equipment")


class ClassroomResponse(BaseModel):
    """Single classroom"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    capacity: int
    equipment: str


class ClassroomListResponse(BaseModel):
    """GET /api/v1/classrooms response"""
    classrooms: List[ClassroomResponse]
    total: int
