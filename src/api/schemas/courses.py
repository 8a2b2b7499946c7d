"""
Course-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from db.models import MAX_INT64


class CreateCourseRequest(BaseModel):
    """POST /api/v1/courses request body"""
    name: str = Field(..., description="Course name")
    duration_years: int = Field(..., ge=0, le=MAX_INT64, description="Course length in years")
    required_equipment: str = Field("", description="Equipment the course needs")
    prerequisites: List[str] = Field(default_factory=list, description="Prerequisite courses")


class CourseResponse(BaseModel):
    """Single course"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    duration_years: int
    required_equipment: str
    prerequisites: List[str]


class CourseListResponse(BaseModel):
    """GET /api/v1/courses response"""
    courses: List[CourseResponse]
    total: int
