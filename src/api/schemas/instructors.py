"""
Instructor-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class CreateInstructorRequest(BaseModel):
    """POST /api/v1/instructors request body"""
    name: str = Field(..., description="Instructor name")
    availability: List[str] = Field(default_factory=list, description="Time slots the instructor can teach")
    preferred_times: List[str] = Field(default_factory=list, description="Preferred time slots")


class InstructorResponse(BaseModel):
    """Single instructor"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    availability: List[str]
    preferred_times: List[str]


class InstructorListResponse(BaseModel):
    """GET /api/v1/instructors response"""
    instructors: List[InstructorResponse]
    total: int
