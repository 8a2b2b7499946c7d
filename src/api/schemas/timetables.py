"""
Timetable-related Pydantic schemas

Referenced course/instructor/classroom ids are stored as given;
nothing checks that they exist.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class CreateTimetableRequest(BaseModel):
    """POST /api/v1/timetables request body"""
    course_id: str = Field(..., description="Course ID")
    instructor_id: str = Field(..., description="Instructor ID")
    classroom_id: str = Field(..., description="Classroom ID")
    time_slot: str = Field("", description="Opaque time slot label, e.g. 08:00-10:00")


class TimetableResponse(BaseModel):
    """Single timetable entry"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    course_id: str
    instructor_id: str
    classroom_id: str
    time_slot: str


class TimetableListResponse(BaseModel):
    """GET /api/v1/timetables and POST /api/v1/timetables/auto response"""
    timetables: List[TimetableResponse]
    total: int
