"""
Pydantic Schemas

Request and response models for the API.
"""

from .users import (
    CreateUserRequest,
    ChangeRoleRequest,
    UserResponse,
    UserListResponse,
)
from .courses import (
    CreateCourseRequest,
    CourseResponse,
    CourseListResponse,
)
from .instructors import (
    CreateInstructorRequest,
    InstructorResponse,
    InstructorListResponse,
)
from .classrooms import (
    CreateClassroomRequest,
    ClassroomResponse,
    ClassroomListResponse,
)
from .timetables import (
    CreateTimetableRequest,
    TimetableResponse,
    TimetableListResponse,
)

__all__ = [
    # User schemas
    "CreateUserRequest",
    "ChangeRoleRequest",
    "UserResponse",
    "UserListResponse",
    # Course schemas
    "CreateCourseRequest",
    "CourseResponse",
    "CourseListResponse",
    # Instructor schemas
    "CreateInstructorRequest",
    "InstructorResponse",
    "InstructorListResponse",
    # Classroom schemas
    "CreateClassroomRequest",
    "ClassroomResponse",
    "ClassroomListResponse",
    # Timetable schemas
    "CreateTimetableRequest",
    "TimetableResponse",
    "TimetableListResponse",
]
