"""
API Routers

Contains route handlers for users, courses, instructors, classrooms and timetables.
"""

from . import users, courses, instructors, classrooms, timetables

__all__ = ["users", "courses", "instructors", "classrooms", "timetables"]
