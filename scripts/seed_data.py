#!/usr/bin/env python3
"""
Bootstrap an admin user and optional sample catalog data.

Usage:
    python scripts/seed_data.py admin admin@example.edu
    python scripts/seed_data.py admin admin@example.edu --password Secret123
    python scripts/seed_data.py admin admin@example.edu --sample --auto-timetable
    python scripts/seed_data.py admin admin@example.edu --reset --sample
"""

import sys
import asyncio
import argparse
from pathlib import Path
from getpass import getpass

# 与 run_server.py 对齐：注入 src 路径 + load_dotenv
SRC_DIR = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from dotenv import load_dotenv
load_dotenv()


SAMPLE_COURSES = [
    {"name": "Computer Science", "duration_years": 4,
     "required_equipment": "Computers", "prerequisites": ["Mathematics"]},
    {"name": "Mathematics", "duration_years": 3,
     "required_equipment": "Whiteboard", "prerequisites": []},
]

SAMPLE_INSTRUCTORS = [
    {"name": "Dr. Ada Byron", "availability": ["08:00-10:00", "10:00-12:00"],
     "preferred_times": ["08:00-10:00"]},
    {"name": "Prof. Alan Turing", "availability": ["10:00-12:00"],
     "preferred_times": ["10:00-12:00"]},
]

SAMPLE_CLASSROOMS = [
    {"name": "Lab 101", "capacity": 30, "equipment": "Computers"},
    {"name": "Hall A", "capacity": 120, "equipment": "Projector"},
]


async def main(
    username: str,
    email: str,
    password: str,
    sample: bool,
    auto: bool,
    reset: bool = False,
) -> None:
    from api.config import config
    from core.catalog_manager import CatalogManager
    from core.errors import ServiceError
    from core.timetable_manager import TimetableManager
    from core.user_manager import UserManager
    from db.database import DatabaseManager
    from db.models import UserRole
    from repositories.user_repo import UserRepository
    from repositories.course_repo import CourseRepository
    from repositories.instructor_repo import InstructorRepository
    from repositories.classroom_repo import ClassroomRepository
    from repositories.timetable_repo import TimetableRepository

    db = DatabaseManager(config.DATABASE_URL)
    if reset:
        await db.reset()
    else:
        await db.initialize()

    try:
        async with db.session() as session:
            users = UserManager(UserRepository(session))

            existing = await users.repository.get_by_email(email)
            if existing:
                if existing.role != UserRole.ADMIN.value:
                    await users.change_user_role(existing.id, UserRole.ADMIN)
                    print(f"User '{email}' already exists (id={existing.id}), upgraded: role → admin")
                else:
                    print(f"User '{email}' already exists (id={existing.id}), already admin")
            else:
                try:
                    user = await users.create_user(
                        username=username,
                        password=password,
                        email=email,
                        role=UserRole.ADMIN,
                        owner="seed-script",
                    )
                except ServiceError as e:
                    print(f"Cannot create admin: {e.message}")
                    sys.exit(1)
                print(f"Admin user created: {user.username} (id={user.id})")

        if not sample:
            return

        async with db.session() as session:
            courses = CourseRepository(session)
            instructors = InstructorRepository(session)
            classrooms = ClassroomRepository(session)
            catalog = CatalogManager(courses, instructors, classrooms)

            for payload in SAMPLE_COURSES:
                await catalog.create_course(**payload)
            for payload in SAMPLE_INSTRUCTORS:
                await catalog.create_instructor(**payload)
            for payload in SAMPLE_CLASSROOMS:
                await catalog.create_classroom(**payload)
            print(
                f"Sample data created: {len(SAMPLE_COURSES)} courses, "
                f"{len(SAMPLE_INSTRUCTORS)} instructors, {len(SAMPLE_CLASSROOMS)} classrooms"
            )

            if auto:
                timetables = TimetableManager(
                    TimetableRepository(session),
                    courses,
                    instructors,
                    classrooms,
                    default_time_slot=config.AUTO_TIMETABLE_SLOT,
                )
                entries = await timetables.create_auto_timetable()
                print(f"Auto timetable generated: {len(entries)} entries")

    finally:
        await db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the Timetable database")
    parser.add_argument("username", help="Admin username")
    parser.add_argument("email", help="Admin email")
    parser.add_argument("--password", help="Admin password (prompted if not given)")
    parser.add_argument("--sample", action="store_true",
                        help="Also create sample courses, instructors and classrooms")
    parser.add_argument("--auto-timetable", action="store_true",
                        help="Generate the full timetable after seeding sample data")
    parser.add_argument("--reset", action="store_true",
                        help="Drop and recreate all tables first (destroys existing data)")

    args = parser.parse_args()

    password = args.password
    if not password:
        password = getpass("Password: ")
        confirm = getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match")
            sys.exit(1)

    asyncio.run(main(args.username, args.email, password, args.sample, args.auto_timetable, args.reset))
