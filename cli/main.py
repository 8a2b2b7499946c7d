"""Timetable CLI 主入口"""

import asyncio
from typing import List, Optional

import typer
from rich.prompt import Prompt

from .api_client import APIClient, APIError
from .config import CLIState
from . import ui

app = typer.Typer(
    name="timetable",
    help="Timetable CLI - Terminal interface for the Timetable API",
    no_args_is_help=True,
)

state = CLIState.load()

URL_OPTION = typer.Option(None, "--url", "-u", help="API base URL (defaults to saved URL)")


def get_client(base_url: Optional[str] = None) -> APIClient:
    return APIClient(base_url=base_url or state.base_url, caller=state.caller)


def run(coro):
    """执行请求；服务端分类错误直接打印并退出"""
    try:
        return asyncio.run(coro)
    except APIError as e:
        ui.print_error(f"{e.category}: {e.message}")
        raise typer.Exit(1)


# ============================================================
# 配置命令
# ============================================================

@app.command("config")
def configure(
    base_url: Optional[str] = typer.Option(None, "--url", "-u", help="Save default API base URL"),
    caller: Optional[str] = typer.Option(None, "--caller", "-c", help="Save caller recorded as owner"),
    reset: bool = typer.Option(False, "--reset", help="Restore defaults"),
):
    """Show or update saved CLI settings."""
    if reset:
        state.clear()
    if base_url:
        state.base_url = base_url
    if caller:
        state.caller = caller
    if base_url or caller:
        state.save()

    ui.console.print("[cyan]Current State:[/cyan]")
    ui.console.print(f"  base_url: {state.base_url}")
    ui.console.print(f"  caller: {state.caller or '[dim](anonymous)[/dim]'}")


@app.command("health")
def health(base_url: Optional[str] = URL_OPTION):
    """Check that the server is reachable."""
    api = get_client(base_url)
    if asyncio.run(api.health_check()):
        ui.print_success(f"Server at {api.base_url} is healthy")
    else:
        ui.print_error(f"Cannot connect to server at {api.base_url}")
        ui.print_info("Make sure the server is running: python run_server.py")
        raise typer.Exit(1)


# ============================================================
# 用户命令
# ============================================================

@app.command("register")
def register(
    username: str = typer.Argument(..., help="Username"),
    email: str = typer.Argument(..., help="Email"),
    role: str = typer.Option("student", "--role", "-r", help="student, instructor or admin"),
    base_url: Optional[str] = URL_OPTION,
):
    """Register a new user."""
    password = Prompt.ask("Password", password=True)
    user = run(get_client(base_url).create_user(username, password, email, role))
    ui.print_success(f"User created: {user['username']} (id={user['id']})")


@app.command("users")
def list_users(
    limit: int = typer.Option(50, "--limit", "-l"),
    offset: int = typer.Option(0, "--offset", "-o"),
    base_url: Optional[str] = URL_OPTION,
):
    """List users."""
    data = run(get_client(base_url).list_users(limit, offset))
    ui.print_users_table(data["users"], data["total"])


@app.command("user")
def show_user(
    user_id: str = typer.Argument(..., help="User ID"),
    base_url: Optional[str] = URL_OPTION,
):
    """Show one user."""
    ui.print_user_detail(run(get_client(base_url).get_user(user_id)))


@app.command("set-role")
def set_role(
    user_id: str = typer.Argument(..., help="User ID"),
    role: str = typer.Argument(..., help="student, instructor or admin"),
    base_url: Optional[str] = URL_OPTION,
):
    """Change a user's role."""
    user = run(get_client(base_url).change_role(user_id, role))
    ui.print_success(f"{user['username']} is now {user['role']}")


# ============================================================
# 目录命令
# ============================================================

@app.command("add-course")
def add_course(
    name: str = typer.Argument(..., help="Course name"),
    years: int = typer.Option(1, "--years", "-y", help="Duration in years"),
    equipment: str = typer.Option("", "--equipment", "-e"),
    prerequisite: List[str] = typer.Option([], "--prerequisite", "-p", help="Repeatable"),
    base_url: Optional[str] = URL_OPTION,
):
    """Create a course."""
    course = run(get_client(base_url).create_course({
        "name": name,
        "duration_years": years,
        "required_equipment": equipment,
        "prerequisites": prerequisite,
    }))
    ui.print_success(f"Course created: {course['name']} (id={course['id']})")


@app.command("courses")
def list_courses(
    limit: int = typer.Option(50, "--limit", "-l"),
    offset: int = typer.Option(0, "--offset", "-o"),
    base_url: Optional[str] = URL_OPTION,
):
    """List courses."""
    data = run(get_client(base_url).list_courses(limit, offset))
    ui.print_courses_table(data["courses"], data["total"])


@app.command("add-instructor")
def add_instructor(
    name: str = typer.Argument(..., help="Instructor name"),
    slot: List[str] = typer.Option([], "--slot", "-s", help="Available time slot (repeatable)"),
    preferred: List[str] = typer.Option([], "--preferred", help="Preferred time slot (repeatable)"),
    base_url: Optional[str] = URL_OPTION,
):
    """Create an instructor."""
    instructor = run(get_client(base_url).create_instructor({
        "name": name,
        "availability": slot,
        "preferred_times": preferred,
    }))
    ui.print_success(f"Instructor created: {instructor['name']} (id={instructor['id']})")


@app.command("instructors")
def list_instructors(
    limit: int = typer.Option(50, "--limit", "-l"),
    offset: int = typer.Option(0, "--offset", "-o"),
    base_url: Optional[str] = URL_OPTION,
):
    """List instructors."""
    data = run(get_client(base_url).list_instructors(limit, offset))
    ui.print_instructors_table(data["instructors"], data["total"])


@app.command("available")
def available(
    time_slot: str = typer.Argument(..., help="Time slot, e.g. 08:00-10:00"),
    base_url: Optional[str] = URL_OPTION,
):
    """List instructors available in a time slot."""
    data = run(get_client(base_url).available_instructors(time_slot))
    ui.print_instructors_table(data["instructors"], data["total"])


@app.command("add-classroom")
def add_classroom(
    name: str = typer.Argument(..., help="Classroom name"),
    capacity: int = typer.Option(0, "--capacity", "-c"),
    equipment: str = typer.Option("", "--equipment", "-e"),
    base_url: Optional[str] = URL_OPTION,
):
    """Create a classroom."""
    classroom = run(get_client(base_url).create_classroom({
        "name": name,
        "capacity": capacity,
        "equipment": equipment,
    }))
    ui.print_success(f"Classroom created: {classroom['name']} (id={classroom['id']})")


@app.command("classrooms")
def list_classrooms(
    limit: int = typer.Option(50, "--limit", "-l"),
    offset: int = typer.Option(0, "--offset", "-o"),
    base_url: Optional[str] = URL_OPTION,
):
    """List classrooms."""
    data = run(get_client(base_url).list_classrooms(limit, offset))
    ui.print_classrooms_table(data["classrooms"], data["total"])


# ============================================================
# 课表命令
# ============================================================

@app.command("timetables")
def list_timetables(
    course_id: Optional[str] = typer.Option(None, "--course", help="Filter by course ID"),
    limit: int = typer.Option(50, "--limit", "-l"),
    offset: int = typer.Option(0, "--offset", "-o"),
    base_url: Optional[str] = URL_OPTION,
):
    """List timetable entries."""
    data = run(get_client(base_url).list_timetables(limit, offset, course_id))
    ui.print_timetables_table(data["timetables"], data["total"])


@app.command("auto-timetable")
def auto_timetable(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    base_url: Optional[str] = URL_OPTION,
):
    """Generate every course x instructor x classroom combination."""
    if not yes and not typer.confirm("This appends one entry per combination. Continue?"):
        raise typer.Abort()
    data = run(get_client(base_url).auto_timetable())
    ui.print_success(f"Generated {data['total']} timetable entries")
    ui.print_timetables_table(data["timetables"], data["total"])


def main():
    """CLI 入口点"""
    app()


if __name__ == "__main__":
    main()
