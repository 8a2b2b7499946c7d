"""Rich UI 组件"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def print_error(message: str):
    """打印错误信息"""
    console.print(f"[red]Error:[/red] {message}")


def print_success(message: str):
    """打印成功信息"""
    console.print(f"[green]{message}[/green]")


def print_info(message: str):
    """打印信息"""
    console.print(f"[blue]{message}[/blue]")


def _join(values) -> str:
    return ", ".join(values) if values else "-"


def print_users_table(users: list, total: int):
    table = Table(title=f"Users ({total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Username", style="white")
    table.add_column("Email")
    table.add_column("Role", style="yellow")
    table.add_column("Created", style="dim")

    for u in users:
        table.add_row(u["id"], u["username"], u["email"], u["role"], u.get("created_at", "-")[:19])

    console.print(table)


def print_user_detail(user: dict):
    console.print(Panel(
        f"[cyan]ID:[/cyan] {user['id']}\n"
        f"[cyan]Username:[/cyan] {user['username']}\n"
        f"[cyan]Email:[/cyan] {user['email']}\n"
        f"[cyan]Role:[/cyan] {user['role']}\n"
        f"[cyan]Owner:[/cyan] {user['owner']}\n"
        f"[cyan]Created:[/cyan] {user['created_at']}",
        title="User",
        border_style="cyan",
    ))


def print_courses_table(courses: list, total: int):
    table = Table(title=f"Courses ({total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Years", justify="right")
    table.add_column("Equipment")
    table.add_column("Prerequisites", style="dim")

    for c in courses:
        table.add_row(
            c["id"], c["name"], str(c["duration_years"]),
            c.get("required_equipment") or "-", _join(c.get("prerequisites")),
        )

    console.print(table)


def print_instructors_table(instructors: list, total: int):
    table = Table(title=f"Instructors ({total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Availability")
    table.add_column("Preferred", style="dim")

    for i in instructors:
        table.add_row(i["id"], i["name"], _join(i.get("availability")), _join(i.get("preferred_times")))

    console.print(table)


def print_classrooms_table(classrooms: list, total: int):
    table = Table(title=f"Classrooms ({total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Capacity", justify="right")
    table.add_column("Equipment", style="dim")

    for c in classrooms:
        table.add_row(c["id"], c["name"], str(c["capacity"]), c.get("equipment") or "-")

    console.print(table)


def print_timetables_table(entries: list, total: int):
    table = Table(title=f"Timetables ({total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Course")
    table.add_column("Instructor")
    table.add_column("Classroom")
    table.add_column("Slot", style="yellow")

    for t in entries:
        table.add_row(t["id"], t["course_id"], t["instructor_id"], t["classroom_id"], t["time_slot"] or "-")

    console.print(table)
