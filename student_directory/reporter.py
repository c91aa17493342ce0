from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from student_directory.domain.models import Record
from student_directory.domain.validation import ValidationErrors

_FIELD_LABELS = {
    "name": "Name",
    "age": "Age",
    "className": "Class",
    "phoneNumber": "Phone",
}


class ConsoleNotifier:
    """
    Print controller notifications as coloured one-liners.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✔ {message}[/green]")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]✘ {message}[/bold red]")


def print_records(
    records: Sequence[Record],
    search_query: str = "",
    console: Optional[Console] = None,
) -> None:
    """
    Render student records as a rich table, in the order given.
    """
    console = console or Console()

    if not records:
        if search_query:
            console.print(f"[yellow]No students match '{escape(search_query)}'.[/yellow]")
        else:
            console.print("[yellow]No students to display.[/yellow]")
        return

    title = "Student Management System"
    if search_query:
        title = f"{title}\n[dim]Filter: name contains '{escape(search_query)}'[/dim]"

    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"{len(records)} student(s)",
    )
    table.add_column("ID", justify="right", style="blue", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Age", justify="right", style="magenta")
    table.add_column("Class", style="green")
    table.add_column("Phone", style="yellow", no_wrap=True)

    for record in records:
        table.add_row(
            escape(str(record.id)),
            escape(record.name),
            escape(record.age),
            escape(record.class_name),
            escape(record.phone_number),
        )

    console.print(table)


def print_validation_errors(errors: ValidationErrors, console: Optional[Console] = None) -> None:
    """One line per rejected field, in form order."""
    console = console or Console()
    for field, label in _FIELD_LABELS.items():
        if field in errors:
            console.print(f"[red]{label}: {errors[field].message}[/red]")


__all__ = ["ConsoleNotifier", "print_records", "print_validation_errors"]
