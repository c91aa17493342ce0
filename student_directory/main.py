from __future__ import annotations

import asyncio
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from student_directory.config import get_settings
from student_directory.controller import RecordController
from student_directory.infrastructure.api_client import StudentApiClient
from student_directory.reporter import ConsoleNotifier, print_records, print_validation_errors
from student_directory.utils.logging import configure_logging

app = typer.Typer(help="Student Directory CLI.")


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@asynccontextmanager
async def _session(console: Console) -> AsyncIterator[RecordController]:
    async with StudentApiClient() as client:
        yield RecordController(client, notifier=ConsoleNotifier(console))


def _field_overrides(
    name: Optional[str],
    age: Optional[str],
    class_name: Optional[str],
    phone: Optional[str],
) -> Dict[str, str]:
    values = {"name": name, "age": age, "className": class_name, "phoneNumber": phone}
    return {field: value for field, value in values.items() if value is not None}


async def _submit_with(
    controller: RecordController, fields: Dict[str, str], console: Console
) -> bool:
    for field, value in fields.items():
        controller.set_field(field, value)
    ok = await controller.submit()
    if not ok and controller.errors:
        print_validation_errors(controller.errors, console=console)
    return ok


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    timeout = settings.api_timeout_seconds
    typer.echo(
        f"API={settings.api_base_url} | "
        f"timeout={'transport default' if timeout is None else f'{timeout}s'} "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command("list")
def list_students(
    search: str = typer.Option(
        "",
        "--search",
        "-s",
        help="Only show students whose name contains this text (case-insensitive).",
    ),
) -> None:
    """
    Fetch and display students.
    """
    console = Console()

    async def _run() -> bool:
        async with _session(console) as controller:
            ok = await controller.refresh()
            if ok:
                controller.set_search_query(search)
                print_records(controller.filtered_view(), search_query=search, console=console)
            return ok

    if not asyncio.run(_run()):
        raise typer.Exit(code=1)


@app.command()
def add(
    name: str = typer.Option(..., "--name", "-n", help="Student name."),
    age: str = typer.Option(..., "--age", "-a", help="Age."),
    class_name: str = typer.Option(..., "--class-name", "-c", help="Class."),
    phone: str = typer.Option(..., "--phone", "-p", help="Ten digit phone number."),
) -> None:
    """
    Create a student.
    """
    console = Console()

    async def _run() -> bool:
        async with _session(console) as controller:
            controller.begin_create()
            return await _submit_with(
                controller, _field_overrides(name, age, class_name, phone), console
            )

    if not asyncio.run(_run()):
        raise typer.Exit(code=1)


@app.command()
def update(
    record_id: str = typer.Argument(..., help="Identifier of the student to replace."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name."),
    age: Optional[str] = typer.Option(None, "--age", "-a", help="New age."),
    class_name: Optional[str] = typer.Option(None, "--class-name", "-c", help="New class."),
    phone: Optional[str] = typer.Option(None, "--phone", "-p", help="New phone number."),
) -> None:
    """
    Replace a student; fields not given keep their current values.
    """
    console = Console()

    async def _run() -> bool:
        async with _session(console) as controller:
            if not await controller.refresh():
                return False
            record = next((r for r in controller.records if str(r.id) == record_id), None)
            if record is None:
                console.print(f"[red]No student with id {escape(record_id)}.[/red]")
                return False
            controller.begin_edit(record)
            return await _submit_with(
                controller, _field_overrides(name, age, class_name, phone), console
            )

    if not asyncio.run(_run()):
        raise typer.Exit(code=1)


@app.command()
def delete(
    record_id: str = typer.Argument(..., help="Identifier of the student to delete."),
) -> None:
    """
    Delete a student.
    """
    console = Console()

    async def _run() -> bool:
        async with _session(console) as controller:
            return await controller.remove(record_id)

    if not asyncio.run(_run()):
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
