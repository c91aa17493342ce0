"""
Seeding script for the Student Directory.

Generates deterministic pseudo-random students, optionally writes them to CSV,
and loads them into the remote store through the insert endpoint.
"""

from __future__ import annotations

import asyncio
import csv
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

import typer

from student_directory.domain.errors import RequestFailed, ValidationFailed
from student_directory.domain.models import FORM_FIELDS, FormDraft
from student_directory.domain.validation import check
from student_directory.infrastructure.api_client import StudentApiClient

app = typer.Typer(help="Generate synthetic students and load them through the REST API.")

_FIRST_NAMES = ["Ada", "Alan", "Grace", "Linus", "Barbara", "Edsger", "Katherine", "Dennis"]
_LAST_NAMES = ["Lovelace", "Turing", "Hopper", "Torvalds", "Liskov", "Dijkstra", "Johnson"]
_CLASSES = ["CS-101", "CS-201", "MATH-110", "PHYS-120", "ENG-100"]


def _generate_students(count: int, seed: int) -> List[FormDraft]:
    rng = random.Random(seed)
    students: List[FormDraft] = []
    for _ in range(count):
        students.append(
            FormDraft(
                name=f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
                age=str(rng.randint(17, 30)),
                class_name=rng.choice(_CLASSES),
                phone_number=f"{rng.randint(2, 9)}{rng.randint(0, 999_999_999):09d}",
            )
        )
    return students


def _write_csv(csv_path: Path, students: List[FormDraft]) -> None:
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(FORM_FIELDS)
        for student in students:
            payload = student.to_payload()
            writer.writerow([payload[field] for field in FORM_FIELDS])


async def _load(students: List[FormDraft], base_url: Optional[str]) -> int:
    """Insert students one by one; returns how many the store accepted."""
    inserted = 0
    async with StudentApiClient(base_url=base_url) as client:
        for student in students:
            try:
                check(student)
            except ValidationFailed as exc:
                typer.echo(f"Skipping {student.name or '<unnamed>'}: {exc}", err=True)
                continue
            try:
                await client.create_student(student.to_payload())
            except RequestFailed as exc:
                typer.echo(f"Insert failed for {student.name}: {exc.message}", err=True)
                continue
            inserted += 1
    return inserted


@app.command()
def main(
    count: int = typer.Option(
        25,
        "--count",
        "-n",
        help="Number of students to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional CSV path to also write the generated students to.",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Override STUDENTS_API_URL.",
    ),
    no_load: bool = typer.Option(
        False,
        "--no-load",
        help="Only generate; skip loading through the API.",
    ),
) -> None:
    """
    Generate synthetic students and optionally insert them into the store.
    """
    students = _generate_students(count, seed)
    typer.echo(f"Generated {count:,} students (seed={seed})")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        _write_csv(output, students)
        typer.echo(f"Wrote {output}")

    if no_load:
        typer.echo("Skipping load (no-load flag set).")
        return

    start = time.perf_counter()
    inserted = asyncio.run(_load(students, base_url))
    duration = time.perf_counter() - start
    typer.echo(f"Inserted {inserted}/{count} students in {duration:.2f}s.")
    if inserted < count:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
