"""
Pytest configuration for the Student Directory client.

Provides fixtures for:
- Settings isolation (environment + cached settings)
- Sample records and an in-memory store for controller tests
- A recording notifier
"""

from __future__ import annotations

from typing import List

import pytest

from student_directory.config import get_settings
from student_directory.domain.models import Record
from tests.helpers import FakeStore, RecordingNotifier, make_record

_ENV_VARS = (
    "STUDENTS_API_URL",
    "STUDENTS_API_TIMEOUT",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Strip configuration env vars and reset the cached Settings around each test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def sample_records() -> List[Record]:
    return [
        make_record(1, "Ada Lovelace", className="MATH"),
        make_record(2, "Alan Turing"),
        make_record(3, "Grace Hopper", age="85"),
    ]


@pytest.fixture
def fake_store(sample_records: List[Record]) -> FakeStore:
    return FakeStore(sample_records)
