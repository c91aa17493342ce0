"""
Shared fakes for the test suite: a recording notifier, an in-memory store and
httpx.MockTransport-backed API clients.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import httpx

from student_directory.domain.errors import RequestFailed
from student_directory.domain.models import Record, RecordId
from student_directory.infrastructure.api_client import StudentApiClient

TEST_BASE_URL = "http://testserver/api/students"


class RecordingNotifier:
    def __init__(self) -> None:
        self.successes: List[str] = []
        self.errors: List[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class FakeStore:
    """
    In-memory stand-in for the remote store.

    `fail` names operations ("list", "create", "update", "delete") that should
    raise RequestFailed. `list_gates` lets a test hold individual list calls
    open and decide what each one returns.
    """

    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self.records: List[Record] = list(records or [])
        self.fail: Set[str] = set()
        self.calls: List[Tuple[str, Any]] = []
        self.list_gates: List[Tuple[asyncio.Event, List[Record]]] = []
        self._next_id = max((int(r.id) for r in self.records), default=0) + 1

    def _maybe_fail(self, operation: str, message: str) -> None:
        if operation in self.fail:
            raise RequestFailed(message, operation, status_code=500)

    async def list_students(self) -> List[Record]:
        self.calls.append(("list", None))
        if self.list_gates:
            gate, snapshot = self.list_gates.pop(0)
            await gate.wait()
            return list(snapshot)
        self._maybe_fail("list", "Failed to fetch students")
        return list(self.records)

    async def create_student(self, payload: Dict[str, Any]) -> None:
        self.calls.append(("create", payload))
        self._maybe_fail("create", "Failed to save student")
        self.records.append(Record.model_validate({**payload, "id": self._next_id}))
        self._next_id += 1

    async def update_student(self, record_id: RecordId, payload: Dict[str, Any]) -> None:
        self.calls.append(("update", (record_id, payload)))
        self._maybe_fail("update", "Failed to save student")
        self.records = [
            Record.model_validate({**payload, "id": r.id}) if r.id == record_id else r
            for r in self.records
        ]

    async def delete_student(self, record_id: RecordId) -> None:
        self.calls.append(("delete", record_id))
        self._maybe_fail("delete", "Failed to delete student")
        self.records = [r for r in self.records if str(r.id) != str(record_id)]

    def operations(self) -> List[str]:
        return [name for name, _ in self.calls]


def make_record(record_id: int, name: str, **overrides: str) -> Record:
    data = {
        "id": record_id,
        "name": name,
        "age": "20",
        "className": "CS",
        "phoneNumber": "1234567890",
    }
    data.update(overrides)
    return Record.model_validate(data)


Handler = Callable[[httpx.Request], httpx.Response]


def make_api_client(handler: Handler) -> StudentApiClient:
    """StudentApiClient whose HTTP traffic goes to `handler`."""
    return StudentApiClient(
        base_url=TEST_BASE_URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode()) if request.content else None
