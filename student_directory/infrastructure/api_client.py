"""
HTTP adapter for the remote student store.

Wraps the four endpoints under the configured base URL:

    GET    /fetch   -> JSON array of records
    POST   /insert  -> create from the four form fields
    PUT    /{id}    -> full replacement
    DELETE /{id}    -> delete

Any transport error or non-2xx answer becomes a RequestFailed carrying a
generic per-operation message. Error bodies are never parsed.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import TypeAdapter, ValidationError

from student_directory.config import get_settings
from student_directory.domain.errors import RequestFailed
from student_directory.domain.models import Record, RecordId
from student_directory.utils.logging import get_logger

log = get_logger(__name__)

_RECORD_LIST = TypeAdapter(List[Record])

FETCH_FAILED = "Failed to fetch students"
SAVE_FAILED = "Failed to save student"
DELETE_FAILED = "Failed to delete student"


class StudentApiClient:
    """
    Async client for the student REST API.

    The adapter owns its httpx.AsyncClient unless one is injected (tests pass a
    client built on httpx.MockTransport); only an owned client is closed.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.api_timeout_seconds,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "StudentApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        failure_message: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        log.debug(f"[API] {method} {url}", extra={"operation": operation})
        try:
            response = await self._http_client.request(method, url, json=payload)
        except httpx.HTTPError as exc:
            raise RequestFailed(failure_message, operation) from exc

        if not response.is_success:
            raise RequestFailed(failure_message, operation, status_code=response.status_code)
        return response

    async def list_students(self) -> List[Record]:
        """
        Fetch every record, in the order the store returns them.
        """
        response = await self._send("list", "GET", "/fetch", FETCH_FAILED)
        try:
            return _RECORD_LIST.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError
            raise RequestFailed(FETCH_FAILED, "list", status_code=response.status_code) from exc

    async def create_student(self, payload: Dict[str, Any]) -> None:
        await self._send("create", "POST", "/insert", SAVE_FAILED, payload)

    async def update_student(self, record_id: RecordId, payload: Dict[str, Any]) -> None:
        await self._send("update", "PUT", f"/{record_id}", SAVE_FAILED, payload)

    async def delete_student(self, record_id: RecordId) -> None:
        await self._send("delete", "DELETE", f"/{record_id}", DELETE_FAILED)


__all__ = [
    "DELETE_FAILED",
    "FETCH_FAILED",
    "SAVE_FAILED",
    "StudentApiClient",
]
