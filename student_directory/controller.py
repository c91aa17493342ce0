"""
Record controller: in-memory view state over the remote student store.

The controller owns the cached record list, the search query, the form draft,
field errors and the open/closed + create/edit flags. Every write goes to the
store first; the cache is only ever replaced wholesale by a successful
`refresh()`, never patched locally.

Usage:
    async with StudentApiClient() as client:
        controller = RecordController(client, notifier=ConsoleNotifier())
        await controller.start()
        controller.begin_create()
        controller.set_field("name", "Ada")
        ...
        await controller.submit()
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from student_directory.domain.errors import RequestFailed
from student_directory.domain.models import FormDraft, Record, RecordId
from student_directory.domain.validation import ValidationErrors, validate
from student_directory.utils.logging import get_logger

log = get_logger(__name__)

Listener = Callable[["RecordController"], None]


@runtime_checkable
class StudentStore(Protocol):
    """Operations the controller needs from the remote store."""

    async def list_students(self) -> List[Record]: ...

    async def create_student(self, payload: Dict[str, Any]) -> None: ...

    async def update_student(self, record_id: RecordId, payload: Dict[str, Any]) -> None: ...

    async def delete_student(self, record_id: RecordId) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """User-visible success/failure notifications."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that only writes to the log; used when no UI is attached."""

    def __init__(self) -> None:
        self._log = get_logger("student_directory.notifications")

    def success(self, message: str) -> None:
        self._log.info(message)

    def error(self, message: str) -> None:
        self._log.error(message)


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class RecordController:
    def __init__(self, store: StudentStore, notifier: Optional[Notifier] = None) -> None:
        self._store = store
        self._notifier = notifier or LoggingNotifier()
        self._listeners: List[Listener] = []

        self.records: List[Record] = []
        self.search_query: str = ""
        self.draft: FormDraft = FormDraft()
        self.errors: ValidationErrors = {}
        self.is_open: bool = False

    # -- observation -----------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called synchronously after every state change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # noqa: BLE001 - one bad listener must not starve the rest
                log.exception(
                    "[LISTENER FAILED]",
                    extra={"listener": getattr(listener, "__qualname__", repr(listener))},
                )

    # -- read side ---------------------------------------------------------

    @property
    def mode(self) -> FormMode:
        return FormMode.EDIT if self.draft.is_edit else FormMode.CREATE

    async def start(self) -> None:
        """Initial load."""
        await self.refresh()

    async def refresh(self) -> bool:
        """
        Replace the cached list with the store's current contents.

        On failure the cache is left as it was and the user is notified.
        """
        try:
            records = await self._store.list_students()
        except RequestFailed as exc:
            log.warning(
                f"[REFRESH FAILED] {exc.message}",
                extra={"operation": exc.operation, "status_code": exc.status_code},
                exc_info=True,
            )
            self._notifier.error(exc.message)
            return False

        self.records = list(records)
        log.debug("[REFRESH] cache replaced", extra={"records": len(self.records)})
        self._changed()
        return True

    def set_search_query(self, text: str) -> None:
        self.search_query = text
        self._changed()

    def filtered_view(self) -> List[Record]:
        """Records whose name contains the search query, case-insensitively."""
        query = self.search_query.lower()
        if not query:
            return list(self.records)
        return [record for record in self.records if query in record.name.lower()]

    # -- form --------------------------------------------------------------

    def begin_create(self) -> None:
        self.draft = FormDraft()
        self.errors = {}
        self.is_open = True
        self._changed()

    def begin_edit(self, record: Record) -> None:
        self.draft = FormDraft.from_record(record)
        self.errors = {}
        self.is_open = True
        self._changed()

    def set_field(self, field: str, value: str) -> None:
        """Replace one editable field (wire name) of the current draft."""
        self.draft = self.draft.with_field(field, value)
        self._changed()

    def cancel(self) -> None:
        self._reset_form()
        self._changed()

    def _reset_form(self) -> None:
        self.is_open = False
        self.draft = FormDraft()
        self.errors = {}

    def validate(self, draft: Optional[FormDraft] = None) -> ValidationErrors:
        return validate(draft if draft is not None else self.draft)

    # -- writes ------------------------------------------------------------

    async def submit(self) -> bool:
        """
        Validate the draft and send it to the store as a create or a replace.

        Returns True when the store accepted the write. A rejected draft keeps
        its field errors; a failed request leaves draft, mode and errors as they
        were so the user can retry.
        """
        draft = self.draft
        self.errors = self.validate(draft)
        if self.errors:
            log.info(
                "[SUBMIT REJECTED] draft failed validation",
                extra={"fields": list(self.errors)},
            )
            self._changed()
            return False

        payload = draft.to_payload()
        try:
            if draft.record_id is None:
                await self._store.create_student(payload)
                message = "Student added successfully"
            else:
                await self._store.update_student(draft.record_id, payload)
                message = "Student updated successfully"
        except RequestFailed as exc:
            log.warning(
                f"[SUBMIT FAILED] {exc.message}",
                extra={"operation": exc.operation, "status_code": exc.status_code},
                exc_info=True,
            )
            self._notifier.error(exc.message)
            return False

        log.info(f"[SUBMIT] {message}", extra={"record_id": draft.record_id})
        self._notifier.success(message)
        self._reset_form()
        self._changed()
        await self.refresh()
        return True

    async def remove(self, record_id: RecordId) -> bool:
        """Delete a record; the cache only changes through the follow-up refresh."""
        try:
            await self._store.delete_student(record_id)
        except RequestFailed as exc:
            log.warning(
                f"[DELETE FAILED] {exc.message}",
                extra={
                    "operation": exc.operation,
                    "record_id": record_id,
                    "status_code": exc.status_code,
                },
                exc_info=True,
            )
            self._notifier.error(exc.message)
            return False

        log.info("[DELETE] Student deleted", extra={"record_id": record_id})
        self._notifier.success("Student deleted successfully")
        await self.refresh()
        return True


__all__ = [
    "FormMode",
    "LoggingNotifier",
    "Notifier",
    "RecordController",
    "StudentStore",
]
