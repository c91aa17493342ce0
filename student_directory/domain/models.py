"""
Domain models for the Student Directory client.

`Record` mirrors one student as returned by the remote store; `FormDraft` is the
transient, unvalidated form state used to create or replace a record. Field
names on the wire are camelCase (`className`, `phoneNumber`) and are exposed as
aliases of the snake_case attributes.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

RecordId = Union[int, str]

# Wire names of the editable fields, in form order.
FORM_FIELDS: Tuple[str, ...] = ("name", "age", "className", "phoneNumber")


def _as_text(value: Any) -> Any:
    """The store may hand numbers back for age/phone; the client keeps text."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Record(BaseModel):
    """
    Representation of a single student as held by the remote store.
    """

    id: RecordId = Field(..., description="Identifier assigned by the store.")
    name: str = Field("", description="Student name.")
    age: str = Field("", description="Age, kept as text.")
    class_name: str = Field("", alias="className", description="Class the student attends.")
    phone_number: str = Field("", alias="phoneNumber", description="Ten digit phone number.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("name", "age", "class_name", "phone_number", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class FormDraft(BaseModel):
    """
    Editable form state. `record_id` is None in create mode.
    """

    name: str = ""
    age: str = ""
    class_name: str = Field("", alias="className")
    phone_number: str = Field("", alias="phoneNumber")
    record_id: Optional[RecordId] = None

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_record(cls, record: Record) -> "FormDraft":
        return cls(
            name=record.name,
            age=record.age,
            class_name=record.class_name,
            phone_number=record.phone_number,
            record_id=record.id,
        )

    @property
    def is_edit(self) -> bool:
        return self.record_id is not None

    def with_field(self, field: str, value: str) -> "FormDraft":
        """Return a copy with one editable field replaced (by wire name)."""
        if field not in FORM_FIELDS:
            raise KeyError(field)
        data = self.model_dump(by_alias=True)
        data[field] = value
        return FormDraft.model_validate(data)

    def to_payload(self) -> Dict[str, Any]:
        """
        JSON body for the store: the four fields, plus `id` when replacing.
        """
        payload = self.model_dump(
            by_alias=True, include={"name", "age", "class_name", "phone_number"}
        )
        if self.record_id is not None:
            payload["id"] = self.record_id
        return payload


__all__ = ["FORM_FIELDS", "FormDraft", "Record", "RecordId"]
