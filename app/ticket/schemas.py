# app/ticket/schemas.py
from datetime import date, datetime
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.checklist.schemas import ChecklistItemOut
from app.ticket.status import TicketStatus

_OPTIONAL_FIELDS = ("position", "manager", "last_working_day", "created_by")
_MUTABLE_FIELDS = {
    "employee_name",
    "employee_id",
    "email",
    "position",
    "manager",
    "last_working_day",
    "status",
    "completed_at",
}
_NOT_NULL_FIELDS = ("employee_name", "employee_id", "email", "status")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TicketBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    employee_name: str = Field(..., min_length=1)
    employee_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    position: str | None = None
    manager: str | None = None
    last_working_day: date | None = None


class TicketCreate(TicketBase):
    created_by: str | None = None

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def empty_optional_to_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class TicketUpdate(BaseModel):
    """Mutable ticket fields. Setting status here skips the checklist rollup."""

    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    employee_name: str | None = Field(default=None, min_length=1)
    employee_id: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    position: str | None = None
    manager: str | None = None
    last_working_day: date | None = None
    status: TicketStatus | None = None
    completed_at: datetime | None = None

    @field_validator("position", "manager", "last_working_day", mode="before")
    @classmethod
    def empty_optional_to_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def changes(self) -> dict[str, Any]:
        values = self.model_dump(include=_MUTABLE_FIELDS, exclude_unset=True)
        for name in _NOT_NULL_FIELDS:
            if name in values and values[name] is None:
                del values[name]
        return values

    def ensure_payload(self) -> dict[str, Any]:
        values = self.changes()
        if not values:
            raise HTTPException(status_code=400, detail="No valid fields to update")
        return values


class TicketOut(TicketBase):
    id: int
    status: TicketStatus
    completed_at: datetime | None = None
    created_at: datetime
    created_by: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TicketDetail(TicketOut):
    checklist: list[ChecklistItemOut] = Field(default_factory=list)
