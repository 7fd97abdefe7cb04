# app/checklist/schemas.py
from datetime import date
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field

from app.ticket.status import TicketStatus


class ChecklistItemOut(BaseModel):
    id: int
    ticket_id: int
    category: str
    task: str
    status: TicketStatus
    completed_at: date | None = None
    evidence_note: str | None = None
    sort_order: int

    model_config = {"from_attributes": True}


class ChecklistItemUpdate(BaseModel):
    """Fields a user may change on a checklist item; unset fields are left alone."""

    model_config = ConfigDict(use_enum_values=True)

    status: TicketStatus | None = None
    completed_at: date | None = None
    evidence_note: str | None = None

    def changes(self) -> dict[str, Any]:
        values = self.model_dump(include={"status", "completed_at", "evidence_note"}, exclude_unset=True)
        # status is NOT NULL; an explicit null means "no change"
        if values.get("status", "") is None:
            values.pop("status")
        return values

    def ensure_payload(self) -> dict[str, Any]:
        values = self.changes()
        if not values:
            raise HTTPException(
                status_code=400,
                detail="Provide at least one of: status, completed_at, evidence_note",
            )
        return values


class ChecklistBulkUpdate(ChecklistItemUpdate):
    item_ids: list[int] = Field(default_factory=list)

    def ensure_payload(self) -> dict[str, Any]:
        if not self.item_ids:
            raise HTTPException(status_code=400, detail="item_ids must be a non-empty array")
        return super().ensure_payload()


class BulkUpdateResult(BaseModel):
    updated: int
