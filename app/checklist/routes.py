# app/checklist/routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.checklist import services as checklist_service
from app.checklist.schemas import BulkUpdateResult, ChecklistBulkUpdate, ChecklistItemOut, ChecklistItemUpdate
from app.core.clock import utcnow
from app.core.database import get_db

router = APIRouter(prefix="/tickets/{ticket_id}/checklist", tags=["Checklist"])


# declared before /{item_id} so "bulk" is not parsed as an item id
@router.patch("/bulk", response_model=BulkUpdateResult)
def bulk_update(
    ticket_id: int,
    payload: ChecklistBulkUpdate,
    db: Session = Depends(get_db),
    now: datetime = Depends(utcnow),
):
    changes = payload.ensure_payload()
    updated = checklist_service.bulk_update_items(db, ticket_id, payload.item_ids, changes, now)
    return BulkUpdateResult(updated=updated)


@router.patch("/{item_id}", response_model=ChecklistItemOut)
def update(
    ticket_id: int,
    item_id: int,
    payload: ChecklistItemUpdate,
    db: Session = Depends(get_db),
    now: datetime = Depends(utcnow),
):
    changes = payload.ensure_payload()
    item = checklist_service.update_item(db, ticket_id, item_id, changes, now)
    if not item:
        raise HTTPException(status_code=404, detail="Checklist item not found")
    return item
