# app/checklist/services.py
import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.checklist.models import ChecklistItem
from app.ticket.models import Ticket
from app.ticket.status import StatusRollup, derive_ticket_status

logger = logging.getLogger(__name__)


def refresh_ticket_status(db: Session, ticket_id: int, now: datetime) -> StatusRollup:
    """Recompute the ticket's status from its checklist and write it back.

    Runs inside the caller's transaction; the caller commits.
    """
    statuses = db.scalars(select(ChecklistItem.status).where(ChecklistItem.ticket_id == ticket_id)).all()
    rollup = derive_ticket_status(statuses, now)
    db.execute(
        update(Ticket)
        .where(Ticket.id == ticket_id)
        .values(status=rollup.status.value, completed_at=rollup.completed_at)
        .execution_options(synchronize_session=False)
    )
    logger.debug("Ticket %s rolled up to %s", ticket_id, rollup.status.value)
    return rollup


def update_item(db: Session, ticket_id: int, item_id: int, changes: dict, now: datetime) -> ChecklistItem | None:
    result = db.execute(
        update(ChecklistItem)
        .where(ChecklistItem.id == item_id, ChecklistItem.ticket_id == ticket_id)
        .values(**changes)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        return None
    refresh_ticket_status(db, ticket_id, now)
    db.commit()
    return db.get(ChecklistItem, item_id)


def bulk_update_items(db: Session, ticket_id: int, item_ids: Sequence[int], changes: dict, now: datetime) -> int:
    """Apply the same changes to every listed item of the ticket; returns the row count."""
    result = db.execute(
        update(ChecklistItem)
        .where(ChecklistItem.ticket_id == ticket_id, ChecklistItem.id.in_(list(item_ids)))
        .values(**changes)
        .execution_options(synchronize_session=False)
    )
    updated = result.rowcount
    rollup = refresh_ticket_status(db, ticket_id, now)
    db.commit()
    logger.info(
        "Bulk updated %d of %d checklist items on ticket %s, ticket now %s",
        updated,
        len(item_ids),
        ticket_id,
        rollup.status.value,
    )
    return updated
