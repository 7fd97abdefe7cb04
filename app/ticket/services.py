# app/ticket/services.py
import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.checklist.models import ChecklistItem
from app.checklist.template import iter_template_tasks
from app.ticket.models import Ticket
from app.ticket.schemas import TicketCreate
from app.ticket.status import TicketStatus

logger = logging.getLogger(__name__)


def get_all_tickets(db: Session, status: TicketStatus | None = None) -> list[Ticket]:
    query = db.query(Ticket)
    if status is not None:
        query = query.filter(Ticket.status == status.value)
    return query.order_by(Ticket.created_at.desc(), Ticket.id.desc()).all()


def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    db_ticket = Ticket(**payload.model_dump(), status=TicketStatus.NOT_STARTED.value)
    db_ticket.checklist = [
        ChecklistItem(category=category, task=task, sort_order=sort_order)
        for sort_order, (category, task) in enumerate(iter_template_tasks())
    ]
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info(
        "Created ticket %s for employee %s with %d checklist items",
        db_ticket.id,
        db_ticket.employee_id,
        len(db_ticket.checklist),
    )
    return db_ticket


def update_ticket(db: Session, ticket_id: int, changes: dict) -> Ticket | None:
    """Apply a validated ``TicketUpdate.changes()`` dict as a single UPDATE."""
    result = db.execute(
        update(Ticket)
        .where(Ticket.id == ticket_id)
        .values(**changes)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        return None
    db.commit()
    if "status" in changes:
        # direct override, the checklist is not consulted
        logger.info("Ticket %s status set directly to %s", ticket_id, changes["status"])
    return get_ticket(db, ticket_id)


def delete_ticket(db: Session, ticket_id: int) -> Ticket | None:
    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        return None
    db.delete(db_ticket)
    db.commit()
    logger.info("Deleted ticket %s", ticket_id)
    return db_ticket
