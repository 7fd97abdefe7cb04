# app/ticket/models.py
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.ticket.status import TicketStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    employee_name = Column(String, nullable=False)
    employee_id = Column(String, index=True, nullable=False)
    email = Column(String, nullable=False)
    position = Column(String, nullable=True)
    manager = Column(String, nullable=True)
    last_working_day = Column(Date, nullable=True)
    status = Column(String, default=TicketStatus.NOT_STARTED.value, nullable=False, index=True)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False, index=True)
    created_by = Column(String, nullable=True)

    checklist = relationship(
        "ChecklistItem",
        back_populates="ticket",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[ChecklistItem.sort_order, ChecklistItem.id]",
    )
