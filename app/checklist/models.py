# app/checklist/models.py
from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.ticket.status import TicketStatus


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id", ondelete="CASCADE"), index=True, nullable=False)
    category = Column(String, nullable=False)
    task = Column(String, nullable=False)
    status = Column(String, default=TicketStatus.NOT_STARTED.value, nullable=False)
    completed_at = Column(Date, nullable=True)
    evidence_note = Column(Text, nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)

    ticket = relationship("Ticket", back_populates="checklist")
