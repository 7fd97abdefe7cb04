# app/ticket/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.ticket import services as ticket_service
from app.ticket.export import XLSX_MEDIA_TYPE, content_disposition, render_ticket_xlsx
from app.ticket.schemas import TicketCreate, TicketDetail, TicketOut, TicketUpdate
from app.ticket.status import TicketStatus

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("", response_model=TicketDetail, status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.get("", response_model=list[TicketOut])
def list_all(
    status: TicketStatus | None = Query(default=None, description="Filter by ticket status"),
    db: Session = Depends(get_db),
):
    return ticket_service.get_all_tickets(db, status=status)


@router.get("/{ticket_id}", response_model=TicketDetail)
def get(ticket_id: int, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


@router.patch("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    changes = ticket.ensure_payload()
    updated = ticket_service.update_ticket(db, ticket_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return updated


@router.delete("/{ticket_id}", status_code=204)
def delete(ticket_id: int, db: Session = Depends(get_db)):
    deleted = ticket_service.delete_ticket(db, ticket_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return Response(status_code=204)


@router.get("/{ticket_id}/export")
def export(ticket_id: int, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return Response(
        content=render_ticket_xlsx(ticket),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(ticket)},
    )
