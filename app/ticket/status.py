# app/ticket/status.py
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TicketStatus(str, Enum):
    """Progress values shared by tickets and checklist items."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


@dataclass(frozen=True, slots=True)
class StatusRollup:
    status: TicketStatus
    completed_at: datetime | None


def derive_ticket_status(statuses: Iterable[str | TicketStatus], now: datetime) -> StatusRollup:
    """Derive a ticket's status from the statuses of its checklist items.

    An empty checklist is Not Started. A checklist where every item is Done
    is Done, completed at ``now``. Any other checklist with at least one
    started item is In Progress.
    """

    values = [TicketStatus(status) for status in statuses]
    if not values:
        return StatusRollup(TicketStatus.NOT_STARTED, None)
    if all(value is TicketStatus.DONE for value in values):
        return StatusRollup(TicketStatus.DONE, now)
    if any(value in (TicketStatus.IN_PROGRESS, TicketStatus.DONE) for value in values):
        return StatusRollup(TicketStatus.IN_PROGRESS, None)
    return StatusRollup(TicketStatus.NOT_STARTED, None)
