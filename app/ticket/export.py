# app/ticket/export.py
from datetime import date
from io import BytesIO
from urllib.parse import quote

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from app.ticket.models import Ticket

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_TITLE = "Offboard checklist"
DATE_FORMAT = "%d/%m/%Y"

COLUMN_HEADERS = ("Category", "Task", "Status", "Completed at", "Evidence / Note")
COLUMN_WIDTHS = (35, 55, 18, 14, 40)

# title, blank, eight info rows, blank, column headers
HEADER_ROWS = 12

TITLE_FONT = Font(bold=True, size=14)
HEADER_FONT = Font(bold=True)
LABEL_FONT = Font(bold=True)
WRAP = Alignment(wrap_text=True, vertical="top")


def format_date(value: date | None) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def clean_row(values: list) -> list:
    # worksheets cannot hold most ASCII control characters
    return [ILLEGAL_CHARACTERS_RE.sub("", value) if isinstance(value, str) else value for value in values]


def export_filename(ticket: Ticket) -> str:
    return f"{SHEET_TITLE} - {ticket.employee_name} {ticket.employee_id}.xlsx"


def content_disposition(ticket: Ticket) -> str:
    return f'attachment; filename="{quote(export_filename(ticket), safe="")}"'


def build_workbook(ticket: Ticket) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append([SHEET_TITLE])
    ws.cell(row=1, column=1).font = TITLE_FONT
    ws.append([])

    info = [
        ("Employee name", ticket.employee_name),
        ("Employee ID", ticket.employee_id),
        ("Email", ticket.email),
        ("Position", ticket.position or ""),
        ("Manager", ticket.manager or ""),
        ("Last working day", format_date(ticket.last_working_day)),
        ("Status", ticket.status or ""),
        ("Completed at", format_date(ticket.completed_at)),
    ]
    for label, value in info:
        ws.append(clean_row([label, value]))
        ws.cell(row=ws.max_row, column=1).font = LABEL_FONT
    ws.append([])

    ws.append(list(COLUMN_HEADERS))
    for col in range(1, len(COLUMN_HEADERS) + 1):
        ws.cell(row=HEADER_ROWS, column=col).font = HEADER_FONT

    for item in ticket.checklist:
        ws.append(
            clean_row(
                [
                    item.category,
                    item.task,
                    item.status or "",
                    format_date(item.completed_at),
                    item.evidence_note or "",
                ]
            )
        )
        for cell in ws[ws.max_row]:
            cell.alignment = WRAP

    for col, width in enumerate(COLUMN_WIDTHS, 1):
        ws.column_dimensions[get_column_letter(col)].width = width
    return wb


def render_ticket_xlsx(ticket: Ticket) -> bytes:
    buffer = BytesIO()
    build_workbook(ticket).save(buffer)
    return buffer.getvalue()
