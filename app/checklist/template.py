# app/checklist/template.py
"""Standard offboarding checklist copied into every new ticket."""

from collections.abc import Iterator

CHECKLIST_TEMPLATE: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "HR",
        (
            "Receive resignation letter and confirm last working day",
            "Conduct exit interview",
            "Reconcile remaining annual leave",
            "Issue contract termination decision",
            "Close social insurance record",
        ),
    ),
    (
        "Handover",
        (
            "Hand over ongoing work and documents to manager",
            "Transfer ownership of shared files and drives",
        ),
    ),
    (
        "IT",
        (
            "Return laptop and accessories",
            "Disable email account",
            "Revoke system, VPN and application access",
            "Remove from chat groups and distribution lists",
        ),
    ),
    (
        "Admin",
        (
            "Return employee badge and access card",
            "Return office keys and locker",
        ),
    ),
    (
        "Finance",
        (
            "Settle advances and outstanding expense claims",
            "Process final salary payment",
        ),
    ),
)


def iter_template_tasks() -> Iterator[tuple[str, str]]:
    """Yield (category, task) pairs in template order."""
    for category, tasks in CHECKLIST_TEMPLATE:
        for task in tasks:
            yield category, task


def template_task_count() -> int:
    return sum(len(tasks) for _, tasks in CHECKLIST_TEMPLATE)
