"""Task record and the closed vocabularies (status, role) it is built from.

Status and role literals are Spanish and are matched verbatim by existing
fixtures; keep them byte-for-byte.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional


MAX_TITLE_LENGTH = 100


class TaskStatus(str, Enum):
    PENDING = "Pendiente"
    IN_PROGRESS = "En progreso"
    COMPLETED = "Completada"

    @classmethod
    def parse(cls, raw: Any) -> Optional["TaskStatus"]:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except (ValueError, TypeError):
            return None


# Sort priority. Anything not listed sorts as 0 (first).
STATUS_PRIORITY: Dict[TaskStatus, int] = {
    TaskStatus.PENDING: 1,
    TaskStatus.IN_PROGRESS: 2,
    TaskStatus.COMPLETED: 3,
}


class Role(str, Enum):
    CHIEF = "Jefe"
    SUPERVISOR = "Supervisor"
    ANALYST = "Analista"

    @classmethod
    def parse(cls, raw: Any) -> Optional["Role"]:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except (ValueError, TypeError):
            return None


def parse_due_date(raw: Any) -> Optional[date]:
    """Best-effort conversion of a due date value to a calendar date.

    Accepts ``date``, ``datetime`` (truncated to its day) or an ISO string
    (``YYYY-MM-DD`` or a full ISO timestamp). Anything else, including an
    unparseable string, yields ``None``.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class Task:
    """A single to-do entry.

    ``assigned_to`` is a free string; the well-known values are the
    ``Role`` members but any identifier is accepted.
    """

    id: int
    title: str
    assigned_to: str
    status: TaskStatus = TaskStatus.PENDING
    due_date: Optional[date] = None

    def __post_init__(self) -> None:
        status = TaskStatus.parse(self.status)
        if status is None:
            raise ValueError(f"Unknown task status: {self.status!r}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "status", status)
        assigned = "" if self.assigned_to is None else self.assigned_to
        object.__setattr__(
            self, "assigned_to", assigned.value if isinstance(assigned, Role) else str(assigned)
        )
        object.__setattr__(self, "due_date", parse_due_date(self.due_date))

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "assignedTo": self.assigned_to,
            "status": self.status.value,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        assigned = data.get("assignedTo", data.get("assigned_to", ""))
        due = data.get("dueDate", data.get("due_date"))
        return cls(
            id=int(data["id"]),
            title=str(data.get("title", "")),
            assigned_to=str(assigned or ""),
            status=data.get("status", TaskStatus.PENDING),
            due_date=parse_due_date(due),
        )
