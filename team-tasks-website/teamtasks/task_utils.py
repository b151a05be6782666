"""Pure helpers over a sequence of tasks.

Every function here is read-only: it takes a sequence (list, tuple, board
snapshot) and returns a new value. Tasks are read by attribute
(``status``, ``assigned_to``, ``due_date``) so any task-like record works,
not just ``models.Task``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from teamtasks.models import (
    MAX_TITLE_LENGTH,
    STATUS_PRIORITY,
    TaskStatus,
    parse_due_date,
)


EMPTY_TITLE_ERROR = "title cannot be empty"
TITLE_TOO_LONG_ERROR = f"title cannot exceed {MAX_TITLE_LENGTH} characters"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}


@dataclass(frozen=True)
class TaskSummary:
    total: int
    completed: int
    progress: int
    by_status: Dict[str, int] = field(default_factory=dict)


def get_tasks_by_status(tasks: Sequence[Any], status: Union[TaskStatus, str]) -> List[Any]:
    return [t for t in tasks if t.status == status]


def get_tasks_by_role(tasks: Sequence[Any], role: str) -> List[Any]:
    return [t for t in tasks if t.assigned_to == role]


def count_completed_tasks(tasks: Sequence[Any]) -> int:
    return sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)


def calculate_progress(tasks: Sequence[Any]) -> int:
    """Percentage of completed tasks, 0-100.

    Halves round up (12.5 -> 13), matching how the widget has always
    displayed it; Python's ``round`` would give 12.
    """
    total = len(tasks)
    if total == 0:
        return 0
    ratio = count_completed_tasks(tasks) / total
    return int(math.floor(ratio * 100 + 0.5))


def _priority(task: Any) -> int:
    status = TaskStatus.parse(getattr(task, "status", None))
    if status is None:
        return 0
    return STATUS_PRIORITY.get(status, 0)


def sort_tasks_by_priority(tasks: Sequence[Any]) -> List[Any]:
    # sorted() is stable and leaves the input untouched
    return sorted(tasks, key=_priority)


def is_task_overdue(task: Any, current_date: Union[date, datetime]) -> bool:
    """True when the due day has passed and the task is not completed.

    Compared by calendar day, not by instant: a task due today is not
    overdue at 18:30, only from tomorrow on. A datetime reference is
    truncated to its date.
    """
    due = parse_due_date(getattr(task, "due_date", None))
    if due is None:
        return False
    today = current_date.date() if isinstance(current_date, datetime) else current_date
    return due < today and task.status != TaskStatus.COMPLETED


def validate_task_title(title: Optional[str]) -> ValidationResult:
    if not isinstance(title, str) or not title.strip():
        return ValidationResult(valid=False, error=EMPTY_TITLE_ERROR)
    if len(title) > MAX_TITLE_LENGTH:
        return ValidationResult(valid=False, error=TITLE_TOO_LONG_ERROR)
    return ValidationResult(valid=True)


def summarize_tasks(tasks: Sequence[Any]) -> TaskSummary:
    """Counts used by the KPI row: total, completed, progress and per-status."""
    by_status = {s.value: 0 for s in TaskStatus}
    for t in tasks:
        key = t.status.value if isinstance(t.status, TaskStatus) else str(t.status)
        by_status[key] = by_status.get(key, 0) + 1
    return TaskSummary(
        total=len(tasks),
        completed=count_completed_tasks(tasks),
        progress=calculate_progress(tasks),
        by_status=by_status,
    )
