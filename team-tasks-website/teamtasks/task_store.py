"""In-memory task store.

The module-level functions are copy-on-write: they take the current
collection and return a new list, never touching the caller's sequence.
Unknown ids and rejected titles are silent no-ops (logged at DEBUG).

``TaskBoard`` is the handle the page keeps in ``st.session_state``. It
owns the current snapshot and swaps it for the result of each operation.
Callers that share a board across threads must serialise their own
read-modify-write; there is no locking here.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from teamtasks.models import Role, Task, TaskStatus, parse_due_date
from teamtasks.task_utils import validate_task_title


logger = logging.getLogger(__name__)


# Demo data shown when the page first loads.
SAMPLE_TASKS: Tuple[Task, ...] = (
    Task(1, "Revisar informes", Role.CHIEF, TaskStatus.IN_PROGRESS),
    Task(2, "Supervisar proyecto A", Role.SUPERVISOR, TaskStatus.PENDING),
    Task(3, "Analizar datos", Role.ANALYST, TaskStatus.COMPLETED),
    Task(4, "Preparar presentación", Role.CHIEF, TaskStatus.PENDING),
    Task(5, "Coordinar equipo", Role.SUPERVISOR, TaskStatus.IN_PROGRESS),
    Task(6, "Recopilar información", Role.ANALYST, TaskStatus.IN_PROGRESS),
)


def next_task_id(tasks: Sequence[Task]) -> int:
    """Highest existing id + 1.

    Using ``len(tasks) + 1`` would reuse an id after a deletion
    (delete #2 of three, add -> #3 twice).
    """
    return max((t.id for t in tasks), default=0) + 1


def add_task(
    tasks: Sequence[Task],
    title: Optional[str],
    assigned_to: Union[Role, str],
    due_date: Optional[Union[date, str]] = None,
) -> Tuple[List[Task], Optional[Task]]:
    clean = title.strip() if isinstance(title, str) else ""
    check = validate_task_title(clean)
    if not check.valid:
        logger.debug("add_task ignored: %s", check.error)
        return list(tasks), None
    task = Task(
        id=next_task_id(tasks),
        title=clean,
        assigned_to=assigned_to,
        status=TaskStatus.PENDING,
        due_date=parse_due_date(due_date),
    )
    logger.debug("Task added id=%s assigned_to=%s", task.id, task.assigned_to)
    return list(tasks) + [task], task


def remove_task(tasks: Sequence[Task], task_id: int) -> List[Task]:
    out = [t for t in tasks if t.id != task_id]
    if len(out) == len(tasks):
        logger.debug("remove_task ignored: id=%s not found", task_id)
    return out


def edit_task(tasks: Sequence[Task], task_id: int, new_title: Optional[str]) -> List[Task]:
    """Replace a task's title.

    ``None`` is a cancelled edit. A blank or over-long title is rejected
    too, so an empty edit box never wipes a title.
    """
    if new_title is None:
        return list(tasks)
    clean = new_title.strip() if isinstance(new_title, str) else ""
    check = validate_task_title(clean)
    if not check.valid:
        logger.debug("edit_task ignored id=%s: %s", task_id, check.error)
        return list(tasks)
    return _update(tasks, task_id, lambda t: replace(t, title=clean))


def toggle_task_status(tasks: Sequence[Task], task_id: int) -> List[Task]:
    """Completada -> Pendiente, anything else -> Completada.

    Two-state flip: an "En progreso" task becomes Completada.
    """
    def flip(t: Task) -> Task:
        if t.status is TaskStatus.COMPLETED:
            return replace(t, status=TaskStatus.PENDING)
        return replace(t, status=TaskStatus.COMPLETED)

    return _update(tasks, task_id, flip)


def set_task_status(
    tasks: Sequence[Task], task_id: int, status: Union[TaskStatus, str]
) -> List[Task]:
    parsed = TaskStatus.parse(status)
    if parsed is None:
        logger.debug("set_task_status ignored id=%s: unknown status %r", task_id, status)
        return list(tasks)
    return _update(tasks, task_id, lambda t: replace(t, status=parsed))


def _update(tasks: Sequence[Task], task_id: int, change) -> List[Task]:
    out: List[Task] = []
    found = False
    for t in tasks:
        if t.id == task_id:
            found = True
            out.append(change(t))
        else:
            out.append(t)
    if not found:
        logger.debug("update ignored: id=%s not found", task_id)
    return out


class TaskBoard:
    """Single-owner holder of the current task snapshot."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._tasks: Tuple[Task, ...] = tuple(tasks or ())

    @classmethod
    def with_sample_tasks(cls) -> "TaskBoard":
        return cls(SAMPLE_TASKS)

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def add(
        self,
        title: Optional[str],
        assigned_to: Union[Role, str],
        due_date: Optional[Union[date, str]] = None,
    ) -> Optional[Task]:
        new_tasks, task = add_task(self._tasks, title, assigned_to, due_date)
        self._tasks = tuple(new_tasks)
        if task is not None:
            logger.info("Task #%s created for %s", task.id, task.assigned_to)
        return task

    def edit(self, task_id: int, new_title: Optional[str]) -> None:
        self._tasks = tuple(edit_task(self._tasks, task_id, new_title))

    def remove(self, task_id: int) -> None:
        self._tasks = tuple(remove_task(self._tasks, task_id))

    def toggle(self, task_id: int) -> None:
        self._tasks = tuple(toggle_task_status(self._tasks, task_id))

    def set_status(self, task_id: int, status: Union[TaskStatus, str]) -> None:
        self._tasks = tuple(set_task_status(self._tasks, task_id, status))
