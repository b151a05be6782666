"""Role-filtered team to-do list: task store, query helpers and visibility rules."""

from teamtasks.models import MAX_TITLE_LENGTH, Role, Task, TaskStatus
from teamtasks.task_store import (
    TaskBoard,
    add_task,
    edit_task,
    remove_task,
    set_task_status,
    toggle_task_status,
)
from teamtasks.task_utils import (
    ValidationResult,
    calculate_progress,
    count_completed_tasks,
    get_tasks_by_role,
    get_tasks_by_status,
    is_task_overdue,
    sort_tasks_by_priority,
    validate_task_title,
)
from teamtasks.visibility import get_my_tasks, get_team_tasks

__all__ = [
    "MAX_TITLE_LENGTH",
    "Role",
    "Task",
    "TaskBoard",
    "TaskStatus",
    "ValidationResult",
    "add_task",
    "calculate_progress",
    "count_completed_tasks",
    "edit_task",
    "get_my_tasks",
    "get_tasks_by_role",
    "get_tasks_by_status",
    "get_team_tasks",
    "is_task_overdue",
    "remove_task",
    "set_task_status",
    "sort_tasks_by_priority",
    "toggle_task_status",
    "validate_task_title",
]
