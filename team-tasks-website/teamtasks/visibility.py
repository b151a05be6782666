"""Role-based views: which tasks a role sees as its own and as its team's.

The team mapping is a closed table, not a hierarchy:

- Jefe sees every task not assigned to Jefe.
- Supervisor sees only Analista tasks.
- Everyone else (Analista included, unknown roles too) has no team view.
"""
from __future__ import annotations

from typing import Any, List, Sequence, Union

from teamtasks.models import Role
from teamtasks.task_utils import get_tasks_by_role


def get_my_tasks(tasks: Sequence[Any], role: Union[Role, str]) -> List[Any]:
    return get_tasks_by_role(tasks, role)


def get_team_tasks(tasks: Sequence[Any], role: Union[Role, str]) -> List[Any]:
    parsed = Role.parse(role)
    if parsed is Role.CHIEF:
        return [t for t in tasks if t.assigned_to != Role.CHIEF]
    if parsed is Role.SUPERVISOR:
        return [t for t in tasks if t.assigned_to == Role.ANALYST]
    return []


def has_team_view(role: Union[Role, str]) -> bool:
    return Role.parse(role) in (Role.CHIEF, Role.SUPERVISOR)
