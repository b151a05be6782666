from __future__ import annotations

from datetime import date

import pytest

from teamtasks.models import Task, TaskStatus


@pytest.fixture()
def mock_tasks() -> list[Task]:
    """Five tasks across the three roles and three statuses."""
    return [
        Task(1, "Tarea 1", "Jefe", TaskStatus.COMPLETED),
        Task(2, "Tarea 2", "Supervisor", TaskStatus.PENDING),
        Task(3, "Tarea 3", "Analista", TaskStatus.IN_PROGRESS),
        Task(4, "Tarea 4", "Jefe", TaskStatus.PENDING),
        Task(5, "Tarea 5", "Analista", TaskStatus.COMPLETED, due_date=date(2025, 1, 1)),
    ]
