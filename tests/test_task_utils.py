from datetime import date, datetime
from types import SimpleNamespace

from teamtasks.models import Task, TaskStatus
from teamtasks.task_utils import (
    calculate_progress,
    count_completed_tasks,
    get_tasks_by_role,
    get_tasks_by_status,
    is_task_overdue,
    sort_tasks_by_priority,
    summarize_tasks,
    validate_task_title,
)


def test_get_tasks_by_status_completed(mock_tasks):
    result = get_tasks_by_status(mock_tasks, "Completada")
    assert [t.id for t in result] == [1, 5]


def test_get_tasks_by_status_accepts_enum(mock_tasks):
    result = get_tasks_by_status(mock_tasks, TaskStatus.PENDING)
    assert [t.id for t in result] == [2, 4]


def test_get_tasks_by_status_unknown_is_empty(mock_tasks):
    assert get_tasks_by_status(mock_tasks, "Cancelada") == []


def test_get_tasks_by_role(mock_tasks):
    assert [t.id for t in get_tasks_by_role(mock_tasks, "Jefe")] == [1, 4]
    assert [t.id for t in get_tasks_by_role(mock_tasks, "Analista")] == [3, 5]
    assert get_tasks_by_role(mock_tasks, "RolInexistente") == []


def test_count_completed_tasks(mock_tasks):
    assert count_completed_tasks(mock_tasks) == 2
    assert count_completed_tasks([]) == 0
    assert count_completed_tasks([Task(1, "a", "Jefe"), Task(2, "b", "Jefe", "En progreso")]) == 0


def test_calculate_progress(mock_tasks):
    assert calculate_progress(mock_tasks) == 40
    assert calculate_progress([]) == 0
    done = [Task(1, "a", "Jefe", "Completada"), Task(2, "b", "Jefe", "Completada")]
    assert calculate_progress(done) == 100


def test_calculate_progress_rounds_half_up():
    tasks = [Task(i, "t", "Jefe") for i in range(1, 9)]
    tasks[0] = Task(1, "t", "Jefe", TaskStatus.COMPLETED)
    # 1/8 = 12.5%
    assert calculate_progress(tasks) == 13


def test_calculate_progress_matches_count(mock_tasks):
    expected = round(count_completed_tasks(mock_tasks) / len(mock_tasks) * 100)
    assert calculate_progress(mock_tasks) == expected


def test_sort_tasks_by_priority(mock_tasks):
    sorted_tasks = sort_tasks_by_priority(mock_tasks)
    assert [t.status.value for t in sorted_tasks] == [
        "Pendiente", "Pendiente", "En progreso", "Completada", "Completada",
    ]


def test_sort_tasks_by_priority_is_stable_and_pure(mock_tasks):
    original = list(mock_tasks)
    sorted_tasks = sort_tasks_by_priority(mock_tasks)
    assert mock_tasks == original
    assert sorted_tasks is not mock_tasks
    assert [t.id for t in sorted_tasks] == [2, 4, 3, 1, 5]


def test_sort_tasks_by_priority_unknown_status_first():
    tasks = [
        SimpleNamespace(id=1, status="Completada"),
        SimpleNamespace(id=2, status="Cancelada"),
        SimpleNamespace(id=3, status="Pendiente"),
    ]
    assert [t.id for t in sort_tasks_by_priority(tasks)] == [2, 3, 1]


def test_sort_tasks_by_priority_empty():
    assert sort_tasks_by_priority([]) == []


def test_is_task_overdue_pending_past_due():
    task = SimpleNamespace(id=1, due_date="2025-01-01", status="Pendiente")
    assert is_task_overdue(task, datetime(2026, 1, 1)) is True


def test_is_task_overdue_completed_is_never_overdue():
    task = SimpleNamespace(id=1, due_date="2025-01-01", status="Completada")
    assert is_task_overdue(task, datetime(2026, 1, 1)) is False


def test_is_task_overdue_without_due_date():
    assert is_task_overdue(SimpleNamespace(id=1, status="Pendiente"), date(2030, 1, 1)) is False
    assert is_task_overdue(Task(1, "a", "Jefe"), date(2030, 1, 1)) is False


def test_is_task_overdue_due_today_is_not_overdue():
    task = Task(1, "a", "Jefe", due_date=date(2026, 3, 1))
    assert is_task_overdue(task, date(2026, 3, 1)) is False
    assert is_task_overdue(task, datetime(2026, 3, 1, 18, 30)) is False
    assert is_task_overdue(task, date(2026, 3, 2)) is True


def test_is_task_overdue_bad_due_date_is_ignored():
    task = SimpleNamespace(id=1, due_date="not a date", status="Pendiente")
    assert is_task_overdue(task, date(2030, 1, 1)) is False


def test_validate_task_title_empty():
    for title in (None, "", "   "):
        result = validate_task_title(title)
        assert result.valid is False
        assert result.error == "title cannot be empty"


def test_validate_task_title_length_boundary():
    assert validate_task_title("a" * 100).valid is True
    too_long = validate_task_title("a" * 101)
    assert too_long.valid is False
    assert too_long.error == "title cannot exceed 100 characters"


def test_validate_task_title_valid_has_no_error():
    result = validate_task_title("Revisar informes")
    assert result.valid is True
    assert result.error is None
    assert result.to_dict() == {"valid": True}
    assert validate_task_title("").to_dict() == {"valid": False, "error": "title cannot be empty"}


def test_summarize_tasks(mock_tasks):
    summary = summarize_tasks(mock_tasks)
    assert summary.total == 5
    assert summary.completed == 2
    assert summary.progress == 40
    assert summary.by_status == {"Pendiente": 2, "En progreso": 1, "Completada": 2}


def test_validate_task_title_non_string_is_empty():
    for title in (123, 4.5, ["a"], object()):
        result = validate_task_title(title)
        assert result.valid is False
        assert result.error == "title cannot be empty"


def test_is_task_overdue_ignores_time_of_day():
    task = Task(1, "a", "Jefe", due_date=date(2026, 3, 1))
    assert is_task_overdue(task, datetime(2026, 3, 1, 23, 59)) is False
