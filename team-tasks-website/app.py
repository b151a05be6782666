import html
from datetime import date

import streamlit as st

from teamtasks.config import TaskWidgetConfig
from teamtasks.frames import status_breakdown_figure, tasks_to_df
from teamtasks.logging_setup import setup_logging
from teamtasks.models import Role, TaskStatus
from teamtasks.task_store import TaskBoard
from teamtasks.task_utils import is_task_overdue, summarize_tasks, validate_task_title
from teamtasks.theme import set_theme, status_css_class
from teamtasks.visibility import get_my_tasks, get_team_tasks, has_team_view

config = TaskWidgetConfig.from_env()
setup_logging(config.log_level)
set_theme(page_title=config.page_title)

ROLES = [r.value for r in Role]

# ----- Initialize session state -----
if "board" not in st.session_state:
    st.session_state.board = TaskBoard.with_sample_tasks() if config.seed_sample_tasks else TaskBoard()
if "role" not in st.session_state:
    st.session_state.role = config.default_role
if "editing_id" not in st.session_state:
    st.session_state.editing_id = None

board: TaskBoard = st.session_state.board

st.sidebar.header("Viewer")
st.sidebar.selectbox("Role", options=ROLES, key="role")
role = st.session_state.role

st.markdown('<div class="tt-container">', unsafe_allow_html=True)
st.title(config.page_title)

my_tasks = get_my_tasks(board.tasks, role)
team_tasks = get_team_tasks(board.tasks, role)
today = date.today()

# ----- KPI row (my tasks) -----
summary = summarize_tasks(my_tasks)
k1, k2, k3 = st.columns(3)
k1.metric("My tasks", summary.total)
k2.metric("Completed", summary.completed)
k3.metric("Progress", f"{summary.progress}%")
st.progress(summary.progress / 100)


def task_line_html(task) -> str:
    overdue = is_task_overdue(task, today)
    classes = ["tt-task"]
    if task.is_completed:
        classes.append("tt-completed")
    if overdue:
        classes.append("tt-overdue")
    badge = '<span class="tt-overdue-badge">OVERDUE</span>' if overdue else ""
    due = f" · Due: {task.due_date.isoformat()}" if task.due_date else ""
    status_cls = status_css_class(task.status.value)
    return (
        f'<div class="{" ".join(classes)}">'
        f'<span class="tt-task-title">{html.escape(task.title)}</span>{badge}'
        f'<div class="tt-task-meta">Status: <span class="{status_cls}">{task.status.value}</span>{due}</div>'
        f"</div>"
    )


# ----- My tasks -----
st.markdown('<div class="tt-section-title">My Tasks</div>', unsafe_allow_html=True)
if not my_tasks:
    st.info("You have no assigned tasks.")
for task in my_tasks:
    tid = task.id
    if st.session_state.editing_id == tid:
        with st.form(f"edit-{tid}"):
            new_title = st.text_input("Edit task", value=task.title, key=f"edit-title-{tid}")
            save_col, cancel_col = st.columns(2)
            saved = save_col.form_submit_button("Save")
            cancelled = cancel_col.form_submit_button("Cancel")
        if saved:
            check = validate_task_title((new_title or "").strip())
            if not check.valid:
                st.error(check.error)
            else:
                board.edit(tid, new_title)
                st.session_state.editing_id = None
                st.rerun()
        elif cancelled:
            board.edit(tid, None)
            st.session_state.editing_id = None
            st.rerun()
        continue

    line_col, edit_col, del_col, start_col, toggle_col = st.columns([5, 1, 1, 1, 1.2])
    with line_col:
        st.markdown(task_line_html(task), unsafe_allow_html=True)
    with edit_col:
        if st.button("Edit", key=f"edit-btn-{tid}"):
            st.session_state.editing_id = tid
            st.rerun()
    with del_col:
        if st.button("Delete", key=f"del-{tid}"):
            board.remove(tid)
            st.rerun()
    with start_col:
        if task.status is TaskStatus.PENDING and st.button("Start", key=f"start-{tid}"):
            board.set_status(tid, TaskStatus.IN_PROGRESS)
            st.rerun()
    with toggle_col:
        label = "Reopen" if task.is_completed else "Complete"
        if st.button(label, key=f"toggle-{tid}"):
            board.toggle(tid)
            st.rerun()

# ----- Add task -----
with st.form("add-task", clear_on_submit=True):
    nt_title = st.text_input("New task", placeholder="What needs doing?")
    nt_due = st.date_input("Due date (optional)", value=None)
    submitted = st.form_submit_button("Add Task")
if submitted:
    check = validate_task_title((nt_title or "").strip())
    if not check.valid:
        st.error(check.error)
    else:
        board.add(nt_title, role, nt_due)
        st.rerun()

# ----- Team tasks -----
st.markdown('<div class="tt-section-title">My Team\'s Tasks</div>', unsafe_allow_html=True)
if not has_team_view(role) or not team_tasks:
    st.info("No team tasks to show.")
else:
    st.dataframe(tasks_to_df(team_tasks, today=today), use_container_width=True, hide_index=True)
    st.plotly_chart(status_breakdown_figure(team_tasks), use_container_width=True)

st.markdown('</div>', unsafe_allow_html=True)
