"""Table and chart builders for the page (pandas / plotly).

Kept out of app.py so they can be unit tested without a Streamlit runtime.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from teamtasks.models import STATUS_PRIORITY, TaskStatus
from teamtasks.task_utils import get_tasks_by_status, is_task_overdue
from teamtasks.theme import STATUS_COLORS

TASK_COLUMNS = ["id", "title", "assignedTo", "status", "dueDate", "overdue"]


def tasks_to_df(tasks: Sequence[Any], today: Optional[date] = None) -> pd.DataFrame:
    if not tasks:
        return pd.DataFrame(columns=TASK_COLUMNS)
    today = today or date.today()
    rows = []
    for t in tasks:
        row = t.to_dict()
        row["overdue"] = is_task_overdue(t, today)
        rows.append(row)
    df = pd.DataFrame(rows, columns=TASK_COLUMNS)
    df["dueDate"] = pd.to_datetime(df["dueDate"], errors="coerce").dt.date
    return df


def status_breakdown_figure(tasks: Sequence[Any]) -> go.Figure:
    """Bar chart of task counts per status, in priority order."""
    statuses = sorted(TaskStatus, key=lambda s: STATUS_PRIORITY[s])
    labels = [s.value for s in statuses]
    counts = [len(get_tasks_by_status(tasks, s)) for s in statuses]
    fig = go.Figure()
    fig.add_bar(
        x=labels,
        y=counts,
        marker_color=[STATUS_COLORS.get(label, "#888") for label in labels],
    )
    fig.update_layout(
        template="plotly_white",
        margin=dict(l=6, r=6, t=30, b=10),
        height=300,
        showlegend=False,
        yaxis=dict(dtick=1),
    )
    return fig
