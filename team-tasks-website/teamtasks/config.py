from __future__ import annotations

from dataclasses import dataclass

from teamtasks.config_utils import env_bool, env_choice, env_str
from teamtasks.models import Role


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TaskWidgetConfig:
    """Runtime configuration for the task widget page.

    Env-first with safe local-dev defaults:
    - TEAMTASKS_DEFAULT_ROLE: role preselected in the role picker (default: Jefe)
    - TEAMTASKS_SEED_SAMPLE_TASKS: start with the demo tasks (default: true)
    - TEAMTASKS_PAGE_TITLE: browser tab / header title (default: Team Tasks)
    - TEAMTASKS_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFO)

    Unrecognised values fall back to the default; loading never raises.
    """

    default_role: str
    seed_sample_tasks: bool
    page_title: str
    log_level: str

    @classmethod
    def from_env(cls) -> "TaskWidgetConfig":
        roles = tuple(r.value for r in Role)
        return cls(
            default_role=env_choice("TEAMTASKS_DEFAULT_ROLE", Role.CHIEF.value, roles),
            seed_sample_tasks=env_bool("TEAMTASKS_SEED_SAMPLE_TASKS", True),
            page_title=env_str("TEAMTASKS_PAGE_TITLE", "Team Tasks"),
            log_level=env_choice("TEAMTASKS_LOG_LEVEL", "INFO", LOG_LEVELS),
        )
