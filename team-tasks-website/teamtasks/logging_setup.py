from __future__ import annotations

import logging
import sys
from typing import Union


class _AppOnlyFilter(logging.Filter):
    """Keep teamtasks logs; let third-party loggers (streamlit, urllib3...) through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "teamtasks" or record.name.startswith("teamtasks."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure a single stderr handler on the root logger.

    Safe to call on every Streamlit rerun: existing handlers are replaced,
    not stacked.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_AppOnlyFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
