import logging
from pathlib import Path

import streamlit as st

logger = logging.getLogger(__name__)

CSS_FILE = Path(__file__).resolve().parents[1] / "assets" / "custom_theme.css"

STATUS_COLORS = {
    "Pendiente": "#0984e3",
    "En progreso": "#e17055",
    "Completada": "#00b894",
}


def status_css_class(status: str) -> str:
    """CSS class for a status label: ``En progreso`` -> ``tt-status-En-progreso``."""
    return "tt-status-" + str(status).replace(" ", "-")


def status_css() -> str:
    return "\n".join(
        f".{status_css_class(status)} {{ color: {colour}; font-weight: 600; }}"
        for status, colour in STATUS_COLORS.items()
    )


def widget_css(css_file: Path = CSS_FILE) -> str:
    """Widget stylesheet plus the per-status colour rules.

    A missing stylesheet is logged and only the status rules are returned.
    """
    try:
        base = css_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Theme file not found at %s", css_file)
        base = ""
    return f"{base}\n{status_css()}"


def set_theme(page_title: str = "Team Tasks", page_icon: str = "📋"):
    """Configure the page and inject the widget CSS; call at the top of app.py."""
    try:
        st.set_page_config(page_title=page_title, page_icon=page_icon, layout="wide")
    except Exception:
        # set_page_config can only be called once; ignore if already set.
        logger.debug("set_page_config already called for this run")
    st.markdown(f"<style>{widget_css()}</style>", unsafe_allow_html=True)
