import streamlit as st

from core.settings_manager import load_settings


def ensure_session_state() -> None:
    """Guarantee the session_state keys the suggestion widget relies on exist."""

    if "user_settings" not in st.session_state:
        st.session_state["user_settings"] = load_settings()

    defaults = {
        "suggestion_binding": None,
        "suggestion_errors": [],
        "viewport_width": None,
    }

    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val
