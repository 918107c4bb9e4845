#ui/sidebar.py
import streamlit as st

from core import language_data
from ui.language import LANGUAGE_KEY, current_language, set_language, supported_languages

SWITCHER_KEY = "language_switcher"


def _language_changed(settings: dict):
    chosen = st.session_state.get(SWITCHER_KEY)
    if chosen and chosen != st.session_state.get(LANGUAGE_KEY):
        set_language(chosen, settings)


def render_sidebar(settings: dict):
    st.sidebar.header("Settings")

    langs = supported_languages()
    names = language_data.load_language_names()
    current = current_language(settings)

    # One-time init for the widget key (must happen BEFORE the radio is created)
    if st.session_state.get(SWITCHER_KEY) not in langs:
        st.session_state[SWITCHER_KEY] = current

    st.sidebar.radio(
        "Language",
        options=langs,
        format_func=lambda code: names.get(code, code),
        key=SWITCHER_KEY,
        horizontal=True,
        on_change=_language_changed,
        args=(settings,),
    )

    ui = settings.setdefault("ui", {})
    if "ui_compact" not in st.session_state:
        st.session_state["ui_compact"] = bool(ui.get("compact", False))

    with st.sidebar.expander("📱 UI", expanded=False):
        st.checkbox("Compact layout (mobile)", key="ui_compact")

    # Sync widget -> persisted settings (mutate IN PLACE, do not replace settings dict)
    ui["compact"] = bool(st.session_state["ui_compact"])
