# app.py
import streamlit as st

from ui.sidebar import render_sidebar
from ui.shared.session_state import ensure_session_state
from ui.suggestions.render import render as suggestions_render
from core.settings_manager import save_settings

st.set_page_config(
    page_title="Can I Get A...",
    layout="centered",
    initial_sidebar_state="collapsed",
)

st.markdown("""
    <style>
    .stApp {
        background: #fdfbf6;
        color: #222;
    }

    html, body, [class*="css"]  {
        font-family: "Helvetica Neue", "Arial", sans-serif;
    }

    .title {
        font-size: 2.6rem;
        font-weight: 700;
        text-align: center;
        margin-top: 1rem;
    }
    .sub {
        text-align: center;
        color: #666;
        margin-bottom: 1.5rem;
    }

    /* Category buttons */
    .stButton > button {
        text-transform: uppercase;
        letter-spacing: 0.05em;
        font-weight: 600;
        padding: 0.75rem 0;
    }

    /* Drawn suggestion; font-size is set inline per draw */
    .suggestion {
        text-align: center;
        min-height: 4rem;
        margin: 2rem 0;
        line-height: 1.2;
        word-wrap: break-word;
    }

    .credit {
        text-align: center;
        font-size: 0.8rem;
        color: #888;
        margin-top: 3rem;
    }

    /* Greek copy uses a font with full polytonic coverage */
    .greek {
        font-family: "Noto Sans", "Arial", sans-serif;
    }
    </style>
""", unsafe_allow_html=True)

# --- Initialize Settings ---
ensure_session_state()
settings = st.session_state.user_settings

render_sidebar(settings)
save_settings(settings)

if st.session_state.get("ui_compact"):
    st.markdown(
        "<style>.title { font-size: 1.8rem; margin-top: 0; } .suggestion { margin: 1rem 0; }</style>",
        unsafe_allow_html=True,
    )

suggestions_render(settings)
