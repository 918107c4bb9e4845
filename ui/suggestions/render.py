# ui/suggestions/render.py
import html
from typing import Any, Dict, List, Mapping, Tuple

import streamlit as st

from core import language_data
from core.categories import Category
from core.i18n import presentation_config_for
from core.presentation import PresentationConfig, format_font_size
from ui import browser
from ui.language import current_language, load_registry, t
from ui.suggestions.logic import (
    SuggestionBinding,
    current_display,
    ensure_binding,
    handle_click,
)

VIEWPORT_KEY = "viewport_width"


@st.cache_data(show_spinner=False)
def load_pools(lang: str) -> Dict[Category, List[str]]:
    return language_data.load_pools(lang)


def _load_language(lang: str) -> Tuple[Mapping[Category, List[str]], PresentationConfig]:
    translations = load_registry()["translations"]
    return load_pools(lang), presentation_config_for(translations, lang)


def _on_click(binding: SuggestionBinding, control: str) -> None:
    handle_click(
        st.session_state,
        binding,
        control,
        st.session_state.get(VIEWPORT_KEY),
    )


def _render_suggestion(body_class: str) -> None:
    shown = current_display(st.session_state)
    if shown is None:
        # Keep the slot so the buttons don't jump once something is drawn.
        st.markdown("<div class='suggestion'>&nbsp;</div>", unsafe_allow_html=True)
        return

    st.markdown(
        f"<div class='suggestion {html.escape(body_class)}' "
        f"style='font-size:{format_font_size(shown.font_size)};'>"
        f"{html.escape(shown.text)}</div>",
        unsafe_allow_html=True,
    )


def render(settings: Dict[str, Any]) -> None:
    lang = current_language(settings)
    binding = ensure_binding(st.session_state, lang, _load_language)

    width = browser.get_viewport_width()
    if width is not None:
        st.session_state[VIEWPORT_KEY] = width

    browser.set_page_title(t("title", lang))
    body_class = t("bodyClass", lang) or ""

    st.markdown(
        f"<div class='title {html.escape(body_class)}'>{t('title', lang)}</div>"
        f"<div class='sub'>{t('subtitle', lang)}</div>",
        unsafe_allow_html=True,
    )

    cols = st.columns(len(Category.known()))
    for col, category in zip(cols, Category.known()):
        with col:
            st.button(
                t(f"buttons.{category.value}", lang) or category.value.title(),
                key=f"suggest_{category.value}",
                on_click=_on_click,
                args=(binding, category.value),
                width="stretch",
            )

    _render_suggestion(body_class)

    credit = t("credit", lang)
    if credit:
        st.markdown(f"<div class='credit'>{credit}</div>", unsafe_allow_html=True)
