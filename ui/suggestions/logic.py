#ui/suggestions/logic.py
"""Session wiring between the category buttons and a SuggestionCycler.

`attach` returns a SuggestionBinding; every button callback carries the
binding it was created with, and `handle_click` ignores any binding that is
no longer the active one. Switching language goes through `attach`, which
detaches the previous binding first, so at most one cycler is ever live in
a session and a stale click can never draw from (or display text of) the
wrong language.

All functions take the session mapping explicitly (normally
`st.session_state`) so they run the same under plain dicts in tests.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from core.categories import Category, resolve_category
from core.cycler import SuggestionCycler
from core.presentation import PresentationConfig, choose_font_size
from core.shuffle import RandomSource

logger = logging.getLogger(__name__)

BINDING_KEY = "suggestion_binding"
DISPLAY_KEY = "suggestion_display"
ERRORS_KEY = "suggestion_errors"
MAX_ERRORS = 20

PoolLoader = Callable[[str], Tuple[Mapping[Category, Sequence[str]], PresentationConfig]]


@dataclass(frozen=True)
class SuggestionBinding:
    token: str
    language: str
    cycler: SuggestionCycler


@dataclass(frozen=True)
class DisplayedSuggestion:
    text: str
    font_size: int
    category: Category


def _record_error(state: MutableMapping, message: str) -> None:
    logger.error("%s", message)
    errors = state.get(ERRORS_KEY)
    if not isinstance(errors, list):
        errors = []
        state[ERRORS_KEY] = errors
    errors.append(message)
    if len(errors) > MAX_ERRORS:
        del errors[0 : len(errors) - MAX_ERRORS]


def active_binding(state: MutableMapping) -> Optional[SuggestionBinding]:
    b = state.get(BINDING_KEY)
    return b if isinstance(b, SuggestionBinding) else None


def current_display(state: MutableMapping) -> Optional[DisplayedSuggestion]:
    d = state.get(DISPLAY_KEY)
    return d if isinstance(d, DisplayedSuggestion) else None


def clear_display(state: MutableMapping) -> None:
    state.pop(DISPLAY_KEY, None)


def detach(state: MutableMapping, binding: Optional[SuggestionBinding]) -> bool:
    """Release `binding` if it is the active one. Returns True if released."""
    current = active_binding(state)
    if binding is None or current is None or current.token != binding.token:
        return False
    state.pop(BINDING_KEY, None)
    clear_display(state)
    logger.debug("Detached suggestion binding %s (%s)", binding.token, binding.language)
    return True


def attach(
    state: MutableMapping,
    language: str,
    pools: Mapping[Union[str, Category], Sequence[str]],
    config: PresentationConfig,
    *,
    rng: Optional[RandomSource] = None,
) -> SuggestionBinding:
    """Build a fresh cycler for `language` and make it the active binding.

    Any previous binding is released first and the displayed suggestion is
    cleared, so no text from the old language stays on screen.
    """
    detach(state, active_binding(state))
    clear_display(state)

    cycler = SuggestionCycler(
        pools,
        config,
        rng=rng,
        on_error=lambda msg: _record_error(state, msg),
    )
    binding = SuggestionBinding(token=uuid.uuid4().hex, language=language, cycler=cycler)
    state[BINDING_KEY] = binding
    logger.debug("Attached suggestion binding %s (%s)", binding.token, language)
    return binding


def ensure_binding(state: MutableMapping, language: str, loader: PoolLoader) -> SuggestionBinding:
    """Return the active binding, re-attaching only when the language changed."""
    current = active_binding(state)
    if current is not None and current.language == language:
        return current
    pools, config = loader(language)
    return attach(state, language, pools, config)


def handle_click(
    state: MutableMapping,
    binding: SuggestionBinding,
    control: Union[str, Iterable[str]],
    viewport_width: Optional[float],
    *,
    has_target: bool = True,
) -> Optional[DisplayedSuggestion]:
    """Button callback: draw for the control's category and update the display.

    A stale `binding` is ignored. An unrecognized control is reported and
    changes nothing. With no display target (or no result) the draw still
    advances the cycle but nothing is shown.
    """
    current = active_binding(state)
    if current is None or current.token != binding.token:
        logger.warning("Ignoring click for stale binding %s", binding.token)
        return None

    category = resolve_category(control)
    if category is Category.UNRECOGNIZED:
        _record_error(state, f"Unknown button type clicked: {control!r}")
        return None

    choice = binding.cycler.draw(category)
    if not has_target or choice is None:
        return None

    width = viewport_width if viewport_width is not None else 0
    shown = DisplayedSuggestion(
        text=choice,
        font_size=choose_font_size(choice, width, binding.cycler.config),
        category=category,
    )
    state[DISPLAY_KEY] = shown
    return shown


def recent_errors(state: MutableMapping) -> List[str]:
    errors = state.get(ERRORS_KEY)
    return list(errors) if isinstance(errors, list) else []
