from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BREAKPOINT_MOBILE = 550
SHORT_TEXT_LENGTH = 17

FONT_SIZES = {
    "small": 18,  # Mobile or long suggestions
    "large": 29,  # Desktop and short suggestions
}


@dataclass(frozen=True)
class PresentationConfig:
    min_font_size: int = FONT_SIZES["small"]
    max_font_size: int = FONT_SIZES["large"]
    short_text_threshold: int = SHORT_TEXT_LENGTH
    narrow_viewport_threshold: int = BREAKPOINT_MOBILE


def choose_font_size(text: Optional[str], viewport_width: float, config: PresentationConfig) -> int:
    """Pick the suggestion font size.

    Large when the viewport is wider than the breakpoint OR the text is
    short; either condition alone is enough. Small only for long text on a
    narrow viewport.
    """
    wide_enough = viewport_width > config.narrow_viewport_threshold
    short_text = len(text or "") <= config.short_text_threshold
    if wide_enough or short_text:
        return config.max_font_size
    return config.min_font_size


def format_font_size(px: int) -> str:
    return f"{px}px"
