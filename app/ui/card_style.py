"""
Card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "28px 24px"
CARD_MIN_HEIGHT = "120px"
NEW_WORD_BG_COLOR = "#f0f2f6"
COMPLETE_BG_COLOR = "#e8f6ee"
BOARD_BG_COLOR = "#fafafa"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "2.4em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "600"
DEFAULT_SUBTITLE_FONT_SIZE = "1em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_CORNER_FONT_SIZE = "0.8em"
DEFAULT_CORNER_COLOR = "#888"


# ---- Revealed Word Chips ----

CHIP_BG_COLOR = "#e5e7eb"
CHIP_HIDDEN_BG_COLOR = "#d1d5db"
CHIP_CURRENT_BORDER = "#2563eb"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for word cards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = NEW_WORD_BG_COLOR


DEFAULT_CARD_STYLE = CardStyle()


# ---- Presets ----

NEW_WORD_STYLE = DEFAULT_CARD_STYLE

RECALL_STYLE = CardStyle(
    main_font_size="1.6em",
    main_color="#6b7280",
    main_weight="normal",
)

COMPLETE_STYLE = CardStyle(
    main_font_size="1.5em",
    main_color="#047857",
    bg_color=COMPLETE_BG_COLOR,
)
