"""
Word Card UI Component

Renders the large card showing the word to unlock next.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.card_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_CARD_STYLE,
    CardStyle,
)


def render_word_card(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: CardStyle | None = None,
) -> None:
    """
    Render a centered card.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Optional style preset
    """
    style = style or DEFAULT_CARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 12px; right: 16px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color};">'
            f"{escape(corner_text)}</div>"
        )

    main_html = (
        f'<h2 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        f'font-weight: {style.main_weight}; margin: 0; text-align: center; '
        'line-height: 1.4; overflow-wrap: anywhere;">'
        f"{escape(main_text)}</h2>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'margin: 12px 0 0 0; text-align: center;">{escape(subtitle)}</p>'
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)
