"""
Recall Board UI

Renders the unlocked words and the card with the next word.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.card_style import (
    BOARD_BG_COLOR,
    CHIP_BG_COLOR,
    CHIP_CURRENT_BORDER,
    CHIP_HIDDEN_BG_COLOR,
    COMPLETE_STYLE,
    NEW_WORD_STYLE,
    RECALL_STYLE,
)
from app.ui.word_card import render_word_card
from core import recall_session
from core.recall_session import SessionState, SessionStatus


def _chip(text: str, bg: str, border: str = "transparent") -> str:
    return (
        f'<span style="background: {bg}; border: 2px solid {border}; border-radius: 6px; '
        f'padding: 4px 10px; font-size: 1.1em;">{escape(text)}</span>'
    )


def render_revealed_words(state: SessionState, hide_words: bool) -> None:
    """
    Render the unlocked words.

    Args:
        state: Current session state
        hide_words: If True, words are masked so the round is recalled
            from memory; the position being recited is outlined
    """
    st.caption("REVEALED WORDS")
    revealed = recall_session.revealed_words(state)

    if not revealed:
        body = '<span style="color: #888;">Start typing to unlock the passage word-by-word.</span>'
    else:
        chips = []
        for index, word in enumerate(revealed):
            current = state.status is SessionStatus.ACTIVE and index == state.recall_index
            border = CHIP_CURRENT_BORDER if current else "transparent"
            if hide_words and state.status is SessionStatus.ACTIVE:
                chips.append(_chip("•" * min(len(word), 8), CHIP_HIDDEN_BG_COLOR, border))
            else:
                chips.append(_chip(word, CHIP_BG_COLOR, border))
        body = "".join(chips)

    st.markdown(
        f'<div style="display: flex; flex-wrap: wrap; gap: 8px; min-height: 80px; '
        f'padding: 14px; border-radius: 10px; background: {BOARD_BG_COLOR}; '
        f'border: 1px solid #e5e7eb;">{body}</div>',
        unsafe_allow_html=True,
    )


def render_next_word(state: SessionState) -> None:
    """
    Render the card for the word waiting to be unlocked.
    """
    st.caption("NEW WORD")
    if state.status is SessionStatus.COMPLETE:
        render_word_card("You unlocked every word. Nice work!", style=COMPLETE_STYLE)
        return
    if state.status is SessionStatus.IDLE:
        render_word_card("Preparing...", style=RECALL_STYLE)
        return

    round_len = recall_session.round_length(state)
    corner = f"Round of {round_len}"
    if state.recall_index < state.revealed_count:
        render_word_card(
            f"Recite word {state.recall_index + 1} of {round_len}",
            subtitle="Type the passage from the start to unlock the next word.",
            corner_text=corner,
            style=RECALL_STYLE,
        )
    else:
        render_word_card(
            recall_session.new_word(state) or "",
            corner_text=corner,
            style=NEW_WORD_STYLE,
        )
