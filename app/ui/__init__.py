"""UI Components for Vibe Learn"""

from app.ui.word_card import render_word_card
from app.ui.recall_board import render_revealed_words, render_next_word
from app.ui.session_stats import render_session_stats, render_feedback
from app.ui.dataset_browser import render_dataset_browser
from app.ui.dataset_form import render_dataset_form

__all__ = [
    "render_word_card",
    "render_revealed_words",
    "render_next_word",
    "render_session_stats",
    "render_feedback",
    "render_dataset_browser",
    "render_dataset_form",
]
