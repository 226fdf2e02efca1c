"""
Streamlit session state initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from app.session_types import PracticeStats
from core import recall_session
from core.search_gate import SearchGate
from core.word_source import load_default_words


@st.cache_data
def _default_words() -> tuple[list[str], str | None]:
    return load_default_words()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.

    The first run loads the default word list so the practice page is
    usable without picking a source.
    """
    if "recall_state" not in st.session_state:
        words, notice = _default_words()
        st.session_state.recall_state = recall_session.load(words)
        st.session_state.source_label = "Default word file"
        st.session_state.data_notice = notice
        st.session_state.current_text = " ".join(words)
    if "source_label" not in st.session_state:
        st.session_state.source_label = None
    if "data_notice" not in st.session_state:
        st.session_state.data_notice = None
    if "feedback" not in st.session_state:
        st.session_state.feedback = None
    if "practice_stats" not in st.session_state:
        st.session_state.practice_stats = PracticeStats()
    if "search_gate" not in st.session_state:
        st.session_state.search_gate = SearchGate()
    if "search_results" not in st.session_state:
        st.session_state.search_results = []
    if "search_error" not in st.session_state:
        st.session_state.search_error = None
    if "current_text" not in st.session_state:
        st.session_state.current_text = ""
