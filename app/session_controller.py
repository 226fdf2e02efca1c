"""
Session lifecycle helpers for the Streamlit app.
"""

from __future__ import annotations

import logging
from typing import Sequence

import streamlit as st

from app.session_types import PracticeStats, describe_outcome
from core import dataset_service, recall_session
from core.errors import DatasetError
from core.word_parser import parse_words_or_raise
from core.word_source import decode_upload

logger = logging.getLogger(__name__)


def start_session(words: Sequence[str], label: str, notice: str | None = None) -> None:
    """
    Load a word list into a fresh practice session.
    """
    st.session_state.recall_state = recall_session.load(words)
    st.session_state.source_label = label
    st.session_state.data_notice = notice
    st.session_state.feedback = None
    st.session_state.practice_stats = PracticeStats()
    st.session_state.current_text = " ".join(words)
    logger.info("Started session %r with %d words", label, len(words))


def start_session_from_text(text: str, label: str, source: str = "text") -> bool:
    """
    Parse raw text and start a session.

    Returns:
        True if a session was started, False if the text had no words
    """
    try:
        words = parse_words_or_raise(text, source=source)
    except DatasetError as exc:
        st.error(exc.message)
        return False
    start_session(words, label)
    return True


def start_session_from_upload(data: bytes, label: str) -> bool:
    """
    Decode an uploaded text file and start a session.

    Returns:
        True if a session was started, False if the file was rejected
    """
    try:
        text = decode_upload(data)
    except DatasetError as exc:
        st.error(exc.message)
        return False
    return start_session_from_text(text, label, source="file")


def start_session_from_dataset(dataset_id: str) -> bool:
    """
    Fetch a stored list and start a session with it.
    """
    try:
        with st.spinner("Loading word list..."):
            dataset = dataset_service.get_dataset(dataset_id)
    except DatasetError as exc:
        st.error(exc.message)
        return False
    start_session(dataset.words, f"{dataset.name} by {dataset.username}")
    return True


def submit_attempt(attempt: str) -> None:
    """
    Submit one typed word and store the feedback message.
    """
    if not attempt.strip():
        return

    before = st.session_state.recall_state
    after, outcome = recall_session.submit(before, attempt)
    if outcome is None:
        return

    st.session_state.recall_state = after
    st.session_state.practice_stats.record(outcome)
    st.session_state.feedback = describe_outcome(outcome, before, attempt)


def restart_session() -> None:
    """
    Reset progress on the current list.
    """
    st.session_state.recall_state = recall_session.reset(st.session_state.recall_state)
    st.session_state.practice_stats = PracticeStats()
    st.session_state.feedback = None
