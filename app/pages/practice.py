"""
Practice page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    restart_session,
    start_session,
    start_session_from_text,
    start_session_from_upload,
    submit_attempt,
)
from app.ui import (
    render_feedback,
    render_next_word,
    render_revealed_words,
    render_session_stats,
)
from core import recall_session
from core.recall_session import SessionStatus
from core.word_source import load_default_words


def render_practice_page() -> None:
    """
    Render the recall session (board, input and source picker).
    """
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("Vibe Learn")
    st.markdown(
        "Type each word to reveal the next one. Every round, recite the "
        "passage from the first word."
    )
    if st.session_state.source_label:
        st.caption(f"Practicing: {st.session_state.source_label}")
    if st.session_state.data_notice:
        st.info(st.session_state.data_notice)

    if render_session_stats():
        restart_session()
        st.rerun()

    state = st.session_state.recall_state
    st.caption(recall_session.progress_label(state))
    hide_words = st.toggle("Hide revealed words while reciting", value=True)
    render_revealed_words(state, hide_words=hide_words)
    st.markdown("<br>", unsafe_allow_html=True)
    render_next_word(state)
    st.markdown("<br>", unsafe_allow_html=True)

    active = state.status is SessionStatus.ACTIVE
    with st.form("attempt_form", clear_on_submit=True):
        attempt = st.text_input(
            "Your word",
            placeholder="Type the next word and press enter" if active else "All words unlocked",
            disabled=not active,
            label_visibility="collapsed",
            autocomplete="off",
        )
        submitted = st.form_submit_button("Submit word", type="primary", disabled=not active)
    if submitted:
        submit_attempt(attempt)
        st.rerun()

    render_feedback()
    _render_source_picker()


def _render_source_picker() -> None:
    with st.expander("Choose what to practice"):
        tab_text, tab_file, tab_default = st.tabs(["Type text", "Upload file", "Default list"])

        with tab_text:
            text = st.text_area("Paste or type a passage", height=140, key="typed_text")
            if st.button("Practice this text", key="use_text"):
                if start_session_from_text(text, "Typed text"):
                    st.rerun()

        with tab_file:
            upload = st.file_uploader("Plain-text file", type=["txt"])
            if upload is not None and st.button("Practice this file", key="use_file"):
                if start_session_from_upload(upload.getvalue(), upload.name):
                    st.rerun()

        with tab_default:
            if st.button("Reload default list", key="use_default"):
                words, notice = load_default_words()
                start_session(words, "Default word file", notice)
                st.rerun()
