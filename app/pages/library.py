"""
Word list library page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import start_session_from_dataset
from app.ui import render_dataset_browser, render_dataset_form
from core import dataset_repo


def render_library_page() -> None:
    st.title("Word Lists")
    if dataset_repo.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using vibelearn_test (set TEST_MODE=false in .env for production)")

    # Set before a rerun so it shows on the next pass
    notice = st.session_state.pop("library_notice", None)
    if notice:
        st.success(notice)

    st.markdown("### Browse")
    chosen = render_dataset_browser()
    if chosen and start_session_from_dataset(chosen):
        # Practice tab was drawn earlier in this run; redraw it with the new list
        st.session_state.library_notice = "Word list loaded. Open the Practice tab to start."
        st.rerun()

    st.markdown("### Share a list")
    render_dataset_form()
