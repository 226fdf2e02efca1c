"""
Dataset Form UI

Saves the current practice text as a shared word list.
"""

from __future__ import annotations

import streamlit as st

from core import dataset_service
from core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
)
from core.errors import DatasetError
from core.word_parser import parse_words


def render_dataset_form() -> None:
    """
    Render the create form and submit it through the dataset service.
    """
    with st.form("create_dataset", clear_on_submit=False):
        name = st.text_input("List name", max_chars=MAX_NAME_LENGTH)
        username = st.text_input("Your name", max_chars=MAX_USERNAME_LENGTH)
        description = st.text_area("Description (optional)", max_chars=MAX_DESCRIPTION_LENGTH)
        text = st.text_area("Words", value=st.session_state.current_text, height=160)
        submitted = st.form_submit_button("Save word list", type="primary")

    if not submitted:
        return

    payload = {
        "name": name,
        "username": username,
        "description": description,
        "words": parse_words(text),
    }
    try:
        dataset = dataset_service.create_dataset(payload)
    except DatasetError as exc:
        st.error(exc.message)
        return

    st.session_state.library_notice = f"Saved \"{dataset.name}\" with {dataset.word_count} words."
    # Force the browser to search again so the new list shows up
    st.session_state.search_gate.issued_query = None
    st.rerun()
