"""
Dataset Browser UI

Search-as-you-type over shared word lists.
"""

from __future__ import annotations

import time

import streamlit as st

from core import dataset_service
from core.errors import DatasetError
from core.schemas import DatasetSummary


def _run_search() -> None:
    """
    Send the pending query once it has settled for the debounce delay.
    """
    gate = st.session_state.search_gate
    if gate.pending_query == gate.issued_query:
        return
    time.sleep(gate.wait_time())
    if not gate.ready():
        return

    sequence, query = gate.issue()
    try:
        results = dataset_service.list_datasets(query)
        error = None
    except DatasetError as exc:
        results, error = [], exc.message

    if gate.accept(sequence):
        st.session_state.search_results = results
        st.session_state.search_error = error


def render_dataset_browser() -> str | None:
    """
    Render the search box and matching lists.

    Returns:
        Id of the dataset the user chose to practice, or None
    """
    query = st.text_input(
        "Search word lists",
        placeholder="Search by name, author or description",
        key="dataset_query",
    )
    st.session_state.search_gate.update(query)
    _run_search()

    if st.session_state.search_error:
        st.error(st.session_state.search_error)
        return None

    results: list[DatasetSummary] = st.session_state.search_results
    if not results:
        st.caption("No word lists found.")
        return None

    chosen = None
    for dataset in results:
        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                st.markdown(f"**{dataset.name}** · {dataset.username}")
                if dataset.description:
                    st.caption(dataset.description)
                st.caption(f"{dataset.word_count} words · {dataset.created_at:%Y-%m-%d}")
            with col2:
                if st.button("Practice", key=f"load_{dataset.id}", use_container_width=True):
                    chosen = dataset.id
    return chosen
