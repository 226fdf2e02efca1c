"""
Vibe Learn - Main App

Type each word to reveal the next one, then recall the whole passage.
"""

import logging

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Vibe Learn",
    page_icon="🧠",
    layout="centered"
)


def main():
    """Main app entry point."""
    ensure_session_state()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
