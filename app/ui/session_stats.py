"""
Session Statistics UI

Renders progress metrics and the restart control.
"""

import streamlit as st

from core import recall_session


def render_session_stats() -> bool:
    """
    Render session progress metrics and restart button.

    Returns:
        True if restart button was clicked, False otherwise
    """
    state = st.session_state.recall_state
    stats = st.session_state.practice_stats

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        st.metric("Unlocked", f"{state.revealed_count}/{len(state.words)}")

    with col2:
        st.metric("Round", recall_session.round_length(state))

    with col3:
        if stats.accuracy is not None:
            st.metric("Accuracy", f"{stats.accuracy * 100:.0f}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("↺", help="Restart session", use_container_width=True):
            return True

    st.divider()
    return False


def render_feedback() -> None:
    """Render the message from the last submission."""
    feedback = st.session_state.feedback
    if feedback is None:
        st.caption("Enter each word exactly how it appears in your text.")
        return
    if feedback.tone == "success":
        st.success(feedback.text)
    elif feedback.tone == "error":
        st.error(feedback.text)
    else:
        st.info(feedback.text)
