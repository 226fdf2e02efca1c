"""
Tests for practice feedback messages and counters.
"""

from app.session_types import PracticeStats, describe_outcome
from core import recall_session
from core.recall_session import Outcome


def test_incorrect_reports_position():
    state = recall_session.load(["energy", "clarity"])
    state, _ = recall_session.submit(state, "energy")
    state, _ = recall_session.submit(state, "energy")

    message = describe_outcome(Outcome.INCORRECT, state, "banana")
    assert message.text == "Word 2 needs to match. Try again."
    assert message.tone == "error"
    assert not message.close_miss


def test_incorrect_close_miss():
    state = recall_session.load(["clarity"])
    message = describe_outcome(Outcome.INCORRECT, state, "Clarify")
    assert message.close_miss
    assert message.text.startswith("Close!")


def test_success_messages():
    state = recall_session.load(["energy"])
    assert describe_outcome(Outcome.COMPLETE, state, "energy").text == "You unlocked every word. Nice work!"
    assert describe_outcome(Outcome.CORRECT, state, "energy").tone == "success"
    assert "New word unlocked" in describe_outcome(Outcome.ADVANCE, state, "energy").text


def test_practice_stats():
    stats = PracticeStats()
    assert stats.accuracy is None
    for outcome in [Outcome.ADVANCE, Outcome.INCORRECT, Outcome.CORRECT, None, Outcome.COMPLETE]:
        stats.record(outcome)
    assert stats.submissions == 4
    assert stats.mistakes == 1
    assert stats.accuracy == 0.75


def test_incorrect_points_out_word_from_elsewhere_in_round():
    state = recall_session.load(["energy", "clarity", "flow"])
    for word in ["energy", "energy", "clarity"]:
        state, _ = recall_session.submit(state, word)

    message = describe_outcome(Outcome.INCORRECT, state, "Clarity")
    assert message.text == "\"Clarity\" belongs elsewhere in the passage. Word 1 needs to match. Try again."
