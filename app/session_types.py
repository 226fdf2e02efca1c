"""
Feedback and statistics types used by the Streamlit controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from core.constants import CLOSE_MATCH_THRESHOLD
from core.recall_session import Outcome, SessionState, round_length
from core.similarity import find_best_match, is_similar
from core.word_parser import normalize_word


Tone = Literal["success", "error", "info"]


@dataclass(frozen=True)
class FeedbackMessage:
    """
    Message shown under the input after a submission.
    """
    outcome: Outcome
    text: str
    tone: Tone
    close_miss: bool = False


@dataclass
class PracticeStats:
    """
    Counters for the current session (reset with the session).
    """
    submissions: int = 0
    mistakes: int = 0

    def record(self, outcome: Optional[Outcome]) -> None:
        if outcome is None:
            return
        self.submissions += 1
        if outcome is Outcome.INCORRECT:
            self.mistakes += 1

    @property
    def accuracy(self) -> Optional[float]:
        if self.submissions == 0:
            return None
        return (self.submissions - self.mistakes) / self.submissions


def describe_outcome(
    outcome: Outcome,
    before: SessionState,
    attempt: str,
) -> FeedbackMessage:
    """
    Build the feedback message for one submission.

    Args:
        outcome: Result of the submission
        before: Session state the attempt was compared against
        attempt: What the player typed
    """
    if outcome is Outcome.COMPLETE:
        return FeedbackMessage(outcome, "You unlocked every word. Nice work!", "success")
    if outcome is Outcome.ADVANCE:
        return FeedbackMessage(
            outcome,
            "New word unlocked. Recite the passage from the start.",
            "success",
        )
    if outcome is Outcome.CORRECT:
        return FeedbackMessage(outcome, "Nice! Keep going.", "success")

    position = before.recall_index + 1
    typed = normalize_word(attempt)
    expected = normalize_word(before.words[before.recall_index])
    close = is_similar(typed, expected, CLOSE_MATCH_THRESHOLD)
    if close:
        return FeedbackMessage(
            outcome,
            f"Close! Word {position} needs to match exactly. Try again.",
            "error",
            close_miss=True,
        )

    text = f"Word {position} needs to match. Try again."
    round_words = [normalize_word(w) for w in before.words[:round_length(before)]]
    best = find_best_match(typed, round_words)
    if best is not None and best.distance == 0:
        text = f"\"{attempt.strip()}\" belongs elsewhere in the passage. {text}"
    return FeedbackMessage(outcome, text, "error")
