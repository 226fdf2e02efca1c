"""
Recall Session - progressive reveal with cumulative recall.

The player types the newest word to unlock it, then every round recites
all unlocked words from the start. Finishing a round at the newest word
unlocks the next one, so each round is one word longer than the last.

All transitions are pure: they take a SessionState and return a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from core.word_parser import normalize_word


class SessionStatus(str, Enum):
    """Lifecycle of a practice session."""
    IDLE = "idle"          # No word list loaded
    ACTIVE = "active"      # Word list loaded, words left to unlock
    COMPLETE = "complete"  # Every word unlocked


class Outcome(str, Enum):
    """Result of one submitted attempt."""
    ADVANCE = "advance"      # Round finished, next word revealed
    CORRECT = "correct"      # Matched a previously mastered word
    INCORRECT = "incorrect"  # No match, retry the same position
    COMPLETE = "complete"    # Last word unlocked


@dataclass(frozen=True)
class SessionState:
    """
    Immutable snapshot of a practice session.

    ``recall_index`` is the position the next attempt is compared against;
    it never exceeds ``revealed_count``.
    """
    words: tuple[str, ...] = ()
    revealed_count: int = 0
    recall_index: int = 0
    loaded: bool = False

    @property
    def complete(self) -> bool:
        return self.loaded and self.revealed_count == len(self.words)

    @property
    def status(self) -> SessionStatus:
        if not self.loaded:
            return SessionStatus.IDLE
        if self.complete:
            return SessionStatus.COMPLETE
        return SessionStatus.ACTIVE


IDLE_STATE = SessionState()


def load(words: Iterable[str]) -> SessionState:
    """
    Start a session over a word list.

    An empty list is complete immediately; callers reject empty lists
    before they get here.
    """
    return SessionState(words=tuple(words), loaded=True)


def submit(state: SessionState, attempt: str) -> tuple[SessionState, Optional[Outcome]]:
    """
    Compare an attempt against the word at ``recall_index``.

    Args:
        state: Current session state
        attempt: Raw text typed by the player

    Returns:
        (new_state, outcome); outcome is None when no session is active
    """
    if state.status is not SessionStatus.ACTIVE:
        return state, None

    expected = state.words[state.recall_index]
    if normalize_word(attempt) != normalize_word(expected):
        return state, Outcome.INCORRECT

    if state.recall_index + 1 > state.revealed_count:
        revealed = min(state.revealed_count + 1, len(state.words))
        new_state = replace(state, revealed_count=revealed, recall_index=0)
        outcome = Outcome.COMPLETE if new_state.complete else Outcome.ADVANCE
        return new_state, outcome

    return replace(state, recall_index=state.recall_index + 1), Outcome.CORRECT


def reset(state: SessionState) -> SessionState:
    """Forget all progress but keep the word list."""
    return replace(state, revealed_count=0, recall_index=0)


# ---- Read helpers ----

def round_length(state: SessionState) -> int:
    """
    Number of words to recite in the current round.
    """
    if state.status is SessionStatus.IDLE:
        return 0
    if state.complete:
        return len(state.words)
    return min(state.revealed_count + 1, len(state.words))


def revealed_words(state: SessionState) -> tuple[str, ...]:
    return state.words[:state.revealed_count]


def expected_word(state: SessionState) -> Optional[str]:
    """The word the next attempt must match, or None when not active."""
    if state.status is not SessionStatus.ACTIVE:
        return None
    return state.words[state.recall_index]


def new_word(state: SessionState) -> Optional[str]:
    """The next word waiting to be unlocked (shown to the player)."""
    if state.status is not SessionStatus.ACTIVE:
        return None
    return state.words[state.revealed_count]


def progress_label(state: SessionState) -> str:
    if not state.words:
        return "Preparing your session..."
    return f"{state.revealed_count}/{len(state.words)} words unlocked"
