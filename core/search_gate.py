"""
Search-as-you-type gate.

A query is only sent once it has stopped changing for the debounce delay,
and a response is only shown if it belongs to the latest request issued.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from core.constants import SEARCH_DEBOUNCE_SECONDS


@dataclass
class SearchGate:
    """
    Tracks the pending query and the sequence number of the newest request.
    """
    delay: float = SEARCH_DEBOUNCE_SECONDS
    clock: Callable[[], float] = time.monotonic
    pending_query: Optional[str] = None
    changed_at: float = 0.0
    last_sequence: int = 0
    issued_query: Optional[str] = field(default=None)

    def update(self, query: str) -> None:
        """Record the latest text typed into the search box."""
        query = query.strip()
        if query == self.pending_query:
            return
        self.pending_query = query
        self.changed_at = self.clock()

    def ready(self) -> bool:
        """True once the pending query has settled and was not sent yet."""
        if self.pending_query is None or self.pending_query == self.issued_query:
            return False
        return self.clock() - self.changed_at >= self.delay

    def wait_time(self) -> float:
        return max(0.0, self.delay - (self.clock() - self.changed_at))

    def issue(self) -> tuple[int, str]:
        """
        Mark the pending query as sent.

        Returns:
            (sequence_number, query) for the new request
        """
        self.last_sequence += 1
        self.issued_query = self.pending_query or ""
        return self.last_sequence, self.issued_query

    def accept(self, sequence: int) -> bool:
        """Whether a response for ``sequence`` should replace the shown results."""
        return sequence == self.last_sequence
