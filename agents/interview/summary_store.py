"""
Session summary cache.

The controller depends on the SummaryStore protocol, not on a module-level
dict, so tests can inject their own store and a bounded or shared store can
replace the in-memory one.
"""

import logging
from typing import Callable, Dict, Optional, Protocol

from agents.interview.state import SessionSummary

logger = logging.getLogger(__name__)


class SummaryStore(Protocol):
    """Key-value store for session summaries."""

    def get(self, session_id: str) -> Optional[SessionSummary]:
        ...

    def set(self, session_id: str, summary: SessionSummary) -> None:
        ...

    def compute_if_absent(
        self,
        session_id: str,
        compute: Callable[[], SessionSummary]
    ) -> SessionSummary:
        ...


class InMemorySummaryStore:
    """
    Process-lifetime summary cache.

    Unbounded and never evicted; entries are lost on restart. There is no
    lock: two first turns for the same unseen session may both compute and
    the last write wins. Both computations derive from the same inputs.
    """

    def __init__(self):
        self._summaries: Dict[str, SessionSummary] = {}

    def get(self, session_id: str) -> Optional[SessionSummary]:
        return self._summaries.get(session_id)

    def set(self, session_id: str, summary: SessionSummary) -> None:
        self._summaries[session_id] = summary

    def compute_if_absent(
        self,
        session_id: str,
        compute: Callable[[], SessionSummary]
    ) -> SessionSummary:
        """
        Return the cached summary for session_id, computing and storing it on a miss.

        Args:
            session_id: Session identifier
            compute: Zero-argument callable deriving the summary

        Returns:
            Cached or freshly computed summary
        """
        existing = self.get(session_id)
        if existing is not None:
            logger.info(f"Summary cache hit for session {session_id}")
            return existing

        logger.info(f"Summary cache miss for session {session_id}")
        summary = compute()
        self.set(session_id, summary)
        return summary

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._summaries

    def __len__(self) -> int:
        return len(self._summaries)
