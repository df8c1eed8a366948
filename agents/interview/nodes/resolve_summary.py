"""
Resolve summary node - First turn only.

Reuses the cached summary for the session when there is one, otherwise
derives it from the raw CV / JD text (and caches it when a session id was
supplied).
"""

import logging
from typing import Any, Dict

from agents.interview.state import SessionSummary, TurnState
from agents.interview.summarizer import Summarizer
from agents.interview.summary_store import SummaryStore

logger = logging.getLogger(__name__)


def resolve_summary_node(
    state: TurnState,
    summarizer: Summarizer,
    summary_store: SummaryStore
) -> Dict[str, Any]:
    """
    Produce the SessionSummary for a fresh interview.

    Args:
        state: Current turn state
        summarizer: CV/JD summarizer
        summary_store: Session summary cache

    Returns:
        State updates with summary
    """
    session_id = state.get("session_id")

    def compute() -> SessionSummary:
        return summarizer.summarize(state.get("raw_cv"), state.get("raw_jd"))

    if session_id:
        summary = summary_store.compute_if_absent(session_id, compute)
    else:
        logger.info("No session id supplied, summary will not be cached")
        summary = compute()

    return {"summary": summary}
