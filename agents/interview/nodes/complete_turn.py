"""
Complete turn node - Every turn.

Sends the working transcript (or the caller's transcript on continuing
turns) plus the latest user text to the completion provider and appends the
reply as one assistant message. History is never rewritten.
"""

import logging
from typing import Any, Dict

from agents.interview.providers import CompletionProvider
from agents.interview.state import TurnState

logger = logging.getLogger(__name__)


def complete_turn_node(state: TurnState, provider: CompletionProvider) -> Dict[str, Any]:
    """
    Ask the provider for the next assistant message.

    Args:
        state: Current turn state
        provider: Completion provider

    Returns:
        State updates with reply and updated_transcript

    Raises:
        UpstreamUnavailable: If the provider fails, times out or returns nothing
    """
    working = state.get("working_transcript") or state["transcript"]

    reply = provider.complete(working, state.get("user_text"))
    logger.info(f"✔ LLM replied (transcript length {len(working) + 1})")

    return {
        "reply": reply,
        "updated_transcript": list(working) + [{"role": "assistant", "content": reply}],
    }
