"""
Conditional routing logic for the turn graph.

The only state variable is the turn index, i.e. the transcript length.
"""

from typing import Literal

from agents.interview.state import TurnState


def route_turn(state: TurnState) -> Literal["resolve_summary", "complete_turn"]:
    """
    Route a request to the fresh or the continuing path.

    Args:
        state: Current turn state

    Returns:
        "resolve_summary" for an empty transcript (turn 0), "complete_turn" otherwise
    """
    if len(state.get("transcript") or []) == 0:
        return "resolve_summary"
    return "complete_turn"
