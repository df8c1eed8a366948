"""
Inject system prompt node - First turn only.

Starts the working transcript with exactly one system message built from the
session summary.
"""

from typing import Any, Callable, Dict

from agents.interview.state import TurnState


def inject_system_prompt_node(
    state: TurnState,
    prompt_builder: Callable[[str, str], str]
) -> Dict[str, Any]:
    """
    Build the system message.

    Args:
        state: Current turn state (summary must be set)
        prompt_builder: (cv_summary, jd_summary) -> system prompt text

    Returns:
        State updates with working_transcript = [system message]
    """
    summary = state["summary"]
    system_prompt = prompt_builder(summary.cv_summary, summary.jd_summary)
    return {
        "working_transcript": [{"role": "system", "content": system_prompt}]
    }
