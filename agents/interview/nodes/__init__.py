"""
Graph nodes for one interview turn.

- resolve_summary: first turn, cached or freshly derived CV/JD summary
- inject_system_prompt: first turn, transcript becomes [system]
- complete_turn: every turn, one assistant message appended
"""

from agents.interview.nodes.resolve_summary import resolve_summary_node
from agents.interview.nodes.inject_system_prompt import inject_system_prompt_node
from agents.interview.nodes.complete_turn import complete_turn_node

__all__ = [
    "resolve_summary_node",
    "inject_system_prompt_node",
    "complete_turn_node",
]
