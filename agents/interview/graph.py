"""
Interview turn graph construction.

Graph flow:
START -> route_turn (checks transcript length)
  ├─ Empty transcript (turn 0) -> resolve_summary -> inject_system_prompt -> complete_turn -> END
  └─ Non-empty transcript       -> complete_turn -> END

Nodes are simple functions; collaborators are bound with lambdas so the graph
itself holds no process-wide state.
"""

from typing import Callable

from langgraph.graph import StateGraph, END

from agents.interview.state import TurnState
from agents.interview.nodes import (
    resolve_summary_node,
    inject_system_prompt_node,
    complete_turn_node,
)
from agents.interview.conditions import route_turn
from agents.interview.providers import CompletionProvider
from agents.interview.summarizer import Summarizer
from agents.interview.summary_store import SummaryStore


def create_turn_graph(
    summarizer: Summarizer,
    summary_store: SummaryStore,
    completion_provider: CompletionProvider,
    prompt_builder: Callable[[str, str], str],
):
    """
    Create the graph that advances a conversation by one turn.

    Args:
        summarizer: CV/JD summarizer used on the first turn
        summary_store: Session summary cache
        completion_provider: Produces the next assistant reply
        prompt_builder: (cv_summary, jd_summary) -> system prompt text

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(TurnState)

    workflow.add_node(
        "resolve_summary",
        lambda state: resolve_summary_node(state, summarizer, summary_store)
    )
    workflow.add_node(
        "inject_system_prompt",
        lambda state: inject_system_prompt_node(state, prompt_builder)
    )
    workflow.add_node(
        "complete_turn",
        lambda state: complete_turn_node(state, completion_provider)
    )

    workflow.set_conditional_entry_point(
        route_turn,
        {
            "resolve_summary": "resolve_summary",
            "complete_turn": "complete_turn",
        }
    )

    workflow.add_edge("resolve_summary", "inject_system_prompt")
    workflow.add_edge("inject_system_prompt", "complete_turn")
    workflow.add_edge("complete_turn", END)

    # No checkpointer: the caller round-trips the transcript
    return workflow.compile()
