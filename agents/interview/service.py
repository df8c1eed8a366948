"""
Interview Session Controller.

Advances an interview by one turn:
- Fresh (empty transcript): resolve the CV/JD summary, inject the system
  prompt, ask the provider for the opening message.
- Continuing: forward the caller's transcript unchanged and append the reply.

The caller owns the transcript. The only server-side state is the summary
store, which is injected so it can be replaced.
"""

import logging
from typing import Callable, List, Optional

from agents.interview.graph import create_turn_graph
from agents.interview.prompt_builder import build_system_prompt
from agents.interview.providers import CompletionProvider
from agents.interview.state import Message, create_initial_state
from agents.interview.summarizer import Summarizer
from agents.interview.summary_store import InMemorySummaryStore, SummaryStore
from utils.langfuse_config import get_langfuse_callbacks

logger = logging.getLogger(__name__)


class InterviewSessionController:
    """
    Thin wrapper around the turn graph.

    Holds the collaborators (provider, summarizer, summary store, prompt
    builder) and exposes advance_conversation.
    """

    def __init__(
        self,
        completion_provider: CompletionProvider,
        summarizer: Summarizer,
        summary_store: Optional[SummaryStore] = None,
        prompt_builder: Optional[Callable[[str, str], str]] = None,
    ):
        self.completion_provider = completion_provider
        self.summarizer = summarizer
        self.summary_store = summary_store if summary_store is not None else InMemorySummaryStore()
        self.prompt_builder = prompt_builder or build_system_prompt

        self.graph = create_turn_graph(
            summarizer=self.summarizer,
            summary_store=self.summary_store,
            completion_provider=self.completion_provider,
            prompt_builder=self.prompt_builder,
        )

    def advance_conversation(
        self,
        transcript: List[Message],
        user_text: Optional[str] = None,
        session_id: Optional[str] = None,
        raw_cv: Optional[str] = None,
        raw_jd: Optional[str] = None,
    ) -> List[Message]:
        """
        Run one turn.

        Args:
            transcript: Full transcript so far (trusted as-is, never trimmed)
            user_text: Latest candidate utterance
            session_id: Key for summary reuse across the interview
            raw_cv: Raw CV text, used on the first turn only
            raw_jd: Raw JD text, used on the first turn only

        Returns:
            The working transcript with exactly one assistant message appended

        Raises:
            UpstreamUnavailable: If the summarizer or the completion provider fails
        """
        state = create_initial_state(
            transcript=transcript,
            user_text=user_text,
            session_id=session_id,
            raw_cv=raw_cv,
            raw_jd=raw_jd,
        )
        config = {
            "callbacks": get_langfuse_callbacks(),
            "metadata": {
                "langfuse_session_id": session_id,
                "langfuse_tags": ["interview_turn"],
            },
        }

        result = self.graph.invoke(state, config=config)
        return result["updated_transcript"]
