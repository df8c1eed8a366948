"""
Completion providers.

A provider turns (transcript, latest user text) into the next assistant
reply. Two implementations:
- LLMCompletionProvider: calls the chat model directly through LLMService
- RemoteCompletionProvider: forwards to the interview backend at LLM_BASE_URL
"""

import logging
from typing import Optional, Protocol, Sequence

from agents.interview.state import Message
from config.settings import settings
from services.interview_backend_client import InterviewBackendClient
from utils.exceptions import UpstreamUnavailable
from utils.llm_service import LLMService

logger = logging.getLogger(__name__)


class CompletionProvider(Protocol):
    def complete(self, transcript: Sequence[Message], user_text: Optional[str] = None) -> str:
        ...


class LLMCompletionProvider:
    """Next reply straight from the configured chat model."""

    def __init__(self, llm_service: Optional[LLMService] = None):
        self.llm_service = llm_service or LLMService()

    def complete(self, transcript: Sequence[Message], user_text: Optional[str] = None) -> str:
        return self.llm_service.chat(transcript, user_text)


class RemoteCompletionProvider:
    """Next reply from the interview backend; the reply is the last assistant entry it returns."""

    def __init__(self, client: Optional[InterviewBackendClient] = None):
        self.client = client or InterviewBackendClient()

    def complete(self, transcript: Sequence[Message], user_text: Optional[str] = None) -> str:
        returned = self.client.ask_llm(transcript, user_text)
        for message in reversed(returned):
            if message["role"] == "assistant" and message["content"]:
                return message["content"]

        logger.error("Interview backend returned no assistant message")
        raise UpstreamUnavailable("LLM service unavailable")


def get_completion_provider() -> CompletionProvider:
    """Build the provider selected by COMPLETION_BACKEND."""
    backend = settings.COMPLETION_BACKEND.lower()
    if backend == "remote":
        return RemoteCompletionProvider()
    if backend == "llm":
        return LLMCompletionProvider()
    raise ValueError(f"Unsupported completion backend: {settings.COMPLETION_BACKEND}")
