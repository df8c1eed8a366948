"""
HTTP client for the interview / scoring backend at LLM_BASE_URL.

The backend speaks transcripts as [role, content] pairs:
- POST /ai_interview/ask_llm            {"messages": [...], "user_text"?} -> [[role, content], ...]
- POST /ai_interview/generate_scorecard {"conversation": [...]}           -> PDF bytes

Each call is attempted once with UPSTREAM_TIMEOUT_SECONDS as the bound.
"""

import logging
from typing import List, Optional, Sequence

import httpx

from agents.interview.state import Message
from config.settings import settings
from utils.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)

ASK_LLM_PATH = "/ai_interview/ask_llm"
SCORECARD_PATH = "/ai_interview/generate_scorecard"


def to_tuple_payload(messages: Sequence[Message]) -> List[List[str]]:
    """{role, content} -> [role, content]"""
    return [[message["role"], message["content"]] for message in messages]


def from_tuple_payload(pairs: Sequence[Sequence[str]]) -> List[Message]:
    """[role, content] -> {role, content}"""
    return [{"role": role, "content": content} for role, content in pairs]


class InterviewBackendClient:
    """Thin synchronous client around httpx.Client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.client = httpx.Client(
            base_url=base_url or settings.LLM_BASE_URL,
            timeout=timeout or settings.UPSTREAM_TIMEOUT_SECONDS,
            transport=transport,
        )

    def ask_llm(self, messages: Sequence[Message], user_text: Optional[str] = None) -> List[Message]:
        """
        Forward a transcript to the backend and return the updated transcript.

        Raises:
            UpstreamUnavailable: On transport errors, timeouts, non-2xx replies or malformed bodies
        """
        payload = {"messages": to_tuple_payload(messages)}
        if user_text:
            payload["user_text"] = user_text

        logger.info(f"→ POST {ASK_LLM_PATH} ({len(messages)} messages)")
        try:
            response = self.client.post(ASK_LLM_PATH, json=payload)
            response.raise_for_status()
            return from_tuple_payload(response.json())
        except (httpx.HTTPError, ValueError, TypeError) as e:
            logger.error(f"ask_llm error: {e}")
            raise UpstreamUnavailable("LLM service unavailable") from e

    def generate_scorecard(self, conversation: Sequence[Message]) -> bytes:
        """
        Render the scorecard PDF for a finished transcript.

        Raises:
            UpstreamUnavailable: On transport errors, timeouts or non-2xx replies
        """
        logger.info(f"→ POST {SCORECARD_PATH} ({len(conversation)} messages)")
        try:
            response = self.client.post(
                SCORECARD_PATH,
                json={"conversation": to_tuple_payload(conversation)},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"generate_scorecard error: {e}")
            raise UpstreamUnavailable("Scoring service unavailable") from e

        if not response.content:
            logger.error("generate_scorecard returned an empty body")
            raise UpstreamUnavailable("Scoring service unavailable")
        return response.content
