"""
CV / JD summarizer.

Condenses the raw resume and job description into the two short summaries
embedded in the system prompt. A reply that is not the expected JSON object
does not fail the turn: the raw reply is used verbatim for both summaries.
"""

import json
import logging
from typing import Optional

from agents.interview.state import SessionSummary
from utils.llm_service import LLMService
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

MISSING_INPUT_PLACEHOLDER = "N/A"


def _or_placeholder(text: Optional[str]) -> str:
    if text is None or not text.strip():
        return MISSING_INPUT_PLACEHOLDER
    return text.strip()


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```") and stripped.endswith("```"):
        stripped = stripped[3:-3].strip()
        if stripped.lower().startswith("json"):
            stripped = stripped[4:]
    return stripped.strip()


def parse_summary(raw: str) -> SessionSummary:
    """
    Parse a summarizer reply into a SessionSummary.

    Args:
        raw: Reply text, expected to be {"cv_summary": ..., "jd_summary": ...}

    Returns:
        Parsed summary, or the raw reply for both fields when it is not parseable
    """
    try:
        data = json.loads(_strip_code_fence(raw))
    except ValueError:
        data = None

    if (
        isinstance(data, dict)
        and isinstance(data.get("cv_summary"), str)
        and isinstance(data.get("jd_summary"), str)
    ):
        return SessionSummary(cv_summary=data["cv_summary"], jd_summary=data["jd_summary"])

    logger.warning("Summarizer reply is not the expected JSON object, using raw text for both summaries")
    return SessionSummary(cv_summary=raw, jd_summary=raw)


class Summarizer:
    """Derives a SessionSummary from raw CV and JD text with one LLM call."""

    def __init__(
        self,
        llm_service: Optional[LLMService] = None,
        prompt_loader: Optional[PromptLoader] = None
    ):
        self.llm_service = llm_service or LLMService.summary()
        self.prompt_loader = prompt_loader or PromptLoader()

    def summarize(self, raw_cv: Optional[str], raw_jd: Optional[str]) -> SessionSummary:
        """
        Summarize a resume and a job description.

        Args:
            raw_cv: Raw CV text ("N/A" when missing)
            raw_jd: Raw JD text ("N/A" when missing)

        Returns:
            SessionSummary

        Raises:
            UpstreamUnavailable: If the LLM call fails or times out
        """
        prompt = self.prompt_loader.load_summarization(
            "cv_jd_summary",
            cv_text=_or_placeholder(raw_cv),
            jd_text=_or_placeholder(raw_jd),
        )
        raw = self.llm_service.generate(prompt)
        return parse_summary(raw)
