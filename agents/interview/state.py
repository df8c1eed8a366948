"""
State schema for the interview turn graph.

A transcript is an ordered list of role-tagged messages. The caller owns it
and round-trips it on every request; the server only keeps the per-session
CV/JD summary.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, TypedDict

Role = Literal["system", "user", "assistant"]


class Message(TypedDict):
    """
    One transcript entry.

    The first entry, when present, is the system prompt. Entries are
    append-only and duplicates are allowed (barge-in replays resend turns).
    """
    role: Role
    content: str


@dataclass(frozen=True)
class SessionSummary:
    """Condensed CV and JD, derived once per session and never mutated."""
    cv_summary: str
    jd_summary: str


class TurnState(TypedDict, total=False):
    """
    Data flowing through the turn graph.

    Inputs:
        transcript: Caller-supplied history (empty on the first turn)
        user_text: Latest candidate utterance, if any
        session_id: Key for the summary cache
        raw_cv / raw_jd: Raw text used to derive the summary on the first turn

    Produced by nodes:
        summary: Session summary (first turn only)
        working_transcript: [system prompt] on the first turn
        reply: Assistant reply text
        updated_transcript: working transcript + assistant reply
    """
    transcript: List[Message]
    user_text: Optional[str]
    session_id: Optional[str]
    raw_cv: Optional[str]
    raw_jd: Optional[str]

    summary: Optional[SessionSummary]
    working_transcript: List[Message]
    reply: str
    updated_transcript: List[Message]


def create_initial_state(
    transcript: List[Message],
    user_text: Optional[str] = None,
    session_id: Optional[str] = None,
    raw_cv: Optional[str] = None,
    raw_jd: Optional[str] = None,
) -> TurnState:
    """
    Create the input state for one turn.

    Args:
        transcript: Full transcript so far
        user_text: Latest candidate utterance
        session_id: Opaque session identifier supplied by the caller
        raw_cv: Raw CV text
        raw_jd: Raw job description text

    Returns:
        TurnState ready for graph invocation
    """
    return {
        "transcript": transcript,
        "user_text": user_text,
        "session_id": session_id,
        "raw_cv": raw_cv,
        "raw_jd": raw_jd,
    }
