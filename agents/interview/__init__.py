"""
Interview session state machine.
"""

from agents.interview.service import InterviewSessionController
from agents.interview.summary_store import InMemorySummaryStore, SummaryStore
from agents.interview.state import Message, SessionSummary

__all__ = [
    "InterviewSessionController",
    "InMemorySummaryStore",
    "SummaryStore",
    "Message",
    "SessionSummary",
]
