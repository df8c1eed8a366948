"""
Agents module containing the interview session controller.
"""

from .interview.service import InterviewSessionController

__all__ = ["InterviewSessionController"]
