"""
Repositories module - Data Access Layer.

Provides repository classes for database operations following the Repository pattern.

Usage:
    from repositories import InterviewRecordRepository

    record_repo = InterviewRecordRepository(db_session)
    record = record_repo.get_by_uid(uid)
"""

from repositories.base_repository import BaseRepository
from repositories.interview_record_repository import InterviewRecordRepository

__all__ = [
    "BaseRepository",
    "InterviewRecordRepository",
]
