"""
Interview record repository for the hr_home table.

Upload inserts one row per request; the approval workflow that flips the
status / Active flags lives outside this service.
"""

from typing import Optional
from sqlmodel import Session

from models.interview_record import InterviewRecord, utc_timestamp
from repositories.base_repository import BaseRepository


class InterviewRecordRepository(BaseRepository[InterviewRecord]):
    """Repository for managing interview records."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, InterviewRecord)

    def get_by_uid(self, uid: str) -> Optional[InterviewRecord]:
        """
        Get an interview record by UID.

        Args:
            uid: Unique interview identifier

        Returns:
            InterviewRecord if found, None otherwise
        """
        return self.get_by_id(uid)

    def create_pending(self, uid: str, email: str, jd: bytes, cv: bytes) -> InterviewRecord:
        """
        Store a new JD/CV pair with status=0 and Active=0.

        Args:
            uid: Unique interview identifier
            email: Candidate email
            jd: Raw job description PDF
            cv: Raw CV PDF

        Returns:
            Created InterviewRecord
        """
        record = InterviewRecord(
            uid=uid,
            email=email,
            submitted_at=utc_timestamp(),
            jd=jd,
            cv=cv,
            status=0,
            active=0,
        )
        return self.create(record)
