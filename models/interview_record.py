"""
Interview record uploaded by HR.

Legacy table layout shared with the approval workflow: column names are
kept verbatim (UID, Email, time, JD, CV, status, Active), attributes are
snake_case.
"""

from datetime import datetime, timezone
from typing import Optional

import sqlalchemy as sa
from sqlmodel import SQLModel, Field

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class InterviewRecord(SQLModel, table=True):
    """
    One candidate/job pair awaiting an AI interview.

    status / active are flipped by the external approval workflow; the JD and
    CV blobs are only parsed back to text while both are 0.
    """
    __tablename__ = "hr_home"
    __table_args__ = (
        sa.CheckConstraint("status IN (0,1)", name="ck_hr_home_status"),
        sa.CheckConstraint("Active IN (0,1)", name="ck_hr_home_active"),
    )

    uid: str = Field(sa_column=sa.Column("UID", sa.Text(), primary_key=True))
    email: str = Field(sa_column=sa.Column("Email", sa.Text(), nullable=False))
    submitted_at: str = Field(
        default_factory=utc_timestamp,
        sa_column=sa.Column("time", sa.String(19), nullable=False),
    )
    jd: Optional[bytes] = Field(default=None, sa_column=sa.Column("JD", sa.LargeBinary(), nullable=True))
    cv: Optional[bytes] = Field(default=None, sa_column=sa.Column("CV", sa.LargeBinary(), nullable=True))
    status: int = Field(default=0, sa_column=sa.Column("status", sa.Integer(), nullable=False, default=0))
    active: int = Field(default=0, sa_column=sa.Column("Active", sa.Integer(), nullable=False, default=0))

    @property
    def is_pending(self) -> bool:
        """True while neither the status nor the active flag has been set."""
        return self.status == 0 and self.active == 0
