"""
Interview recording uploads.

Blob path: <uid>/candidate-<candidateId>-interview-<interviewId>-<timestamp>.webm
where timestamp is the UTC ISO-8601 time with ":" and "." replaced by "-",
e.g. abc123/candidate-anon-interview-na-2025-12-09T16-23-11-123Z.webm
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from config.settings import settings
from services.blob_storage_service import BlobStorage

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_ID = "anon"
DEFAULT_INTERVIEW_ID = "na"
DEFAULT_CONTENT_TYPE = "video/webm"


def blob_safe_timestamp(now: datetime) -> str:
    """2025-12-09T16:23:11.123Z -> 2025-12-09T16-23-11-123Z"""
    iso = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S") + f".{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def build_recording_blob_name(
    uid: str,
    candidate_id: str,
    interview_id: str,
    now: datetime
) -> str:
    file_name = f"candidate-{candidate_id}-interview-{interview_id}-{blob_safe_timestamp(now)}.webm"
    return f"{uid}/{file_name}"


class RecordingService:
    """Uploads recordings to the recordings container."""

    def __init__(
        self,
        storage: BlobStorage,
        container: Optional[str] = None,
        account_name: Optional[str] = None
    ):
        self.storage = storage
        self.container = container or settings.AZURE_BLOB_CONTAINER
        self.account_name = account_name if account_name is not None else settings.AZURE_STORAGE_ACCOUNT_NAME

    def upload(
        self,
        uid: str,
        data: bytes,
        content_type: Optional[str] = None,
        candidate_id: Optional[str] = None,
        interview_id: Optional[str] = None,
        recorded_duration: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, str]:
        """
        Store one recording.

        Args:
            uid: Interview uid, used as folder
            data: Recording bytes
            content_type: Uploaded MIME type, defaults to video/webm
            candidate_id: Optional candidate id ("anon" when missing)
            interview_id: Optional interview id ("na" when missing)
            recorded_duration: Optional duration reported by the client
            now: Upload time (UTC now when omitted)

        Returns:
            Dict with uid, blobName and url

        Raises:
            StorageUnavailable: If the upload fails
        """
        candidate_id = candidate_id or DEFAULT_CANDIDATE_ID
        interview_id = interview_id or DEFAULT_INTERVIEW_ID
        blob_name = build_recording_blob_name(
            uid, candidate_id, interview_id, now or datetime.now(timezone.utc)
        )

        stored_url = self.storage.upload(
            self.container,
            blob_name,
            data,
            content_type or DEFAULT_CONTENT_TYPE,
            metadata={
                "uid": uid,
                "candidateId": candidate_id,
                "interviewId": interview_id,
                "recordedDuration": recorded_duration or "",
            },
        )

        if self.account_name:
            url = f"https://{self.account_name}.blob.core.windows.net/{self.container}/{blob_name}"
        else:
            url = stored_url

        logger.info(f"Recording stored at {self.container}/{blob_name}")
        return {"uid": uid, "blobName": blob_name, "url": url}
