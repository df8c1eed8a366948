"""
Transcript archival.

Stores a finished interview under <container>/<name>/:
- transcript.txt: one "<speaker>: <content>" line per message
- Scorecard.pdf: rendered by the scoring backend

The two writes are independent; if the scorecard fails after the transcript
was written, the transcript stays.
"""

import logging
from typing import Dict, Optional, Sequence

from agents.interview.state import Message
from config.settings import settings
from services.blob_storage_service import BlobStorage
from services.interview_backend_client import InterviewBackendClient

logger = logging.getLogger(__name__)

TRANSCRIPT_FILENAME = "transcript.txt"
SCORECARD_FILENAME = "Scorecard.pdf"


def speaker_label(role: str, candidate_name: str) -> str:
    if role == "assistant":
        return "HR Bot"
    if role == "user":
        return candidate_name
    return "System"


def format_transcript(conversation: Sequence[Message], candidate_name: str) -> str:
    """Render a transcript as plain text, one line per message."""
    return "\n".join(
        f"{speaker_label(message['role'], candidate_name)}: {message['content']}"
        for message in conversation
    )


class TranscriptArchiveService:
    """Writes the transcript and its scorecard to blob storage."""

    def __init__(
        self,
        storage: BlobStorage,
        scorecard_client: InterviewBackendClient,
        container: Optional[str] = None
    ):
        self.storage = storage
        self.scorecard_client = scorecard_client
        self.container = container or settings.AZURE_TRANSCRIPT_CONTAINER

    def save(self, name: str, conversation: Sequence[Message]) -> Dict[str, str]:
        """
        Archive a conversation under <name>/.

        Args:
            name: Candidate name / interview identifier used as folder and speaker label
            conversation: Finished transcript

        Returns:
            Dict with container and path

        Raises:
            StorageUnavailable: If a blob write fails
            UpstreamUnavailable: If the scorecard cannot be rendered
        """
        prefix = f"{name}/"

        transcript = format_transcript(conversation, name)
        self.storage.upload(
            self.container,
            prefix + TRANSCRIPT_FILENAME,
            transcript.encode("utf-8"),
            "text/plain; charset=utf-8",
        )

        pdf = self.scorecard_client.generate_scorecard(conversation)
        self.storage.upload(
            self.container,
            prefix + SCORECARD_FILENAME,
            pdf,
            "application/pdf",
        )

        logger.info(f"✔ Saved transcript & scorecard for {name}")
        return {"container": self.container, "path": prefix}
