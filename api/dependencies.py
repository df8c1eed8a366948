"""
Dependency providers for the API routes.

Process-wide collaborators (the controller and its summary store, the
backend client, storage, mail transport) are built lazily once and shared
across requests. Tests replace them through app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from agents.interview import InterviewSessionController, InMemorySummaryStore
from agents.interview.providers import get_completion_provider
from agents.interview.summarizer import Summarizer
from services.blob_storage_service import BlobStorage, get_blob_storage
from services.email_service import InterviewEmailService, MailTransport, get_mail_transport
from services.interview_backend_client import InterviewBackendClient
from services.recording_service import RecordingService
from services.transcript_archive_service import TranscriptArchiveService
from utils.document_extractor import DocumentExtractor


@lru_cache()
def get_summary_store() -> InMemorySummaryStore:
    """Session summary cache, shared for the lifetime of the process."""
    return InMemorySummaryStore()


@lru_cache()
def get_interview_controller() -> InterviewSessionController:
    return InterviewSessionController(
        completion_provider=get_completion_provider(),
        summarizer=Summarizer(),
        summary_store=get_summary_store(),
    )


@lru_cache()
def get_backend_client() -> InterviewBackendClient:
    return InterviewBackendClient()


@lru_cache()
def get_storage() -> BlobStorage:
    return get_blob_storage()


@lru_cache()
def get_transport() -> MailTransport:
    # Cached so the Graph token is reused across requests
    return get_mail_transport()


def get_document_extractor() -> DocumentExtractor:
    return DocumentExtractor()


def get_transcript_archive_service(
    storage: BlobStorage = Depends(get_storage),
    client: InterviewBackendClient = Depends(get_backend_client),
) -> TranscriptArchiveService:
    return TranscriptArchiveService(storage, client)


def get_recording_service(storage: BlobStorage = Depends(get_storage)) -> RecordingService:
    return RecordingService(storage)


def get_email_service(transport: MailTransport = Depends(get_transport)) -> InterviewEmailService:
    return InterviewEmailService(transport)
