"""
Services module - outbound integrations.

Services wrap the external collaborators of the gateway:
- InterviewBackendClient: interview / scoring backend (ask_llm, scorecard PDF)
- Blob storage backends (Azure Blob Storage or a local directory)
- TranscriptArchiveService: transcript.txt + Scorecard.pdf per interview
- RecordingService: interview recordings with metadata
- InterviewEmailService: invite email via Logic App or Microsoft Graph

Usage:
    from services.transcript_archive_service import TranscriptArchiveService

    service = TranscriptArchiveService(storage, client)
    result = service.save(name, conversation)
"""
