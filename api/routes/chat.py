"""
Chat API Routes - Thin Controller Layer.

Handles HTTP concerns and delegates the turn logic to the
InterviewSessionController.

Endpoints:
- POST /api/chat - Advance the interview by one turn
- POST /api/chat/scorecard - Render the scorecard PDF
- POST /api/chat/save - Archive transcript + scorecard
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from agents.interview import InterviewSessionController
from api.dependencies import get_backend_client, get_interview_controller, get_transcript_archive_service
from api.models.chat_schemas import (
    ChatMessage,
    ChatRequest,
    ErrorResponse,
    SaveRequest,
    SaveResponse,
    ScorecardRequest,
)
from services.blob_storage_service import is_safe_folder_name
from services.interview_backend_client import InterviewBackendClient
from services.transcript_archive_service import TranscriptArchiveService
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
)


def _as_messages(messages: List[ChatMessage]):
    return [message.model_dump() for message in messages]


@router.post(
    "",
    response_model=List[ChatMessage],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        502: {"model": ErrorResponse, "description": "Completion provider or summarizer unavailable"},
    }
)
def chat(
    request: ChatRequest,
    controller: InterviewSessionController = Depends(get_interview_controller),
):
    """
    Advance the interview by one turn.

    **First turn** (`messages` empty): the CV/JD summary is derived (or reused
    for a known `sessionId`), the interviewer system prompt is injected and the
    opening message is generated. The response is `[system, assistant]`.

    **Later turns**: the transcript is forwarded unchanged with `userText` and
    the response is the same transcript plus one assistant message.
    """
    updated = controller.advance_conversation(
        transcript=_as_messages(request.messages),
        user_text=request.user_text,
        session_id=request.session_id,
        raw_cv=request.cv,
        raw_jd=request.jd,
    )
    logger.info(f"✔ LLM replied ({len(updated)} messages)")
    return updated


@router.post(
    "/scorecard",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "Scorecard PDF"},
        400: {"model": ErrorResponse, "description": "Invalid conversation"},
        502: {"model": ErrorResponse, "description": "Scoring service unavailable"},
    }
)
def scorecard(
    request: ScorecardRequest,
    client: InterviewBackendClient = Depends(get_backend_client),
):
    """Render the scorecard PDF for a finished transcript."""
    pdf = client.generate_scorecard(_as_messages(request.conversation))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="Scorecard.pdf"'},
    )


@router.post(
    "/save",
    response_model=SaveResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unsafe name, or invalid conversation"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
        502: {"model": ErrorResponse, "description": "Scoring service unavailable"},
    }
)
def save(
    request: SaveRequest,
    service: TranscriptArchiveService = Depends(get_transcript_archive_service),
):
    """
    Archive a finished interview.

    Writes `<name>/transcript.txt` and `<name>/Scorecard.pdf` to the
    transcript container. The writes are not transactional.
    """
    if not is_safe_folder_name(request.name):
        raise ValidationError("Invalid name")

    result = service.save(request.name, _as_messages(request.conversation))
    return SaveResponse(success=True, **result)
