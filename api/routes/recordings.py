"""
Recording API Routes.

Endpoints:
- POST /api/recordings/upload - Store an interview recording under <uid>/
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from api.dependencies import get_recording_service
from api.models.chat_schemas import ErrorResponse
from api.models.recording_schemas import RecordingUploadResponse
from config.settings import settings
from services.blob_storage_service import is_safe_folder_name
from services.recording_service import RecordingService
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/recordings",
    tags=["Recordings"],
)


@router.post(
    "/upload",
    response_model=RecordingUploadResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "No file, missing or unsafe uid, or file too large"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    }
)
def upload_recording(
    file: Optional[UploadFile] = File(default=None),
    uid: Optional[str] = Form(default=None),
    candidateId: Optional[str] = Form(default=None),
    interviewId: Optional[str] = Form(default=None),
    recordedDuration: Optional[str] = Form(default=None),
    service: RecordingService = Depends(get_recording_service),
):
    """
    Upload a recording (multipart `file`, usually video/webm).

    Stored as `<uid>/candidate-<candidateId>-interview-<interviewId>-<timestamp>.webm`
    with the form fields as blob metadata.
    """
    if file is None:
        raise ValidationError("No file uploaded")

    uid = (uid or "").strip()
    if not uid:
        raise ValidationError("Missing required field: uid")
    if not is_safe_folder_name(uid):
        raise ValidationError("Invalid uid")

    data = file.file.read(settings.RECORDING_MAX_BYTES + 1)
    if len(data) > settings.RECORDING_MAX_BYTES:
        raise ValidationError("File too large")

    result = service.upload(
        uid=uid,
        data=data,
        content_type=file.content_type,
        candidate_id=candidateId,
        interview_id=interviewId,
        recorded_duration=recordedDuration,
    )
    return RecordingUploadResponse(**result)
