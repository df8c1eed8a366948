"""
HR API Routes.

Endpoints:
- POST /api/hr/upload-jd-cv - Store a JD/CV pair for a UID (status=0, Active=0)
- POST /api/hr/get-status-active - Flags for a UID, plus extracted text while both are 0
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from api.dependencies import get_document_extractor
from api.models.chat_schemas import ErrorResponse
from api.models.hr_schemas import StatusRequest, StatusResponse, UploadRecordResponse
from repositories.interview_record_repository import InterviewRecordRepository
from utils.database import get_db
from utils.document_extractor import DocumentExtractionError, DocumentExtractor
from utils.exceptions import NotFound, StorageUnavailable, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/hr",
    tags=["HR"],
)


@router.post(
    "/upload-jd-cv",
    response_model=UploadRecordResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing UID, Email, JD PDF, or CV PDF"},
        500: {"model": ErrorResponse, "description": "Database failure"},
    }
)
def upload_jd_cv(
    UID: Optional[str] = Form(default=None),
    Email: Optional[str] = Form(default=None),
    jdPdf: Optional[UploadFile] = File(default=None),
    cvPdf: Optional[UploadFile] = File(default=None),
    db: Session = Depends(get_db),
):
    """Store the raw JD and CV PDFs for an interview UID."""
    jd = jdPdf.file.read() if jdPdf is not None else b""
    cv = cvPdf.file.read() if cvPdf is not None else b""

    if not UID or not Email or not jd or not cv:
        raise ValidationError("Missing UID, Email, JD PDF, or CV PDF.")

    try:
        InterviewRecordRepository(db).create_pending(uid=UID, email=Email, jd=jd, cv=cv)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB insert error: {e}")
        raise StorageUnavailable("Failed to store JD/CV in database.") from e

    logger.info(f"Inserted hr_home row for UID={UID}")
    return UploadRecordResponse(UID=UID)


@router.post(
    "/get-status-active",
    response_model=StatusResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "UID missing"},
        404: {"model": ErrorResponse, "description": "UID not found"},
        500: {"model": ErrorResponse, "description": "Database or extraction failure"},
    }
)
def get_status_active(
    request: StatusRequest,
    db: Session = Depends(get_db),
    extractor: DocumentExtractor = Depends(get_document_extractor),
):
    """
    Return the status / Active flags for a UID.

    While both flags are 0 the stored JD and CV are parsed and returned as
    `jdText` / `cvText`; otherwise only the flags are returned.
    """
    try:
        record = InterviewRecordRepository(db).get_by_uid(request.UID)
    except SQLAlchemyError as e:
        logger.error(f"DB query error: {e}")
        raise StorageUnavailable("Database query failed.") from e

    if record is None:
        raise NotFound("UID not found.")

    if not record.is_pending:
        return StatusResponse(status=record.status, active=record.active)

    try:
        jd_text = extractor.extract_text(record.jd)
        cv_text = extractor.extract_text(record.cv)
    except DocumentExtractionError as e:
        logger.error(f"PDF parse error: {e}")
        raise StorageUnavailable("Failed to extract text.") from e

    return StatusResponse(
        status=record.status,
        active=record.active,
        jdText=jd_text,
        cvText=cv_text,
    )
