"""
Upload API Routes.

Endpoints:
- POST /api/upload - Extract text from an uploaded CV and JD
"""

import logging
import shutil
import uuid
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies import get_document_extractor
from api.models.chat_schemas import ErrorResponse, UploadResponse
from config.settings import settings
from utils.document_extractor import DocumentExtractionError, DocumentExtractor
from utils.exceptions import GatewayError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/upload",
    tags=["Upload"],
)


def _save_scratch(upload: UploadFile) -> Path:
    """Copy an upload into UPLOAD_DIR under a random name."""
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    target = upload_dir / uuid.uuid4().hex
    with target.open("wb") as out:
        shutil.copyfileobj(upload.file, out)
    return target


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "CV or JD missing"},
        500: {"model": ErrorResponse, "description": "PDF processing failed"},
    }
)
def upload_cv_jd(
    cv: Optional[UploadFile] = File(default=None),
    jd: Optional[UploadFile] = File(default=None),
    extractor: DocumentExtractor = Depends(get_document_extractor),
):
    """
    Extract text from a CV and a JD.

    Both files are stored in the upload directory for the duration of the
    request and removed afterwards, whatever the outcome.
    """
    if cv is None or jd is None:
        raise ValidationError("Both CV and JD are required.")

    scratch: List[Path] = []
    try:
        cv_path = _save_scratch(cv)
        scratch.append(cv_path)
        jd_path = _save_scratch(jd)
        scratch.append(jd_path)

        cv_text = extractor.extract_file(cv_path, cv.filename)
        jd_text = extractor.extract_file(jd_path, jd.filename)
        logger.info("✔ Extracted CV & JD text")
        return UploadResponse(cvText=cv_text, jdText=jd_text)

    except (DocumentExtractionError, OSError) as e:
        logger.error(f"Upload route error: {e}")
        raise GatewayError("PDF processing failed", status_code=500) from e

    finally:
        for path in scratch:
            path.unlink(missing_ok=True)
