"""
Email API Routes.

Endpoints:
- POST /api/email/send-interview-invite - Send the interview invite to a candidate
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_email_service
from api.models.chat_schemas import ErrorResponse
from api.models.email_schemas import InviteRequest, InviteResponse
from services.email_service import InterviewEmailService, parse_attachments

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/email",
    tags=["Email"],
)


@router.post(
    "/send-interview-invite",
    response_model=InviteResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing 'to' or 'interviewLink'"},
        502: {"model": ErrorResponse, "description": "Mail delivery failed"},
    }
)
def send_interview_invite(
    request: InviteRequest,
    service: InterviewEmailService = Depends(get_email_service),
):
    """
    Send the AI interview invite.

    Attachments without `name` or `contentBase64` are ignored.
    """
    attachments = parse_attachments(request.attachments)
    service.send_interview_invite(
        to=request.to,
        interview_link=request.interviewLink,
        candidate_name=request.candidateName,
        attachments=attachments,
    )
    return InviteResponse(success=True)
