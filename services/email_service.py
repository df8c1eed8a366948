"""
Interview invite email.

The HTML invite is delivered through one of two transports:
- LogicAppTransport: POSTs {to, subject, emailBody, attachments?} to a Logic App webhook
- GraphMailTransport: Microsoft Graph /users/<sender>/sendMail with an app token
"""

import logging
from dataclasses import dataclass
from html import escape
from typing import Any, Dict, List, Optional, Protocol, Sequence
from urllib.parse import quote

import httpx

from config.settings import settings
from services.graph_auth import GraphTokenProvider
from utils.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)

GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"
DEFAULT_ATTACHMENT_TYPE = "application/pdf"
SEND_FAILED_MESSAGE = "Failed to send interview invite"


@dataclass(frozen=True)
class EmailAttachment:
    name: str
    content_base64: str
    content_type: Optional[str] = None


def parse_attachments(raw: Optional[Sequence[Any]]) -> List[EmailAttachment]:
    """Keep only entries that carry both a name and base64 content."""
    if not raw:
        return []

    attachments = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        content = item.get("contentBase64")
        if not name or not content:
            continue
        attachments.append(EmailAttachment(
            name=name,
            content_base64=content,
            content_type=item.get("contentType"),
        ))
    return attachments


def build_invite_subject(company_name: Optional[str] = None) -> str:
    company_name = company_name or settings.EMAIL_COMPANY_NAME
    return f"AI Video Interview Invitation – {company_name}"


def build_invite_body(
    candidate_name: Optional[str],
    interview_link: str,
    company_name: Optional[str] = None,
    valid_hours: Optional[int] = None
) -> str:
    """HTML body of the invite. A blank name is addressed as "Candidate"."""
    company_name = escape(company_name or settings.EMAIL_COMPANY_NAME)
    valid_hours = valid_hours or settings.EMAIL_LINK_VALID_HOURS
    name = candidate_name.strip() if candidate_name and candidate_name.strip() else "Candidate"
    name = escape(name)
    link = escape(interview_link, quote=True)

    return f"""
  <p>Hello {name},</p>

  <p>Thank you for applying to <b>{company_name}</b>.</p>

  <p>
    We're excited to move you forward in our hiring process and would like to invite you to
    complete your interview using our <b>AI-powered interview assistant</b>, an interactive,
    proctored, real-time voice-based experience designed for your convenience.
  </p>

  <p><b>Start your interview:</b><br/>
    <a href="{link}" target="_blank" rel="noopener noreferrer">
      {link}
    </a>
  </p>

  <p>
    <b>Note:</b> This link will remain active for the next <b>{valid_hours} hours</b>.<br/>
    Please ensure you complete your interview before the link expires.
    The interview needs to be taken on a <b>desktop/laptop</b> and not on mobile phones.
  </p>

  <p><b>Dress Code:</b> Smart Casuals</p>

  <p><b>Interview DO's &amp; DON'Ts</b><br/>
  Please read the following guidelines carefully to ensure a smooth interview experience:</p>

  <p><b>DO's</b></p>
  <ul>
    <li>Be alone in the room while taking the interview to maintain privacy and interview integrity.</li>
    <li>Choose a quiet, well-lit location where you won't be interrupted.</li>
    <li>Ensure your device is fully charged and connected to a stable internet connection.</li>
    <li>Test your camera, microphone, and internet connection before starting.</li>
    <li>Maintain eye contact with the camera for natural engagement.</li>
    <li>Use preparation time wisely (you will typically get around 30 seconds before each question).</li>
    <li>Complete the interview in one continuous session.</li>
    <li>Read and accept the AI Video Interview Disclaimer before beginning.</li>
    <li>Allow full screen sharing with system audio when prompted; this is required for proper interview functioning.</li>
  </ul>

  <p><b>DON'Ts</b></p>
  <ul>
    <li>Do not attempt the interview in noisy or poorly lit environments.</li>
    <li>Do not keep other applications running or multitask during the session.</li>
    <li>Do not refresh, reload, or close your browser once the interview has started, as this may end your session.</li>
    <li>Do not cover your camera or mute your microphone while responding.</li>
    <li>Do not allow interruptions from phone calls, messages, or people entering the room.</li>
    <li>Do not attempt to restart or retake the interview unless the system explicitly allows a re-record option.</li>
  </ul>

  <p><b>Before You Begin: Final Checklist</b></p>
  <ul>
    <li>Read and accepted the AI Video Interview Disclaimer</li>
    <li>A working camera and microphone</li>
    <li>A quiet, private environment (you must be alone)</li>
    <li>Allowed entire screen sharing with system audio when prompted</li>
  </ul>

  <p>Regards,<br/>
  <b>{company_name}</b></p>
  """


class MailTransport(Protocol):
    def send(self, to: str, subject: str, html_body: str, attachments: Sequence[EmailAttachment]) -> None:
        ...


class LogicAppTransport:
    """Triggers the Logic App webhook that sends the mail."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.webhook_url = webhook_url or settings.LOGICAPP_EMAIL_WEBHOOK_URL
        self.timeout = timeout or settings.EMAIL_TIMEOUT_SECONDS
        self.transport = transport

    @staticmethod
    def build_payload(
        to: str,
        subject: str,
        html_body: str,
        attachments: Sequence[EmailAttachment]
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"to": to, "subject": subject, "emailBody": html_body}
        if attachments:
            payload["attachments"] = [
                {
                    "fileName": attachment.name,
                    "fileContent": attachment.content_base64,
                    "contentType": attachment.content_type or DEFAULT_ATTACHMENT_TYPE,
                }
                for attachment in attachments
            ]
        return payload

    def send(self, to: str, subject: str, html_body: str, attachments: Sequence[EmailAttachment]) -> None:
        if not self.webhook_url:
            logger.error("[InterviewEmail] LOGICAPP_EMAIL_WEBHOOK_URL not configured")
            raise UpstreamUnavailable(SEND_FAILED_MESSAGE)

        payload = self.build_payload(to, subject, html_body, attachments)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"[InterviewEmail] Error triggering Logic App: {e}")
            raise UpstreamUnavailable(SEND_FAILED_MESSAGE) from e

        logger.info(f"[InterviewEmail] Logic App triggered for: {to} attachments: {len(attachments)}")


class GraphMailTransport:
    """Sends the mail from AZURE_MAIL_SENDER's mailbox through Microsoft Graph."""

    def __init__(
        self,
        token_provider: Optional[GraphTokenProvider] = None,
        sender: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.token_provider = token_provider or GraphTokenProvider()
        self.sender = sender or settings.AZURE_MAIL_SENDER
        self.timeout = timeout or settings.EMAIL_TIMEOUT_SECONDS
        self.transport = transport

    @staticmethod
    def build_message(
        to: str,
        subject: str,
        html_body: str,
        attachments: Sequence[EmailAttachment]
    ) -> Dict[str, Any]:
        message: Dict[str, Any] = {
            "subject": subject,
            "body": {"contentType": "HTML", "content": html_body},
            "toRecipients": [{"emailAddress": {"address": to}}],
        }
        if attachments:
            message["attachments"] = [
                {
                    "@odata.type": "#microsoft.graph.fileAttachment",
                    "name": attachment.name,
                    "contentType": attachment.content_type or DEFAULT_ATTACHMENT_TYPE,
                    "contentBytes": attachment.content_base64,
                }
                for attachment in attachments
            ]
        return {"message": message, "saveToSentItems": True}

    def send(self, to: str, subject: str, html_body: str, attachments: Sequence[EmailAttachment]) -> None:
        if not self.sender:
            logger.error("[GraphMail] AZURE_MAIL_SENDER not configured")
            raise UpstreamUnavailable(SEND_FAILED_MESSAGE)

        token = self.token_provider.get_token()
        url = f"{GRAPH_BASE_URL}/users/{quote(self.sender)}/sendMail"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    url,
                    json=self.build_message(to, subject, html_body, attachments),
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"[GraphMail] Error sending mail: {e}")
            raise UpstreamUnavailable(SEND_FAILED_MESSAGE) from e

        logger.info(f"[GraphMail] Mail sent to: {to}")


def get_mail_transport() -> MailTransport:
    """Build the transport selected by EMAIL_TRANSPORT."""
    transport = settings.EMAIL_TRANSPORT.lower()
    if transport == "graph":
        return GraphMailTransport()
    if transport == "logicapp":
        return LogicAppTransport()
    raise ValueError(f"Unsupported email transport: {settings.EMAIL_TRANSPORT}")


class InterviewEmailService:
    """Builds and sends the interview invite."""

    def __init__(self, transport: MailTransport):
        self.transport = transport

    def send_interview_invite(
        self,
        to: str,
        interview_link: str,
        candidate_name: Optional[str] = None,
        attachments: Optional[Sequence[EmailAttachment]] = None
    ) -> None:
        """
        Send the invite to one candidate.

        Raises:
            UpstreamUnavailable: If the transport is unconfigured or delivery fails
        """
        attachments = list(attachments or [])
        self.transport.send(
            to,
            build_invite_subject(),
            build_invite_body(candidate_name, interview_link),
            attachments,
        )
