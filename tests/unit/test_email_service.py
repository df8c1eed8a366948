"""
Unit tests for the interview invite email and its transports.

Run: pytest tests/unit/test_email_service.py -v
"""

import json

import httpx
import pytest

from services.email_service import (
    EmailAttachment,
    GraphMailTransport,
    InterviewEmailService,
    LogicAppTransport,
    build_invite_body,
    build_invite_subject,
    parse_attachments,
)
from services.graph_auth import GraphTokenProvider
from utils.exceptions import UpstreamUnavailable

from conftest import FakeMailTransport


ATTACHMENT = EmailAttachment(name="JD.pdf", content_base64="JVBERi0=")


class StaticToken:
    def get_token(self):
        return "token-123"


# ---------------------------------------------------------------------------
# Attachments & body
# ---------------------------------------------------------------------------

class TestParseAttachments:

    def test_none_gives_empty_list(self):
        assert parse_attachments(None) == []

    def test_incomplete_entries_dropped(self):
        attachments = parse_attachments([
            {"name": "JD.pdf", "contentBase64": "JVBERi0="},
            {"name": "missing-content.pdf"},
            {"contentBase64": "JVBERi0="},
            {"name": "", "contentBase64": "JVBERi0="},
            "not-a-dict",
        ])

        assert attachments == [ATTACHMENT]

    def test_content_type_kept(self):
        attachments = parse_attachments([
            {"name": "notes.txt", "contentBase64": "aGk=", "contentType": "text/plain"},
        ])

        assert attachments[0].content_type == "text/plain"


class TestInviteBody:

    def test_subject_names_company(self):
        assert build_invite_subject("Acme") == "AI Video Interview Invitation – Acme"

    def test_body_contains_name_link_and_validity(self):
        body = build_invite_body("Jane", "https://interview.test/abc", company_name="Acme", valid_hours=48)

        assert "Hello Jane," in body
        assert 'href="https://interview.test/abc"' in body
        assert "<b>48 hours</b>" in body
        assert "<b>Acme</b>" in body

    def test_blank_name_addressed_as_candidate(self):
        body = build_invite_body("   ", "https://interview.test/abc", company_name="Acme", valid_hours=48)

        assert "Hello Candidate," in body

    def test_name_is_html_escaped(self):
        body = build_invite_body("<script>", "https://interview.test/abc", company_name="Acme", valid_hours=48)

        assert "<script>" not in body
        assert "&lt;script&gt;" in body


# ---------------------------------------------------------------------------
# Transports
# ---------------------------------------------------------------------------

class TestLogicAppTransport:

    def test_payload_without_attachments(self):
        payload = LogicAppTransport.build_payload("a@b.test", "Subject", "<p>hi</p>", [])

        assert payload == {"to": "a@b.test", "subject": "Subject", "emailBody": "<p>hi</p>"}

    def test_payload_with_attachments_defaults_to_pdf(self):
        payload = LogicAppTransport.build_payload("a@b.test", "Subject", "<p>hi</p>", [ATTACHMENT])

        assert payload["attachments"] == [
            {"fileName": "JD.pdf", "fileContent": "JVBERi0=", "contentType": "application/pdf"},
        ]

    def test_send_posts_to_webhook(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(202)

        transport = LogicAppTransport(
            webhook_url="https://logicapp.test/hook",
            transport=httpx.MockTransport(handler),
        )

        transport.send("a@b.test", "Subject", "<p>hi</p>", [])

        assert seen["url"] == "https://logicapp.test/hook"
        assert seen["body"]["to"] == "a@b.test"

    def test_webhook_error_raises_after_one_attempt(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(500)

        transport = LogicAppTransport(
            webhook_url="https://logicapp.test/hook",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(UpstreamUnavailable) as exc_info:
            transport.send("a@b.test", "Subject", "<p>hi</p>", [])

        assert exc_info.value.message == "Failed to send interview invite"
        assert exc_info.value.status_code == 502
        assert len(requests) == 1


class TestGraphMailTransport:

    def test_message_shape(self):
        body = GraphMailTransport.build_message("a@b.test", "Subject", "<p>hi</p>", [ATTACHMENT])

        message = body["message"]
        assert body["saveToSentItems"] is True
        assert message["body"] == {"contentType": "HTML", "content": "<p>hi</p>"}
        assert message["toRecipients"] == [{"emailAddress": {"address": "a@b.test"}}]
        assert message["attachments"][0]["@odata.type"] == "#microsoft.graph.fileAttachment"
        assert message["attachments"][0]["contentBytes"] == "JVBERi0="

    def test_send_uses_bearer_token_and_sender_mailbox(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(202)

        transport = GraphMailTransport(
            token_provider=StaticToken(),
            sender="hr@acme.test",
            transport=httpx.MockTransport(handler),
        )

        transport.send("a@b.test", "Subject", "<p>hi</p>", [])

        assert seen["path"].startswith("/v1.0/users/")
        assert seen["path"].endswith("/sendMail")
        assert seen["auth"] == "Bearer token-123"

    def test_graph_error_raises_after_one_attempt(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(403)

        transport = GraphMailTransport(
            token_provider=StaticToken(),
            sender="hr@acme.test",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(UpstreamUnavailable):
            transport.send("a@b.test", "Subject", "<p>hi</p>", [])

        assert len(requests) == 1


class TestGraphTokenProvider:

    def make_provider(self, handler, clock):
        return GraphTokenProvider(
            tenant_id="tenant",
            client_id="client",
            client_secret="secret",
            scope="https://graph.microsoft.com/.default",
            transport=httpx.MockTransport(handler),
            clock=clock,
        )

    def test_token_cached_until_near_expiry(self):
        requests = []
        now = [1000.0]

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"access_token": f"t{len(requests)}", "expires_in": 3600})

        provider = self.make_provider(handler, lambda: now[0])

        assert provider.get_token() == "t1"
        now[0] += 3000
        assert provider.get_token() == "t1"
        now[0] += 560
        assert provider.get_token() == "t2"
        assert len(requests) == 2

    def test_client_credentials_form(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = request.content.decode()
            return httpx.Response(200, json={"access_token": "t", "expires_in": 3600})

        self.make_provider(handler, lambda: 0.0).get_token()

        assert seen["path"] == "/tenant/oauth2/v2.0/token"
        assert "grant_type=client_credentials" in seen["body"]
        assert "client_id=client" in seen["body"]

    def test_missing_credentials_raise(self, monkeypatch):
        from config.settings import settings

        monkeypatch.setattr(settings, "AZURE_TENANT_ID", None)
        provider = GraphTokenProvider(client_id="client", client_secret="secret")

        with pytest.raises(UpstreamUnavailable) as exc_info:
            provider.get_token()

        assert exc_info.value.message == "Azure AD credentials not configured"

    def test_token_endpoint_error_raises_after_one_attempt(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(401)

        provider = self.make_provider(handler, lambda: 0.0)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            provider.get_token()

        assert exc_info.value.message == "Azure AD token request failed"
        assert len(requests) == 1


# ---------------------------------------------------------------------------
# InterviewEmailService
# ---------------------------------------------------------------------------

class TestInterviewEmailService:

    def test_invite_sent_through_transport(self):
        transport = FakeMailTransport()

        InterviewEmailService(transport).send_interview_invite(
            "a@b.test", "https://interview.test/abc", candidate_name="Jane", attachments=[ATTACHMENT]
        )

        sent = transport.sent[0]
        assert sent["to"] == "a@b.test"
        assert sent["subject"].startswith("AI Video Interview Invitation – ")
        assert "Hello Jane," in sent["html_body"]
        assert sent["attachments"] == [ATTACHMENT]

    def test_transport_failure_propagates(self):
        with pytest.raises(UpstreamUnavailable):
            InterviewEmailService(FakeMailTransport(fail=True)).send_interview_invite(
                "a@b.test", "https://interview.test/abc"
            )
