"""
Shared fixtures and fakes.

The fakes stand in for the outbound collaborators (chat model, scoring
backend, blob storage, mail transport) so tests never touch the network.
"""

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from agents.interview import InMemorySummaryStore, InterviewSessionController
from agents.interview.summarizer import Summarizer
from utils.exceptions import StorageUnavailable, UpstreamUnavailable


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeLLMService:
    """Returns canned text from generate() and records the prompts it saw."""

    def __init__(self, reply='{"cv_summary": "CV summary", "jd_summary": "JD summary"}'):
        self.reply = reply
        self.prompts = []

    def generate(self, prompt, system_prompt=None):
        self.prompts.append(prompt)
        return self.reply


class FakeCompletionProvider:
    """Replies "reply-1", "reply-2", ... and records every call."""

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def complete(self, transcript, user_text=None):
        self.calls.append({"transcript": list(transcript), "user_text": user_text})
        if self.fail:
            raise UpstreamUnavailable("LLM service unavailable")
        return f"reply-{len(self.calls)}"


class FakeStorage:
    """In-memory blob storage keyed by (container, blob name)."""

    def __init__(self, fail_on=None):
        self.blobs = {}
        self.content_types = {}
        self.metadata = {}
        self.fail_on = fail_on

    def upload(self, container, blob_name, data, content_type, metadata=None):
        if self.fail_on and blob_name.endswith(self.fail_on):
            raise StorageUnavailable("Blob upload failed")
        self.blobs[(container, blob_name)] = data
        self.content_types[(container, blob_name)] = content_type
        self.metadata[(container, blob_name)] = metadata
        return f"memory://{container}/{blob_name}"


class FakeScorecardClient:
    def __init__(self, pdf=b"%PDF-1.4 fake scorecard", fail=False):
        self.pdf = pdf
        self.fail = fail
        self.conversations = []

    def generate_scorecard(self, conversation):
        self.conversations.append(list(conversation))
        if self.fail:
            raise UpstreamUnavailable("Scoring service unavailable")
        return self.pdf


class FakeMailTransport:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def send(self, to, subject, html_body, attachments):
        if self.fail:
            raise UpstreamUnavailable("Failed to send interview invite")
        self.sent.append({
            "to": to,
            "subject": subject,
            "html_body": html_body,
            "attachments": list(attachments),
        })


# ---------------------------------------------------------------------------
# Controller fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def provider():
    return FakeCompletionProvider()


@pytest.fixture
def summary_store():
    return InMemorySummaryStore()


@pytest.fixture
def controller(fake_llm, provider, summary_store):
    return InterviewSessionController(
        completion_provider=provider,
        summarizer=Summarizer(llm_service=fake_llm),
        summary_store=summary_store,
    )


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine():
    import models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


# ---------------------------------------------------------------------------
# API fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def scorecard_client():
    return FakeScorecardClient()


@pytest.fixture
def mail_transport():
    return FakeMailTransport()


@pytest.fixture
def client(controller, engine, storage, scorecard_client, mail_transport):
    """TestClient with every outbound collaborator replaced by a fake."""
    from api import dependencies
    from api.main import app
    from utils.database import get_db

    def override_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[dependencies.get_interview_controller] = lambda: controller
    app.dependency_overrides[dependencies.get_storage] = lambda: storage
    app.dependency_overrides[dependencies.get_backend_client] = lambda: scorecard_client
    app.dependency_overrides[dependencies.get_transport] = lambda: mail_transport
    app.dependency_overrides[get_db] = override_db

    # Not used as a context manager: the startup hook (init_db on the real
    # DATABASE_URL) does not run
    yield TestClient(app)

    app.dependency_overrides.clear()
