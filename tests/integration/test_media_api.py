"""
API tests for CV/JD upload, recording upload and invite email.

Run: pytest tests/integration/test_media_api.py -v
"""

import pytest

from api.dependencies import get_document_extractor
from api.main import app
from config.settings import settings


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))
    return tmp_path


# ---------------------------------------------------------------------------
# /api/upload
# ---------------------------------------------------------------------------

class TestUploadEndpoint:

    def test_extracts_both_documents(self, client, upload_dir):
        response = client.post("/api/upload", files={
            "cv": ("cv.txt", b"Python developer", "text/plain"),
            "jd": ("jd.txt", b"Backend role", "text/plain"),
        })

        assert response.status_code == 200
        assert response.json() == {"cvText": "Python developer", "jdText": "Backend role"}

    def test_scratch_files_removed(self, client, upload_dir):
        client.post("/api/upload", files={
            "cv": ("cv.txt", b"Python developer", "text/plain"),
            "jd": ("jd.txt", b"Backend role", "text/plain"),
        })

        assert list(upload_dir.iterdir()) == []

    def test_missing_jd_is_400_without_extraction(self, client, upload_dir):
        class RecordingExtractor:
            calls = 0

            def extract_file(self, path, filename=None):
                RecordingExtractor.calls += 1
                return ""

        app.dependency_overrides[get_document_extractor] = RecordingExtractor

        response = client.post("/api/upload", files={"cv": ("cv.txt", b"Python developer", "text/plain")})

        assert response.status_code == 400
        assert response.json() == {"error": "Both CV and JD are required."}
        assert RecordingExtractor.calls == 0

    def test_unreadable_pdf_is_500_and_cleaned_up(self, client, upload_dir):
        response = client.post("/api/upload", files={
            "cv": ("cv.pdf", b"not a pdf", "application/pdf"),
            "jd": ("jd.txt", b"Backend role", "text/plain"),
        })

        assert response.status_code == 500
        assert response.json() == {"error": "PDF processing failed"}
        assert list(upload_dir.iterdir()) == []


# ---------------------------------------------------------------------------
# /api/recordings/upload
# ---------------------------------------------------------------------------

class TestRecordingUploadEndpoint:

    def test_stores_recording(self, client, storage):
        response = client.post(
            "/api/recordings/upload",
            data={"uid": "abc123", "candidateId": "42", "recordedDuration": "95"},
            files={"file": ("rec.webm", b"webm-bytes", "video/webm")},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Recording uploaded successfully"
        assert body["uid"] == "abc123"
        assert body["blobName"].startswith("abc123/candidate-42-interview-na-")
        assert body["blobName"].endswith(".webm")
        key = (settings.AZURE_BLOB_CONTAINER, body["blobName"])
        assert storage.blobs[key] == b"webm-bytes"
        assert storage.metadata[key]["recordedDuration"] == "95"

    def test_missing_file_is_400(self, client):
        response = client.post("/api/recordings/upload", data={"uid": "abc123"})

        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_blank_uid_is_400(self, client, storage):
        response = client.post(
            "/api/recordings/upload",
            data={"uid": "  "},
            files={"file": ("rec.webm", b"webm-bytes", "video/webm")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required field: uid"}
        assert storage.blobs == {}

    @pytest.mark.parametrize("uid", ["../../escaped", "abc/../..", "/abs", "a\\b"])
    def test_unsafe_uid_is_400(self, client, storage, uid):
        response = client.post(
            "/api/recordings/upload",
            data={"uid": uid},
            files={"file": ("rec.webm", b"webm-bytes", "video/webm")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid uid"}
        assert storage.blobs == {}

    def test_oversized_file_is_400(self, client, storage, monkeypatch):
        monkeypatch.setattr(settings, "RECORDING_MAX_BYTES", 4)

        response = client.post(
            "/api/recordings/upload",
            data={"uid": "abc123"},
            files={"file": ("rec.webm", b"webm-bytes", "video/webm")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "File too large"}


# ---------------------------------------------------------------------------
# /api/email/send-interview-invite
# ---------------------------------------------------------------------------

class TestInviteEndpoint:

    def test_sends_invite(self, client, mail_transport):
        response = client.post("/api/email/send-interview-invite", json={
            "to": "jane@test",
            "candidateName": "Jane",
            "interviewLink": "https://interview.test/abc",
        })

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert mail_transport.sent[0]["to"] == "jane@test"
        assert "Hello Jane," in mail_transport.sent[0]["html_body"]

    def test_incomplete_attachments_filtered(self, client, mail_transport):
        client.post("/api/email/send-interview-invite", json={
            "to": "jane@test",
            "interviewLink": "https://interview.test/abc",
            "attachments": [
                {"name": "JD.pdf", "contentBase64": "JVBERi0="},
                {"name": "empty.pdf"},
            ],
        })

        attachments = mail_transport.sent[0]["attachments"]
        assert [a.name for a in attachments] == ["JD.pdf"]

    @pytest.mark.parametrize("payload", [
        {"interviewLink": "https://interview.test/abc"},
        {"to": "jane@test"},
        {"to": "", "interviewLink": "https://interview.test/abc"},
    ])
    def test_missing_fields_are_400(self, client, mail_transport, payload):
        response = client.post("/api/email/send-interview-invite", json=payload)

        assert response.status_code == 400
        assert mail_transport.sent == []

    def test_delivery_failure_is_502(self, client, mail_transport):
        mail_transport.fail = True

        response = client.post("/api/email/send-interview-invite", json={
            "to": "jane@test",
            "interviewLink": "https://interview.test/abc",
        })

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to send interview invite"}
