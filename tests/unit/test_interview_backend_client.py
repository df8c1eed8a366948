"""
Unit tests for the interview backend client and the remote completion provider.

Requests are answered by httpx.MockTransport.
Run: pytest tests/unit/test_interview_backend_client.py -v
"""

import json

import httpx
import pytest

from agents.interview.providers import LLMCompletionProvider, RemoteCompletionProvider
from services.interview_backend_client import (
    InterviewBackendClient,
    from_tuple_payload,
    to_tuple_payload,
)
from utils.exceptions import UpstreamUnavailable


TRANSCRIPT = [
    {"role": "system", "content": "You are Lisa."},
    {"role": "assistant", "content": "Tell me about yourself."},
]


def make_client(handler):
    return InterviewBackendClient(
        base_url="http://backend.test",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


class CountingHandler:
    """MockTransport handler that records how many requests reached it."""

    def __init__(self, respond):
        self.respond = respond
        self.calls = 0

    def __call__(self, request):
        self.calls += 1
        return self.respond(request)


class TestTuplePayload:

    def test_to_tuple_payload(self):
        assert to_tuple_payload(TRANSCRIPT) == [
            ["system", "You are Lisa."],
            ["assistant", "Tell me about yourself."],
        ]

    def test_from_tuple_payload(self):
        assert from_tuple_payload([["user", "hi"]]) == [{"role": "user", "content": "hi"}]


class TestAskLLM:

    def test_posts_tuple_payload_with_user_text(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=seen["body"]["messages"] + [["assistant", "Next?"]])

        result = make_client(handler).ask_llm(TRANSCRIPT, user_text="I build APIs.")

        assert seen["path"] == "/ai_interview/ask_llm"
        assert seen["body"]["messages"][0] == ["system", "You are Lisa."]
        assert seen["body"]["user_text"] == "I build APIs."
        assert result[-1] == {"role": "assistant", "content": "Next?"}

    def test_user_text_omitted_when_empty(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=[])

        make_client(handler).ask_llm(TRANSCRIPT)

        assert "user_text" not in seen["body"]

    def test_server_error_raises_after_one_attempt(self):
        handler = CountingHandler(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamUnavailable) as exc_info:
            make_client(handler).ask_llm(TRANSCRIPT)

        assert exc_info.value.message == "LLM service unavailable"
        assert handler.calls == 1

    def test_malformed_body_raises_upstream_unavailable(self):
        client = make_client(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(UpstreamUnavailable):
            client.ask_llm(TRANSCRIPT)

    def test_timeout_raises_after_one_attempt(self):
        def timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        handler = CountingHandler(timeout)

        with pytest.raises(UpstreamUnavailable):
            make_client(handler).ask_llm(TRANSCRIPT)

        assert handler.calls == 1


class TestGenerateScorecard:

    def test_returns_pdf_bytes(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, content=b"%PDF-1.4 scorecard")

        pdf = make_client(handler).generate_scorecard(TRANSCRIPT)

        assert pdf == b"%PDF-1.4 scorecard"
        assert seen["path"] == "/ai_interview/generate_scorecard"
        assert seen["body"]["conversation"][1] == ["assistant", "Tell me about yourself."]

    def test_empty_body_raises(self):
        client = make_client(lambda request: httpx.Response(200, content=b""))

        with pytest.raises(UpstreamUnavailable) as exc_info:
            client.generate_scorecard(TRANSCRIPT)

        assert exc_info.value.message == "Scoring service unavailable"

    def test_error_status_raises_after_one_attempt(self):
        handler = CountingHandler(lambda request: httpx.Response(503))

        with pytest.raises(UpstreamUnavailable):
            make_client(handler).generate_scorecard(TRANSCRIPT)

        assert handler.calls == 1

    def test_timeout_raises_after_one_attempt(self):
        def timeout(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        handler = CountingHandler(timeout)

        with pytest.raises(UpstreamUnavailable):
            make_client(handler).generate_scorecard(TRANSCRIPT)

        assert handler.calls == 1


class TestCompletionProviders:

    def test_remote_provider_returns_last_assistant_entry(self):
        def handler(request):
            return httpx.Response(200, json=[
                ["system", "You are Lisa."],
                ["assistant", "First?"],
                ["user", "Answer."],
                ["assistant", "Second?"],
            ])

        provider = RemoteCompletionProvider(client=make_client(handler))

        assert provider.complete(TRANSCRIPT, "Answer.") == "Second?"

    def test_remote_provider_without_assistant_reply_raises(self):
        provider = RemoteCompletionProvider(
            client=make_client(lambda request: httpx.Response(200, json=[["user", "hi"]]))
        )

        with pytest.raises(UpstreamUnavailable):
            provider.complete(TRANSCRIPT)

    def test_llm_provider_delegates_to_chat(self):
        class ChatOnly:
            def __init__(self):
                self.args = None

            def chat(self, messages, user_text=None):
                self.args = (list(messages), user_text)
                return "Next?"

        llm = ChatOnly()

        assert LLMCompletionProvider(llm_service=llm).complete(TRANSCRIPT, "hi") == "Next?"
        assert llm.args == (TRANSCRIPT, "hi")
