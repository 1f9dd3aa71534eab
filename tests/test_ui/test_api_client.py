"""Tests for the UI's HTTP client."""

import pytest
import requests

from tutor_ui import api_client
from tutor_ui.api_client import ChatApiClient


class FakeResponse:
    def __init__(self, status_code: int, payload: dict):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        return self._payload


class TestChatApiClient:
    """Test request shape and response decoding."""

    def test_posts_to_api_chat(self, monkeypatch):
        captured = {}

        def fake_post(url, json, timeout):
            captured.update(url=url, json=json, timeout=timeout)
            return FakeResponse(200, {"response": "Hi", "widget": None})

        monkeypatch.setattr(api_client.requests, "post", fake_post)
        client = ChatApiClient(base_url="http://backend:9000/", timeout=5)

        reply = client.send("Hello", [{"role": "user", "content": "Earlier"}])

        assert captured["url"] == "http://backend:9000/api/chat"
        assert captured["json"] == {"message": "Hello", "history": [{"role": "user", "content": "Earlier"}]}
        assert captured["timeout"] == 5
        assert reply.response == "Hi"
        assert reply.widget is None

    def test_decodes_widget(self, monkeypatch, quiz_arguments: dict):
        payload = {"response": "Quiz!", "widget": {"type": "quiz", "data": quiz_arguments}}
        monkeypatch.setattr(api_client.requests, "post", lambda url, json, timeout: FakeResponse(200, payload))

        reply = ChatApiClient(base_url="http://backend").send("Quiz me", [])

        assert reply.widget.type == "quiz"
        assert reply.widget.data.questions[0].answers[0].is_correct is True

    def test_server_error_raises_http_error(self, monkeypatch):
        monkeypatch.setattr(
            api_client.requests,
            "post",
            lambda url, json, timeout: FakeResponse(500, {"error": "Failed to fetch AI response"}),
        )

        with pytest.raises(requests.HTTPError):
            ChatApiClient(base_url="http://backend").send("Hi", [])

    def test_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("BACKEND_URL", "http://from-env:8000")

        assert ChatApiClient().base_url == "http://from-env:8000"

    def test_fetch_info_never_raises(self, monkeypatch):
        def failing_get(url, timeout):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(api_client.requests, "get", failing_get)

        assert ChatApiClient(base_url="http://backend").fetch_info() is None
