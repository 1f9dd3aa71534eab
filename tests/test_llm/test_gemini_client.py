"""Tests for the Gemini client wrapper (no network calls)."""

from types import SimpleNamespace

import pytest
from google.genai import types

from tutor_backend.core.errors import ProviderError
from tutor_backend.llm.gemini_client import (
    GeminiClient,
    build_request,
    build_tools,
    reply_from_response,
)
from tutor_backend.models.message import Message
from tutor_backend.tools.registry import GENERATE_CODING_CHALLENGE, GENERATE_QUIZ, GET_QUIZ_DATA


class TestBuildRequest:
    """Test message -> Gemini contents mapping."""

    def test_folds_system_messages_into_instruction(self):
        """Test that system messages leave the contents list."""
        messages = [
            Message(role="system", content="You are a tutor."),
            Message(role="user", content="Hi"),
            Message(role="system", content="Be brief."),
        ]

        system_instruction, contents = build_request(messages)

        assert system_instruction == "You are a tutor.\n\nBe brief."
        assert len(contents) == 1

    def test_maps_assistant_to_model_role(self):
        """Test the Gemini role names."""
        messages = [
            Message(role="user", content="Hi"),
            Message(role="assistant", content="Hello"),
        ]

        _, contents = build_request(messages)

        assert [c.role for c in contents] == ["user", "model"]
        assert contents[1].parts[0].text == "Hello"

    def test_no_system_message(self):
        """Test that the instruction is None without system messages."""
        system_instruction, _ = build_request([Message(role="user", content="Hi")])

        assert system_instruction is None


class TestBuildTools:
    """Test function declarations."""

    def test_no_tools(self):
        assert build_tools([]) == []

    def test_declares_every_tool(self):
        """Test that all specs land in one Tool."""
        tools = build_tools([GENERATE_QUIZ, GENERATE_CODING_CHALLENGE])

        assert len(tools) == 1
        names = [d.name for d in tools[0].function_declarations]
        assert names == ["generate_quiz", "generate_coding_challenge"]

    def test_no_arg_tool_has_no_parameters(self):
        """Test that get_quiz_data is declared without a schema."""
        tools = build_tools([GET_QUIZ_DATA])

        assert tools[0].function_declarations[0].parameters_json_schema is None


class TestReplyFromResponse:
    """Test response unwrapping."""

    def test_function_calls_become_tool_calls(self):
        """Test that arguments are passed through untouched."""
        resp = SimpleNamespace(
            function_calls=[
                SimpleNamespace(name="generate_quiz", args={"title": "T"}),
                SimpleNamespace(name="generate_coding_challenge", args={"title": "C"}),
            ],
            text=None,
        )

        reply = reply_from_response(resp)

        assert [c.name for c in reply.tool_calls] == ["generate_quiz", "generate_coding_challenge"]
        assert reply.tool_calls[0].arguments == {"title": "T"}
        assert reply.text is None

    def test_plain_text(self):
        """Test that text is stripped and tool_calls is empty."""
        reply = reply_from_response(SimpleNamespace(function_calls=None, text="  Hello \n"))

        assert reply.text == "Hello"
        assert reply.tool_calls == []

    def test_empty_response(self):
        """Test that a response with nothing yields an empty reply."""
        reply = reply_from_response(SimpleNamespace(function_calls=None, text=None))

        assert reply.text is None
        assert reply.tool_calls == []


class TestGeminiClient:
    """Test the client wrapper with a stubbed SDK."""

    def test_missing_api_key(self, monkeypatch):
        """Test that construction fails without a credential."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        with pytest.raises(RuntimeError):
            GeminiClient()

    def test_reads_model_and_temperature_from_env(self, monkeypatch):
        """Test env-driven configuration."""
        monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
        monkeypatch.setenv("GEMINI_TEMPERATURE", "0.2")

        client = GeminiClient(api_key="test-key")

        assert client.model_name == "gemini-test"
        assert client.temperature == 0.2

    def test_generate_chat_sends_tools_with_auto_mode(self):
        """Test the request shape handed to the SDK."""
        client = GeminiClient(api_key="test-key", model="gemini-test", temperature=0.5)
        captured = {}

        def fake_generate_content(**kwargs):
            captured.update(kwargs)
            return SimpleNamespace(function_calls=None, text="Hi there")

        client.client = SimpleNamespace(models=SimpleNamespace(generate_content=fake_generate_content))

        reply = client.generate_chat(
            [Message(role="system", content="Tutor"), Message(role="user", content="Hi")],
            tools=[GENERATE_QUIZ],
        )

        assert reply.text == "Hi there"
        assert captured["model"] == "gemini-test"
        config = captured["config"]
        assert config.system_instruction == "Tutor"
        assert config.temperature == 0.5
        assert config.tools[0].function_declarations[0].name == "generate_quiz"
        assert config.tool_config.function_calling_config.mode == types.FunctionCallingConfigMode.AUTO

    def test_generate_chat_without_tools(self):
        """Test that no tool config is sent for the plain assistant."""
        client = GeminiClient(api_key="test-key")
        captured = {}

        def fake_generate_content(**kwargs):
            captured.update(kwargs)
            return SimpleNamespace(function_calls=None, text="Hi")

        client.client = SimpleNamespace(models=SimpleNamespace(generate_content=fake_generate_content))

        client.generate_chat([Message(role="user", content="Hi")])

        assert captured["config"].tools is None
        assert captured["config"].tool_config is None

    def test_sdk_errors_become_provider_errors(self):
        """Test that any SDK failure is wrapped."""
        client = GeminiClient(api_key="test-key")

        def failing_generate_content(**kwargs):
            raise ConnectionError("network down")

        client.client = SimpleNamespace(models=SimpleNamespace(generate_content=failing_generate_content))

        with pytest.raises(ProviderError):
            client.generate_chat([Message(role="user", content="Hi")])

    def test_requires_a_conversation_turn(self):
        """Test that a system-only prompt is rejected before calling the SDK."""
        client = GeminiClient(api_key="test-key")

        with pytest.raises(ValueError):
            client.generate_chat([Message(role="system", content="Tutor")])
