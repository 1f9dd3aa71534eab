"""Shared test fixtures and configuration for pytest."""

from typing import Any

import pytest

from tutor_backend.core.chat_service import ChatService
from tutor_backend.llm.reply import ModelReply, ToolCall
from tutor_backend.models.widget import ChallengeData, QuizData


class FakeGeminiClient:
    """Stands in for GeminiClient: records every request and returns a canned reply."""

    def __init__(self, reply: ModelReply | None = None, error: Exception | None = None):
        self.reply = reply or ModelReply(text="Hello!")
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def generate_chat(self, messages, tools=()):
        self.calls.append({"messages": list(messages), "tools": list(tools)})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def quiz_arguments() -> dict[str, Any]:
    """Tool arguments as the provider sends them for generate_quiz."""
    return {
        "title": "Python Lists",
        "questions": [
            {
                "title": "Which method appends an item to a list?",
                "answers": [
                    {"title": "append()", "feedback": "Correct!", "isCorrect": True},
                    {"title": "add()", "feedback": "Lists have no add() method.", "isCorrect": False},
                ],
            },
            {
                "title": "What does len([1, 2, 3]) return?",
                "answers": [
                    {"title": "2", "feedback": "Count again.", "isCorrect": False},
                    {"title": "3", "feedback": "Correct! Three items.", "isCorrect": True},
                ],
            },
            {
                "title": "Which slice reverses a list?",
                "answers": [
                    {"title": "[::-1]", "feedback": "Correct! A negative step walks backwards.", "isCorrect": True},
                    {"title": "[-1:]", "feedback": "That is only the last item.", "isCorrect": False},
                ],
            },
        ],
    }


@pytest.fixture
def challenge_arguments() -> dict[str, Any]:
    """Tool arguments as the provider sends them for generate_coding_challenge."""
    return {
        "title": "Add two numbers",
        "description": "implement add",
        "files": [
            {"name": "index.js", "language": "javascript", "content": "function add(a,b){}"},
            {"name": "styles.css", "language": "css", "content": "body { margin: 0; }"},
        ],
    }


@pytest.fixture
def quiz_data(quiz_arguments: dict[str, Any]) -> QuizData:
    return QuizData.model_validate(quiz_arguments)


@pytest.fixture
def challenge_data(challenge_arguments: dict[str, Any]) -> ChallengeData:
    return ChallengeData.model_validate(challenge_arguments)


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def make_service():
    """Build a ChatService around a FakeGeminiClient; returns (service, client)."""

    def _make(reply: ModelReply | None = None, error: Exception | None = None, mode: str = "coding_tutor"):
        client = FakeGeminiClient(reply=reply, error=error)
        return ChatService(client=client, mode=mode), client

    return _make


@pytest.fixture
def quiz_reply(quiz_arguments: dict[str, Any]) -> ModelReply:
    return ModelReply(tool_calls=[ToolCall(name="generate_quiz", arguments=quiz_arguments)])
