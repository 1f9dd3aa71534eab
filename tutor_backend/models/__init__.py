"""Data models shared by the chat endpoint and the UI."""

from .message import HistoryRole, Message, Role
from .mode import ChatMode
from .widget import (
    ChallengeData,
    CodingChallengeWidget,
    FileData,
    QuizAnswer,
    QuizData,
    QuizQuestion,
    QuizResult,
    QuizWidget,
    Widget,
)

__all__ = [
    "Message",
    "Role",
    "HistoryRole",
    "ChatMode",
    "Widget",
    "QuizWidget",
    "CodingChallengeWidget",
    "QuizData",
    "QuizQuestion",
    "QuizAnswer",
    "QuizResult",
    "ChallengeData",
    "FileData",
]
