# Role: Tool declarations advertised to the provider, per chat mode. Each ToolSpec carries the JSON schema
# the model sees, the pydantic model its arguments decode into, and the confirmation text for the UI.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Type

from pydantic import BaseModel

from tutor_backend.models.mode import ChatMode
from tutor_backend.models.widget import ChallengeData, QuizData
from tutor_backend.tools.sample_quiz import SAMPLE_QUIZ

WidgetType = Literal["quiz", "coding_challenge"]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    # None means the tool takes no arguments.
    parameters: Optional[Dict[str, Any]]
    widget_type: WidgetType
    data_model: Type[BaseModel]
    confirmation: Callable[[Any], str]
    # No-arg tools decode this payload instead of the provider's (empty) arguments.
    fixed_payload: Optional[Dict[str, Any]] = None


_ANSWER_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "The answer text shown on the button."},
        "feedback": {
            "type": "string",
            "description": "Shown after the learner picks this answer: why it is right or wrong.",
        },
        "isCorrect": {"type": "boolean", "description": "Whether this answer is correct."},
    },
    "required": ["title", "feedback", "isCorrect"],
}

QUIZ_PARAMETERS: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Short title of the quiz."},
        "questions": {
            "type": "array",
            "description": "Between 3 and 5 multiple-choice questions.",
            "minItems": 3,
            "maxItems": 5,
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "The question text."},
                    "answers": {
                        "type": "array",
                        "description": "Possible answers. Exactly one must have isCorrect = true.",
                        "items": _ANSWER_SCHEMA,
                    },
                },
                "required": ["title", "answers"],
            },
        },
    },
    "required": ["title", "questions"],
}

CHALLENGE_PARAMETERS: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Short title of the challenge."},
        "description": {
            "type": "string",
            "description": "Markdown description of the task and its requirements.",
        },
        "feedback": {
            "type": "string",
            "description": (
                "Markdown review of the learner's submitted code. Only set this when reviewing a "
                "submission; leave it out for a brand new challenge."
            ),
        },
        "files": {
            "type": "array",
            "description": "Starter files (or the learner's files, when reviewing).",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "File name, e.g. index.js."},
                    "language": {"type": "string", "description": "Language id, e.g. javascript."},
                    "content": {"type": "string", "description": "Full file content."},
                },
                "required": ["name", "language", "content"],
            },
        },
    },
    "required": ["title", "description", "files"],
}


def _quiz_confirmation(_: QuizData) -> str:
    return "I've created a quiz for you. Good luck!"


def _challenge_confirmation(data: ChallengeData) -> str:
    # Key line: "reviewed" wording only when the provider attached feedback to a submission.
    if data.feedback:
        return "I've reviewed your code. Check the feedback in the editor below."
    return "Here is a new coding challenge for you. Write your solution in the editor below."


GENERATE_QUIZ = ToolSpec(
    name="generate_quiz",
    description=(
        "Generate an interactive multiple-choice quiz (3 to 5 questions) about a topic the user "
        "wants to practise or has just learned."
    ),
    parameters=QUIZ_PARAMETERS,
    widget_type="quiz",
    data_model=QuizData,
    confirmation=_quiz_confirmation,
)

GENERATE_CODING_CHALLENGE = ToolSpec(
    name="generate_coding_challenge",
    description=(
        "Give the user a hands-on coding challenge with starter files, or review code the user "
        "submitted for a challenge (set feedback when reviewing)."
    ),
    parameters=CHALLENGE_PARAMETERS,
    widget_type="coding_challenge",
    data_model=ChallengeData,
    confirmation=_challenge_confirmation,
)

GET_QUIZ_DATA = ToolSpec(
    name="get_quiz_data",
    description="Show the user the ready-made practice quiz.",
    parameters=None,
    widget_type="quiz",
    data_model=QuizData,
    confirmation=_quiz_confirmation,
    fixed_payload=SAMPLE_QUIZ,
)

_MODE_TOOLS: Dict[ChatMode, List[ToolSpec]] = {
    ChatMode.ASSISTANT: [],
    ChatMode.SAMPLE_QUIZ: [GET_QUIZ_DATA],
    ChatMode.QUIZ_TUTOR: [GENERATE_QUIZ],
    ChatMode.CODING_TUTOR: [GENERATE_QUIZ, GENERATE_CODING_CHALLENGE],
}


def tools_for_mode(mode: ChatMode) -> List[ToolSpec]:
    return list(_MODE_TOOLS[mode])
