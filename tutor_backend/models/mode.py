# Role: Central enum of chat modes. A mode fixes the system instruction and the set of tools advertised
# to the provider (see prompts/system_prompt.py and tools/registry.py).

from enum import Enum


class ChatMode(str, Enum):
    ASSISTANT = "assistant"
    SAMPLE_QUIZ = "sample_quiz"
    QUIZ_TUTOR = "quiz_tutor"
    CODING_TUTOR = "coding_tutor"
