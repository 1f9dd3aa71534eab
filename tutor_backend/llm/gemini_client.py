# Role: Minimal wrapper around the Gemini API. Centralizes model name, temperature, tool declarations and
# error handling, so the rest of the code calls generate_chat(messages, tools) and gets a ModelReply back.

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional, Sequence, Tuple

from google import genai
from google.genai import types

from tutor_backend.core.errors import ProviderError
from tutor_backend.llm.reply import ModelReply, ToolCall
from tutor_backend.models.message import Message
from tutor_backend.tools.registry import ToolSpec

logger = logging.getLogger(__name__)

# Gemini names the assistant side of a conversation "model".
_ROLE_MAP = {"user": "user", "assistant": "model"}


def build_request(messages: Sequence[Message]) -> Tuple[Optional[str], List[types.Content]]:
    # 1) Fold every system message (in order) into one system instruction
    # 2) Map user/assistant turns to Gemini contents
    system_parts: List[str] = []
    contents: List[types.Content] = []

    for m in messages:
        if m.role == "system":
            if m.content.strip():
                system_parts.append(m.content.strip())
            continue
        contents.append(types.Content(role=_ROLE_MAP[m.role], parts=[types.Part(text=m.content)]))

    system_instruction = "\n\n".join(system_parts) if system_parts else None
    return system_instruction, contents


def build_tools(tools: Sequence[ToolSpec]) -> List[types.Tool]:
    if not tools:
        return []
    declarations = [
        types.FunctionDeclaration(
            name=spec.name,
            description=spec.description,
            parameters_json_schema=spec.parameters,
        )
        for spec in tools
    ]
    return [types.Tool(function_declarations=declarations)]


def reply_from_response(resp: Any) -> ModelReply:
    # Key line: keep the provider's argument payload untouched; decoding is the chat service's job.
    calls = [
        ToolCall(name=fc.name or "", arguments=fc.args)
        for fc in (getattr(resp, "function_calls", None) or [])
    ]
    if calls:
        return ModelReply(text=None, tool_calls=calls)

    text = getattr(resp, "text", None)
    return ModelReply(text=text.strip() if text else None, tool_calls=[])


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Model and temperature are configurable for experiments.
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        if temperature is None:
            temperature = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
        self.temperature = temperature

        self.client = genai.Client(api_key=self.api_key)

    def generate_chat(self, messages: Sequence[Message], tools: Sequence[ToolSpec] = ()) -> ModelReply:
        # 1) Split messages into system instruction + contents
        # 2) Declare tools (if any) with AUTO calling: the model picks a tool or answers in text
        # 3) Single synchronous completion, SDK failures wrapped as ProviderError
        system_instruction, contents = build_request(messages)
        if not contents:
            raise ValueError("At least one user or assistant message is required.")

        config_kwargs: dict = {
            "temperature": self.temperature,
            "system_instruction": system_instruction,
        }
        declared = build_tools(tools)
        if declared:
            config_kwargs["tools"] = declared
            config_kwargs["tool_config"] = types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(
                    mode=types.FunctionCallingConfigMode.AUTO,
                )
            )
        config = types.GenerateContentConfig(**config_kwargs)

        logger.debug(
            "Gemini request: model=%s messages=%d tools=%s",
            self.model_name,
            len(contents),
            [spec.name for spec in tools],
        )

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            raise ProviderError(f"Gemini API call failed: {e}") from e

        return reply_from_response(resp)

