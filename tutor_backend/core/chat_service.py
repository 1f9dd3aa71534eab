# Role: Orchestrator for one conversation turn. It glues together:
# prompt assembly (system instruction + history + new message), tool advertising, the provider call,
# and response unwrapping (free text, or a tool call decoded into a widget).

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from tutor_backend.core.errors import ProviderError
from tutor_backend.core.tool_calls import build_widget, decode_arguments, select_tool_call
from tutor_backend.llm.gemini_client import GeminiClient
from tutor_backend.llm.reply import ModelReply
from tutor_backend.models.message import Message
from tutor_backend.models.mode import ChatMode
from tutor_backend.models.widget import Widget
from tutor_backend.prompts.system_prompt import build_system_prompt
from tutor_backend.tools.registry import tools_for_mode

logger = logging.getLogger(__name__)

HistoryItem = Union[Message, Mapping[str, Any]]


@dataclass(frozen=True)
class ChatTurn:
    response: str
    widget: Optional[Widget] = None


class ChatService:
    """
    Stateless chat turn handler.

    Contract:
    - The caller owns the conversation; history is forwarded verbatim (no size limit, no truncation).
    - Widget payloads in history are dropped: only role + content reach the provider.
    - Either a free-text response with widget=None, or a confirmation text plus a widget.
    - Provider and tool-call failures raise ChatError subclasses; nothing partial is returned.
    """

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        mode: Union[ChatMode, str] = ChatMode.CODING_TUTOR,
    ) -> None:
        # Key lines:
        # - The provider client is injectable (tests pass a fake, the API shares one instance).
        # - Lazy-init: a missing GEMINI_API_KEY fails the turn, not the app start.
        self._client = client
        self.mode = ChatMode(mode)
        self.system_prompt = build_system_prompt(self.mode)
        self.tools = tuple(tools_for_mode(self.mode))

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def build_messages(self, message: str, history: Optional[Sequence[HistoryItem]] = None) -> List[Message]:
        messages = [Message(role="system", content=self.system_prompt)]
        for item in history or []:
            # Only role + content are read, so a stale widget in history is never validated or forwarded.
            if isinstance(item, Message):
                role, content = item.role, item.content
            else:
                role, content = item["role"], item["content"]
            messages.append(Message(role=role, content=content))
        messages.append(Message(role="user", content=message))
        return messages

    def handle_turn(self, message: str, history: Optional[Sequence[HistoryItem]] = None) -> ChatTurn:
        # 1) Build prompt
        # 2) Call provider with the mode's tools (AUTO tool choice)
        # 3) Unwrap: tool call -> widget, else free text
        messages = self.build_messages(message, history)
        logger.debug("Chat turn: mode=%s history=%d", self.mode.value, len(messages) - 2)

        reply = self._get_client().generate_chat(messages, tools=self.tools)
        return self._unwrap(reply)

    def _unwrap(self, reply: ModelReply) -> ChatTurn:
        if reply.tool_calls:
            spec, call = select_tool_call(reply.tool_calls, self.tools)
            data = decode_arguments(spec, call)
            widget = build_widget(spec, data)
            logger.debug("Tool call %r -> widget %r", spec.name, widget.type)
            return ChatTurn(response=spec.confirmation(data), widget=widget)

        if not reply.text or not reply.text.strip():
            raise ProviderError("Provider returned neither text nor a tool call.")

        return ChatTurn(response=reply.text, widget=None)
