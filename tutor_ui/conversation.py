# Role: Client-side conversation state (input, messages, is_loading) and the send-message operation.
# Kept free of Streamlit so the rules (history stripping, failure fallback) are plain Python.

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

import requests
from pydantic import ValidationError

from tutor_backend.models.message import Message
from tutor_ui.api_client import ChatReply

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Sorry, I couldn't reach the server."


class ChatTransport(Protocol):
    def send(self, message: str, history: List[Dict[str, str]]) -> ChatReply:
        ...


class Conversation:
    def __init__(self, client: ChatTransport) -> None:
        self.client = client
        self.input: str = ""
        self.messages: List[Message] = []
        self.is_loading: bool = False

    def stripped_history(self) -> List[Dict[str, str]]:
        # Key line: only role + content go back to the endpoint, never widget payloads.
        return [m.stripped() for m in self.messages]

    def send_message(self, text: Optional[str] = None) -> Optional[Message]:
        """
        Send `text` (or the current input) as a user message and append the assistant reply.

        Blank text and sends while a request is in flight are ignored (returns None).
        Transport failures append FALLBACK_MESSAGE instead of raising.
        """
        content = (self.input if text is None else text).strip()
        if not content or self.is_loading:
            return None

        # History is everything before the new user message.
        history = self.stripped_history()
        self.messages.append(Message(role="user", content=content))
        self.input = ""
        self.is_loading = True

        try:
            reply = self.client.send(content, history)
            assistant = Message(role="assistant", content=reply.response, widget=reply.widget)
        except (requests.RequestException, ValidationError) as e:
            logger.error("Error sending message: %s", e)
            assistant = Message(role="assistant", content=FALLBACK_MESSAGE)
        finally:
            self.is_loading = False

        self.messages.append(assistant)
        return assistant

    def reset(self) -> None:
        self.input = ""
        self.messages = []
        self.is_loading = False
