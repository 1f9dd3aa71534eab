# Role: Shared dependencies for the API layer. One ChatService per process, built from config;
# tests swap it through app.dependency_overrides[get_chat_service].

from __future__ import annotations

from functools import lru_cache

import tutor_backend.config as config
from tutor_backend.core.chat_service import ChatService


@lru_cache
def get_chat_service() -> ChatService:
    return ChatService(mode=config.CHAT_MODE)
