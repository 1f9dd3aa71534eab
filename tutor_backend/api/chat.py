# Role: Thin HTTP adapter for the chat endpoint. Validates request/response shapes and delegates the entire
# conversation turn to ChatService (business logic lives in core, not in the API layer).

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tutor_backend.api.deps import get_chat_service
from tutor_backend.core.chat_service import ChatService
from tutor_backend.models.message import HistoryRole
from tutor_backend.models.widget import Widget

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

GENERIC_ERROR = "Failed to fetch AI response"


class HistoryMessage(BaseModel):
    # Extra keys (e.g. a stale widget) are ignored by pydantic's default config.
    role: HistoryRole
    content: str


class ChatRequest(BaseModel):
    message: str
    history: List[HistoryMessage] = Field(default_factory=list)


class ChatResponse(BaseModel):
    response: str
    widget: Optional[Widget] = None


class ErrorResponse(BaseModel):
    error: str


@router.post("/chat", response_model=ChatResponse, responses={500: {"model": ErrorResponse}})
def chat(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    # 1) Forward (message, history) to the chat service
    # 2) Return text + optional widget in a stable schema for UI/clients
    # 3) Any failure: log it and answer with the same generic 500
    try:
        turn = service.handle_turn(req.message, [m.model_dump() for m in req.history])
    except Exception:
        logger.exception("Chat turn failed")
        return JSONResponse(status_code=500, content=ErrorResponse(error=GENERIC_ERROR).model_dump())

    return ChatResponse(response=turn.response, widget=turn.widget)
