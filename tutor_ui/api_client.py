# Role: HTTP client for the chat endpoint. The UI never talks to the model provider directly.

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

from tutor_backend.models.widget import Widget

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"


class ChatReply(BaseModel):
    response: str
    widget: Optional[Widget] = None


class ChatApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.base_url = (base_url or os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL)).rstrip("/")
        if timeout is None:
            timeout = float(os.getenv("BACKEND_TIMEOUT", "60"))
        self.timeout = timeout

    def send(self, message: str, history: List[Dict[str, str]]) -> ChatReply:
        # 1) POST message + stripped history
        # 2) Non-2xx -> requests.HTTPError (the endpoint answers 500 {"error": ...} on failure)
        # 3) Validate the body (a malformed widget raises pydantic.ValidationError)
        resp = requests.post(
            f"{self.base_url}/api/chat",
            json={"message": message, "history": history},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return ChatReply.model_validate(resp.json())

    def fetch_info(self) -> Optional[Dict[str, Any]]:
        # Role: best-effort discoverability call for the sidebar (active mode); never raises.
        try:
            r = requests.get(f"{self.base_url}/api/", timeout=10)
            if r.status_code != 200:
                return None
            return r.json()
        except requests.RequestException:
            return None
