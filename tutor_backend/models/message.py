# Role: Single chat message schema. The same shape is used for the request history, the prompt sent to
# the provider, and the UI transcript (where an assistant message may also carry a widget).

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from tutor_backend.models.widget import Widget

Role = Literal["user", "assistant", "system"]
# Client-supplied history never carries system messages; only the server sets the system instruction.
HistoryRole = Literal["user", "assistant"]


class Message(BaseModel):
    role: Role
    content: str
    widget: Optional[Widget] = None

    def stripped(self) -> dict:
        # Key line: widget payloads never travel back to the endpoint.
        return {"role": self.role, "content": self.content}
