# Role: Provider-neutral view of one completion. The chat service only ever sees these two types,
# so tests can fake the provider without touching the Gemini SDK.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class ToolCall:
    name: str
    # Raw provider payload: a mapping (Gemini) or a JSON-encoded string. Decoded by the chat service.
    arguments: Any = None


@dataclass(frozen=True)
class ModelReply:
    text: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)
