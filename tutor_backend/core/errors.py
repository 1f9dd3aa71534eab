# Role: Failure taxonomy for one chat turn. The API layer collapses every ChatError (and anything
# unexpected) into the same generic 500, but the types keep logs and tests precise.

from __future__ import annotations


class ChatError(Exception):
    """Base class for failures while producing a chat turn."""


class ProviderError(ChatError):
    """The model provider call failed or returned nothing usable."""


class ToolCallError(ChatError):
    """The provider asked for a tool call we cannot turn into a widget."""


class UnknownToolError(ToolCallError):
    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Provider called unregistered tool(s): {', '.join(names) or '<none>'}")


class ToolArgumentsError(ToolCallError):
    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Invalid arguments for tool {tool_name!r}: {reason}")
