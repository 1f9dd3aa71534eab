# Role: Turns provider tool calls into widgets. Picks one call by a fixed precedence rule, validates its
# arguments against the tool's pydantic model, and wraps the result in the Widget tagged union.

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from pydantic import BaseModel, ValidationError

from tutor_backend.core.errors import ToolArgumentsError, UnknownToolError
from tutor_backend.llm.reply import ToolCall
from tutor_backend.models.widget import CodingChallengeWidget, QuizWidget, Widget
from tutor_backend.tools.registry import ToolSpec

logger = logging.getLogger(__name__)


def select_tool_call(calls: Sequence[ToolCall], tools: Sequence[ToolSpec]) -> Tuple[ToolSpec, ToolCall]:
    """
    Precedence rule: scan calls in provider order and take the first one whose name is registered
    for the current mode. Later calls are ignored. Unregistered names never produce a widget; if no
    registered call exists at all, the turn fails with UnknownToolError.
    """
    registry = {spec.name: spec for spec in tools}

    for index, call in enumerate(calls):
        spec = registry.get(call.name)
        if spec is None:
            logger.warning("Skipping call to unregistered tool %r", call.name)
            continue

        ignored = [c.name for c in calls[index + 1 :]]
        if ignored:
            logger.debug("Using tool %r, ignoring later calls: %s", call.name, ignored)
        return spec, call

    raise UnknownToolError([c.name for c in calls])


def decode_arguments(spec: ToolSpec, call: ToolCall) -> BaseModel:
    # 1) No-arg tools decode their fixed payload
    # 2) JSON strings go through model_validate_json, mappings through model_validate
    # 3) Any schema or JSON problem becomes ToolArgumentsError (no partial widget)
    payload = spec.fixed_payload if spec.fixed_payload is not None else call.arguments

    try:
        if isinstance(payload, (str, bytes)):
            return spec.data_model.model_validate_json(payload)
        return spec.data_model.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        raise ToolArgumentsError(spec.name, str(e)) from e


def build_widget(spec: ToolSpec, data: BaseModel) -> Widget:
    if spec.widget_type == "quiz":
        return QuizWidget(data=data)
    return CodingChallengeWidget(data=data)
