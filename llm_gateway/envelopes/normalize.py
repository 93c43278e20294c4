"""Turn a request envelope into ``(messages, options)`` for the generator.

One function per envelope variant; the route picks which one to call.
Every failure is a ``ValidationError`` raised before any provider call.
"""

from __future__ import annotations
from typing import Any, List, Optional, Tuple

from ..errors import ValidationError
from ..generate.types import Message, ModelParams
from .types import FullPassthrough, MessageList, PromptOnly

PROMPT_REQUIRED = "Prompt is required"
MESSAGES_REQUIRED = "Messages array is required and must not be empty"
MESSAGE_SHAPE = "Each message must have a role and content"
REQUEST_DATA_REQUIRED = "Request data is required"
MODEL_REQUIRED = "Model parameter is required"
PROMPT_OR_MESSAGES_REQUIRED = "Either a prompt string or messages array is required"

Normalized = Tuple[List[Message], ModelParams]


def _is_filled_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _to_messages(items: List[Any]) -> List[Message]:
    out: List[Message] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError(MESSAGE_SHAPE)
        role, content = item.get("role"), item.get("content")
        if not (_is_filled_str(role) and _is_filled_str(content)):
            raise ValidationError(MESSAGE_SHAPE)
        out.append(Message(role=role, content=content))
    return out


def _options(model: Any, temperature: Any, max_tokens: Any) -> ModelParams:
    return ModelParams(model=model or None, temperature=temperature, max_tokens=max_tokens)


def normalize_prompt(envelope: PromptOnly) -> Normalized:
    if not _is_filled_str(envelope.prompt):
        raise ValidationError(PROMPT_REQUIRED)
    messages = [Message(role="user", content=envelope.prompt)]
    return messages, _options(envelope.model, envelope.temperature, envelope.max_tokens)


def normalize_messages(envelope: MessageList) -> Normalized:
    if not isinstance(envelope.messages, list) or not envelope.messages:
        raise ValidationError(MESSAGES_REQUIRED)
    messages = _to_messages(envelope.messages)
    return messages, _options(envelope.model, envelope.temperature, envelope.max_tokens)


def normalize_full_passthrough(envelope: Optional[FullPassthrough]) -> Normalized:
    if envelope is None:
        raise ValidationError(REQUEST_DATA_REQUIRED)
    if not envelope.model:
        raise ValidationError(MODEL_REQUIRED)

    # a usable prompt wins over messages
    if _is_filled_str(envelope.prompt):
        messages = [Message(role="user", content=envelope.prompt)]
    elif isinstance(envelope.messages, list) and envelope.messages:
        messages = _to_messages(envelope.messages)
    else:
        raise ValidationError(PROMPT_OR_MESSAGES_REQUIRED)

    return messages, _options(envelope.model, envelope.temperature, envelope.max_tokens)
