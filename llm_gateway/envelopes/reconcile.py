"""Response envelopes returned by each entry point.

Callers written against different versions of the API expect different
shapes for the same generation result. Each shape is a pure function of
the ``GenerationSuccess``; the route only chooses which one applies.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..generate.types import GenerationSuccess


class EnvelopeKind(str, Enum):
    COMPLETION = "completion"
    CHAT = "chat"
    PASSTHROUGH = "passthrough"


def completion_envelope(result: GenerationSuccess) -> Dict[str, Any]:
    return {
        "success": True,
        "completion": result.text,
        "result": {
            "text": result.text,
            "choices": [{"text": result.text}],
        },
    }


def chat_envelope(result: GenerationSuccess) -> Dict[str, Any]:
    return {
        "success": True,
        "completion": result.text,
        "result": {
            "choices": [{"message": {"content": result.text}}],
        },
    }


def passthrough_envelope(result: GenerationSuccess) -> Dict[str, Any]:
    return {
        "success": True,
        "completion": result.text,
        "result": {
            "choices": [{"message": {"content": result.text}}],
            "raw_response": result.raw,
        },
    }


SERIALIZERS: Dict[EnvelopeKind, Callable[[GenerationSuccess], Dict[str, Any]]] = {
    EnvelopeKind.COMPLETION: completion_envelope,
    EnvelopeKind.CHAT: chat_envelope,
    EnvelopeKind.PASSTHROUGH: passthrough_envelope,
}


def render_success(kind: EnvelopeKind, result: GenerationSuccess) -> Dict[str, Any]:
    return SERIALIZERS[EnvelopeKind(kind)](result)


def render_failure(message: str, error: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body
