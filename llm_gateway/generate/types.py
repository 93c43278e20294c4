# Typed dataclasses shared across the generate modules.
# A GenerationResult is built fresh per call and never outlives the request.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ModelParams:
    """LLM parameters per request. None means 'use the default'."""
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass
class GenerationSuccess:
    """Provider answered; text is the first choice's content."""
    text: str
    raw: Dict[str, Any] = field(default_factory=dict)
    success: bool = field(default=True, init=False)


@dataclass
class GenerationFailure:
    """Provider call raised; message and code are taken from the exception."""
    message: str
    code: str = "UNKNOWN_ERROR"
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message, "code": self.code}


GenerationResult = Union[GenerationSuccess, GenerationFailure]
