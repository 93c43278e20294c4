# Request envelope variants, one per family of entry points.
# Fields stay permissive (Any); the normalizer decides what is valid
# so every route keeps its own error message.

from __future__ import annotations
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PromptOnly(BaseModel):
    """Body of /completion and /simple-prompt."""
    model_config = ConfigDict(extra="ignore")

    prompt: Any = None
    model: Any = None
    temperature: Any = None
    max_tokens: Any = Field(default=None, alias="maxTokens")


class MessageList(BaseModel):
    """Body of /chat."""
    model_config = ConfigDict(extra="ignore")

    messages: Any = None
    model: Any = None
    temperature: Any = None
    max_tokens: Any = Field(default=None, alias="maxTokens")


class FullPassthrough(BaseModel):
    """Body of /full-prompt: close to a raw chat.completions request."""
    model_config = ConfigDict(extra="ignore")

    model: Any = None
    prompt: Any = None
    messages: Any = None
    temperature: Any = None
    max_tokens: Any = None
    max_tokens_camel: Any = Field(default=None, alias="maxTokens")

    @model_validator(mode="after")
    def resolve_max_tokens(self) -> "FullPassthrough":
        # snake_case wins; camelCase is the fallback
        self.max_tokens = self.max_tokens or self.max_tokens_camel or None
        return self


RequestEnvelope = Union[PromptOnly, MessageList, FullPassthrough]
