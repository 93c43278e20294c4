# Client for the OpenAI Chat Completions API.
# Exposes generate(messages, params) -> (text, raw); errors propagate to the caller.

from typing import List, Tuple, Dict, Any, Optional
from openai import OpenAI
from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(self, api_key: Optional[str] = None, timeout: float = 60.0):
        self.model = "gpt-3.5-turbo"
        # one attempt per request; the gateway never retries
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [m.to_dict() for m in messages]
        resp = self.client.chat.completions.create(
            model=params.model or self.model,
            messages=formatted,
            temperature=params.temperature,
            max_tokens=params.max_tokens,
        )
        return self._first_choice_text(resp), resp.model_dump(mode="json")

    @staticmethod
    def _first_choice_text(resp) -> str:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None) or ""
