# Dummy model client for local dev and testing without API calls.
# Returns a raw dict shaped like a chat.completion so every envelope renders.

import time
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        text = f"[ECHO RESPONSE]\n{user_inputs[-1] if user_inputs else '(no user input)'}"
        raw = {
            "id": "echo-dev",
            "object": "chat.completion",
            "created": int(time.time()),
            "model": params.model or self.model,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": text},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"temp": params.temperature, "max_tokens": params.max_tokens},
        }
        return text, raw
