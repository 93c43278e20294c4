# ChatGenerator is the single integration point with the provider:
# - accepts any model client (OpenAI, Echo)
# - merges request options over the YAML defaults
# - turns every provider exception into a GenerationFailure value

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional, Dict, Any

import yaml

from .types import Message, ModelParams, GenerationResult, GenerationSuccess, GenerationFailure

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("config.yaml")

DEFAULTS: Dict[str, Any] = {
    "model": "gpt-3.5-turbo",
    "temperature": 0.7,
    "max_tokens": 500,
}


class ChatGenerator:
    def __init__(self, model_client, config_path: Optional[str] = None):
        self.model_client = model_client
        self.config_path = str(config_path or DEFAULT_CONFIG_PATH)
        self.cfg = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        cfg = dict(DEFAULTS)
        if not os.path.exists(self.config_path):
            return cfg
        with open(self.config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        cfg.update({k: v for k, v in loaded.items() if k in DEFAULTS and v is not None})
        return cfg

    def resolve_params(self, options: Optional[ModelParams] = None) -> ModelParams:
        """Overlay the options the caller actually set on top of the defaults."""
        options = options or ModelParams()
        return ModelParams(
            model=options.model if options.model is not None else self.cfg["model"],
            temperature=options.temperature if options.temperature is not None else self.cfg["temperature"],
            max_tokens=options.max_tokens if options.max_tokens is not None else self.cfg["max_tokens"],
        )

    def generate(self, messages: List[Message], options: Optional[ModelParams] = None) -> GenerationResult:
        """Issue one provider call. Never raises."""
        params = self.resolve_params(options)
        try:
            text, raw = self.model_client.generate(messages, params)
        except Exception as e:
            code = getattr(e, "code", None) or "UNKNOWN_ERROR"
            logger.error("Provider call failed (%s, model=%s): %s", code, params.model, e)
            return GenerationFailure(message=str(e), code=str(code))
        return GenerationSuccess(text=text or "", raw=raw or {})
