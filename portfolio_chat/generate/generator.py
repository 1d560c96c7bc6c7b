# ChatGenerator turns a user message into a provider request:
# - system instruction is injected, never read from module scope
# - parameters come from generate/config.yaml
# - an empty or missing reply becomes FALLBACK_REPLY

from __future__ import annotations
import os
from functools import lru_cache

import yaml

from .types import ChatResponse, GenerationParams, GenerationRequest
from .prompts import FALLBACK_REPLY

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


@lru_cache(maxsize=4)
def load_generation_config(path: str = DEFAULT_CONFIG_PATH) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ChatGenerator:
    def __init__(self, model_client, system_instruction: str, config_path: str = DEFAULT_CONFIG_PATH):
        self.model_client = model_client
        self.system_instruction = system_instruction
        self.config_path = config_path
        self.cfg = load_generation_config(config_path)

    def _params(self) -> GenerationParams:
        return GenerationParams(
            max_output_tokens=int(self.cfg.get("max_output_tokens", 1024)),
            temperature=float(self.cfg.get("temperature", 0.7)),
        )

    def build_request(self, user_message: str) -> GenerationRequest:
        """Compose a fresh outbound request for one message."""
        return GenerationRequest(
            system_instruction=self.system_instruction,
            message=user_message,
            params=self._params(),
        )

    def chat(self, user_message: str) -> ChatResponse:
        """Main entry point for generation."""
        request = self.build_request(user_message)
        text, meta = self.model_client.generate(request)
        if not isinstance(text, str) or not text:
            meta = {**meta, "fallback": True}
            text = FALLBACK_REPLY
        return ChatResponse(text=text, meta=meta)
