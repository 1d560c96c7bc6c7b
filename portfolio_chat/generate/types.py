# Typed dataclasses shared across the generate modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass(frozen=True)
class GenerationParams:
    """Provider sampling parameters per request."""
    max_output_tokens: int = 1024
    temperature: float = 0.7


@dataclass(frozen=True)
class GenerationRequest:
    """Outbound request: system instruction, one user message, parameters."""
    system_instruction: str
    message: str
    params: GenerationParams = field(default_factory=GenerationParams)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": self.message}]}],
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
            "generationConfig": {
                "maxOutputTokens": self.params.max_output_tokens,
                "temperature": self.params.temperature,
            },
        }


@dataclass
class ChatResponse:
    """Final response from the generator."""
    text: str
    meta: Dict[str, Any]
