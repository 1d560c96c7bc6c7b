# Generator package

# Exposes the generator, its types and the static profile context.

from .generator import ChatGenerator
from .types import ChatResponse, GenerationParams, GenerationRequest
from .prompts import PROFILE_CONTEXT, FALLBACK_REPLY
from .clients.gemini_client import GeminiClient

__all__ = [
    "ChatGenerator",
    "ChatResponse",
    "GenerationParams",
    "GenerationRequest",
    "PROFILE_CONTEXT",
    "FALLBACK_REPLY",
    "GeminiClient",
]
