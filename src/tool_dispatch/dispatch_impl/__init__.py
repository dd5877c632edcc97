"""Provider protocol adapters feeding the dispatchers."""

from .gemini import GeminiProtocolAdapter
from .openai_api import OpenAIProtocolAdapter

__all__ = ["GeminiProtocolAdapter", "OpenAIProtocolAdapter"]
