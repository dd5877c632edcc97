"""Expose the Gemini protocol adapter."""

from .adapter import GeminiProtocolAdapter

__all__ = ["GeminiProtocolAdapter"]
