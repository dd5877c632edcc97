"""Expose the OpenAI protocol adapter."""

from .adapter import OpenAIProtocolAdapter

__all__ = ["OpenAIProtocolAdapter"]
