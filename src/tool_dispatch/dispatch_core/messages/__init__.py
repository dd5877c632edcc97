"""Expose the canonical conversation models used by the dispatchers."""

from .models import (
    ChatMessage,
    ProviderToolCall,
    ChatResponse,
    AssistantToolCalls,
    ToolResultMessage,
    ToolResults,
    ConversationMessage,
    parse_history,
)

__all__ = [
    "ChatMessage",
    "ProviderToolCall",
    "ChatResponse",
    "AssistantToolCalls",
    "ToolResultMessage",
    "ToolResults",
    "ConversationMessage",
    "parse_history",
]
