"""Tool Dispatch - turn model replies into tool calls and tool results back into messages."""

from .dispatch_core import (
    ChatMessage,
    ChatResponse,
    ProviderToolCall,
    AssistantToolCalls,
    ToolResultMessage,
    ToolResults,
    ConversationMessage,
    ParsedToolCall,
    ToolExecutionResult,
    ToolSpec,
    ToolCatalog,
    ToolDispatcher,
    TagToolDispatcher,
    NativeToolDispatcher,
    create_dispatcher,
    TagParser,
    parse_tool_tags,
)
from .dispatch_impl import GeminiProtocolAdapter, OpenAIProtocolAdapter

__all__ = [
    "ChatMessage",
    "ChatResponse",
    "ProviderToolCall",
    "AssistantToolCalls",
    "ToolResultMessage",
    "ToolResults",
    "ConversationMessage",
    "ParsedToolCall",
    "ToolExecutionResult",
    "ToolSpec",
    "ToolCatalog",
    "ToolDispatcher",
    "TagToolDispatcher",
    "NativeToolDispatcher",
    "create_dispatcher",
    "TagParser",
    "parse_tool_tags",
    "GeminiProtocolAdapter",
    "OpenAIProtocolAdapter",
]
