"""Public exports for the provider-agnostic dispatch core."""

from .logger import get_logger, setup_logging
from .exceptions import (
    ToolDispatchError,
    DispatchInvariantError,
    DialectConfigurationError,
    ToolCatalogError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
)
from .messages import (
    ChatMessage,
    ProviderToolCall,
    ChatResponse,
    AssistantToolCalls,
    ToolResultMessage,
    ToolResults,
    ConversationMessage,
    parse_history,
)
from .tools import ToolSpec, ParsedToolCall, ToolExecutionResult, ToolCatalog
from .parsing import (
    DEFAULT_DIALECTS,
    SPEECH_TOOL_NAME,
    DialectFamily,
    TagDialect,
    TagParser,
    parse_tool_tags,
    validate_dialect_order,
)
from .dispatch import (
    ToolDispatcher,
    TagToolDispatcher,
    NativeToolDispatcher,
    create_dispatcher,
    TOOL_RESULTS_MARKER,
    UNKNOWN_CALL_ID,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "ToolDispatchError",
    "DispatchInvariantError",
    "DialectConfigurationError",
    "ToolCatalogError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ChatMessage",
    "ProviderToolCall",
    "ChatResponse",
    "AssistantToolCalls",
    "ToolResultMessage",
    "ToolResults",
    "ConversationMessage",
    "parse_history",
    "ToolSpec",
    "ParsedToolCall",
    "ToolExecutionResult",
    "ToolCatalog",
    "DEFAULT_DIALECTS",
    "SPEECH_TOOL_NAME",
    "DialectFamily",
    "TagDialect",
    "TagParser",
    "parse_tool_tags",
    "validate_dialect_order",
    "ToolDispatcher",
    "TagToolDispatcher",
    "NativeToolDispatcher",
    "create_dispatcher",
    "TOOL_RESULTS_MARKER",
    "UNKNOWN_CALL_ID",
]
