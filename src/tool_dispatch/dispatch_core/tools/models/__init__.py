"""Tool-related data models."""

from .models import ToolSpec, empty_object_schema
from .tool_call import ParsedToolCall, ToolExecutionResult

__all__ = ["ToolSpec", "empty_object_schema", "ParsedToolCall", "ToolExecutionResult"]
