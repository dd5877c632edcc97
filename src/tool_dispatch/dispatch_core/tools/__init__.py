from .models import ToolSpec, ParsedToolCall, ToolExecutionResult, empty_object_schema
from .catalog import ToolCatalog
from .schema import build_parameters_schema

__all__ = [
    "ToolSpec",
    "ParsedToolCall",
    "ToolExecutionResult",
    "empty_object_schema",
    "ToolCatalog",
    "build_parameters_schema",
]
