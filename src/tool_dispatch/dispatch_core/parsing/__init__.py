"""Tag dialect table and the parser that recovers tool calls from free text."""

from .dialects import (
    DEFAULT_DIALECTS,
    SPEECH_ALIASES,
    SPEECH_TOOL_NAME,
    DialectFamily,
    TagDialect,
    closed,
    open_ended,
    validate_dialect_order,
)
from .tag_parser import TagParser, parse_tool_tags

__all__ = [
    "DEFAULT_DIALECTS",
    "SPEECH_ALIASES",
    "SPEECH_TOOL_NAME",
    "DialectFamily",
    "TagDialect",
    "closed",
    "open_ended",
    "validate_dialect_order",
    "TagParser",
    "parse_tool_tags",
]
