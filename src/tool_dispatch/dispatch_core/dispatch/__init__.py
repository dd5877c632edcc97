"""The dispatcher abstraction and its two protocol variants."""

from .base import ToolDispatcher
from .tag_dispatcher import TagToolDispatcher, TOOL_RESULTS_MARKER, PROTOCOL_PREAMBLE
from .native_dispatcher import NativeToolDispatcher, UNKNOWN_CALL_ID
from .factory import create_dispatcher

__all__ = [
    "ToolDispatcher",
    "TagToolDispatcher",
    "NativeToolDispatcher",
    "create_dispatcher",
    "TOOL_RESULTS_MARKER",
    "PROTOCOL_PREAMBLE",
    "UNKNOWN_CALL_ID",
]
