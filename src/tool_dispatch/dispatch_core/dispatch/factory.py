"""Select the dispatcher variant for a provider."""

from typing import Any

from .base import ToolDispatcher
from .native_dispatcher import NativeToolDispatcher
from .tag_dispatcher import TagToolDispatcher


def create_dispatcher(native_tool_calling: bool, **options: Any) -> ToolDispatcher:
    """Build the dispatcher for a conversation.

    Args:
        native_tool_calling: Whether the provider exposes native function calling.
        **options: Keyword options for ``TagToolDispatcher`` (``dialects``,
            ``speech_tool_name``). Ignored for the native variant.

    Returns:
        A ``NativeToolDispatcher`` or a ``TagToolDispatcher``.
    """
    if native_tool_calling:
        return NativeToolDispatcher()
    return TagToolDispatcher(**options)
