"""Dispatcher for providers with a native function-calling channel."""

import json
from typing import Any, Dict, List, Sequence, Tuple

from ..logger import get_logger
from ..messages import (
    AssistantToolCalls,
    ChatMessage,
    ChatResponse,
    ConversationMessage,
    ProviderToolCall,
    ToolResultMessage,
    ToolResults,
)
from ..tools.models import ParsedToolCall, ToolExecutionResult, ToolSpec
from .base import ToolDispatcher

logger = get_logger(__name__)

UNKNOWN_CALL_ID = "unknown"


class NativeToolDispatcher(ToolDispatcher):
    """Native protocol: tool specs, calls and results travel out of band."""

    def parse_response(self, response: ChatResponse) -> Tuple[str, List[ParsedToolCall]]:
        """Convert the provider's call records into parsed tool calls.

        A record whose arguments cannot be decoded still yields a call, with an
        empty argument document.
        """
        calls = [
            ParsedToolCall(name=record.name, arguments=self._decode_arguments(record), call_id=record.id)
            for record in response.tool_calls
        ]
        return response.text_or_empty(), calls

    def format_results(self, results: Sequence[ToolExecutionResult]) -> ConversationMessage:
        return ToolResults(
            results=[
                ToolResultMessage(tool_call_id=result.call_id or UNKNOWN_CALL_ID, content=result.output)
                for result in results
            ]
        )

    def prompt_instructions(self, tools: Sequence[ToolSpec]) -> str:
        return ""

    def should_send_tool_specs(self) -> bool:
        return True

    def _render_assistant_tool_calls(self, entry: AssistantToolCalls) -> List[ChatMessage]:
        messages = []
        if entry.text is not None:
            messages.append(ChatMessage.assistant(entry.text))
        for call in entry.tool_calls:
            messages.append(ChatMessage.assistant(f"Tool call: {call.name}"))
        return messages

    def _render_tool_results(self, entry: ToolResults) -> List[ChatMessage]:
        content = "".join(f"Tool result for {result.tool_call_id}: {result.content}\n" for result in entry.results)
        return [ChatMessage.user(content)]

    @staticmethod
    def _decode_arguments(record: ProviderToolCall) -> Dict[str, Any]:
        if not record.arguments.strip():
            return {}

        # ValueError also covers oversized integer literals; deep nesting raises RecursionError.
        try:
            decoded = json.loads(record.arguments)
        except (ValueError, RecursionError) as exc:
            logger.warning(
                f"Failed to parse native tool call arguments for '{record.name}' as JSON "
                f"({type(exc).__name__}: {exc}); defaulting to empty object."
            )
            return {}

        if not isinstance(decoded, dict):
            logger.warning(
                f"Native tool call arguments for '{record.name}' decoded to {type(decoded).__name__}, "
                "not an object; defaulting to empty object."
            )
            return {}
        return decoded
