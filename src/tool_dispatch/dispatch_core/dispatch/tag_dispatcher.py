"""Dispatcher for models that embed tool calls as tags in their reply text."""

from typing import List, Optional, Sequence, Tuple

from ..messages import AssistantToolCalls, ChatMessage, ChatResponse, ConversationMessage, ToolResults
from ..parsing import SPEECH_TOOL_NAME, TagDialect, TagParser
from ..tools.models import ParsedToolCall, ToolExecutionResult, ToolSpec
from .base import ToolDispatcher

TOOL_RESULTS_MARKER = "[Tool results]"

PROTOCOL_PREAMBLE = (
    "## Tool Use Protocol\n\n"
    "To use a tool, wrap a JSON object in <tool_call></tool_call> tags:\n\n"
    "```\n"
    "<tool_call>\n"
    '{"name": "tool_name", "arguments": {"param": "value"}}\n'
    "</tool_call>\n"
    "```\n\n"
    "### Available Tools\n\n"
)


class TagToolDispatcher(ToolDispatcher):
    """Text protocol: calls, specs and results all travel inside message text."""

    def __init__(
        self,
        dialects: Optional[Sequence[TagDialect]] = None,
        speech_tool_name: str = SPEECH_TOOL_NAME,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            dialects: Ordered dialect table for the parser. Defaults to the built-in table.
            speech_tool_name: Capability name that speech alias tags resolve to.
        """
        self._parser = TagParser(dialects=dialects, speech_tool_name=speech_tool_name)

    def parse_response(self, response: ChatResponse) -> Tuple[str, List[ParsedToolCall]]:
        return self._parser.parse(response.text_or_empty())

    def parse_text(self, text: str) -> Tuple[str, List[ParsedToolCall]]:
        """Parse a bare reply string."""
        return self._parser.parse(text)

    def format_results(self, results: Sequence[ToolExecutionResult]) -> ConversationMessage:
        content = "".join(
            f'<tool_result name="{result.name}" status="{result.status}">\n{result.output}\n</tool_result>\n'
            for result in results
        )
        return ChatMessage.user(f"{TOOL_RESULTS_MARKER}\n{content}")

    def prompt_instructions(self, tools: Sequence[ToolSpec]) -> str:
        lines = [
            f"- **{tool.name}**: {tool.description}\n  Parameters: `{tool.parameters_json()}`\n" for tool in tools
        ]
        return PROTOCOL_PREAMBLE + "".join(lines)

    def should_send_tool_specs(self) -> bool:
        return False

    def _render_assistant_tool_calls(self, entry: AssistantToolCalls) -> List[ChatMessage]:
        # The calls are already spelled out as tags inside the text.
        return [ChatMessage.assistant(entry.text or "")]

    def _render_tool_results(self, entry: ToolResults) -> List[ChatMessage]:
        content = "".join(
            f'<tool_result id="{result.tool_call_id}">\n{result.content}\n</tool_result>\n'
            for result in entry.results
        )
        return [ChatMessage.user(f"{TOOL_RESULTS_MARKER}\n{content}")]
