"""Core abstraction shared by the text-protocol and native dispatchers."""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..exceptions import DispatchInvariantError
from ..messages import AssistantToolCalls, ChatMessage, ChatResponse, ConversationMessage, ToolResults
from ..tools.models import ParsedToolCall, ToolExecutionResult, ToolSpec


class ToolDispatcher(ABC):
    """Translate between model replies, tool results and the active wire protocol.

    Exactly two variants exist: ``TagToolDispatcher`` for models that embed calls
    in text, and ``NativeToolDispatcher`` for providers with a function-calling
    channel. Dispatchers hold no conversation state; one instance can serve any
    number of concurrent conversations.
    """

    @abstractmethod
    def parse_response(self, response: ChatResponse) -> Tuple[str, List[ParsedToolCall]]:
        """Split a model reply into narrative text and tool calls.

        Args:
            response: The reply as delivered by the provider integration.

        Returns:
            The narrative text and the tool calls in the order they were issued.
        """
        pass

    @abstractmethod
    def format_results(self, results: Sequence[ToolExecutionResult]) -> ConversationMessage:
        """Fold a batch of execution results into one history entry."""
        pass

    @abstractmethod
    def prompt_instructions(self, tools: Sequence[ToolSpec]) -> str:
        """Render the tool-use instructions to inject into the model's system prompt."""
        pass

    @abstractmethod
    def should_send_tool_specs(self) -> bool:
        """Whether tool specs travel through the provider's native tool channel."""
        pass

    def to_provider_messages(self, history: Sequence[ConversationMessage]) -> List[ChatMessage]:
        """Render canonical history as the ordered turns the active protocol expects.

        Every entry yields at least one turn and the order is preserved.

        Args:
            history: The canonical conversation, oldest entry first.

        Returns:
            The provider-level chat turns.

        Raises:
            DispatchInvariantError: If the history contains an entry of unknown shape.
        """
        messages: List[ChatMessage] = []
        for entry in history:
            if isinstance(entry, ChatMessage):
                messages.append(entry)
            elif isinstance(entry, AssistantToolCalls):
                messages.extend(self._render_assistant_tool_calls(entry))
            elif isinstance(entry, ToolResults):
                messages.extend(self._render_tool_results(entry))
            else:
                raise DispatchInvariantError(f"Unsupported conversation entry: {type(entry).__name__}")
        return messages

    @abstractmethod
    def _render_assistant_tool_calls(self, entry: AssistantToolCalls) -> List[ChatMessage]:
        pass

    @abstractmethod
    def _render_tool_results(self, entry: ToolResults) -> List[ChatMessage]:
        pass
