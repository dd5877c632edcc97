"""Translate OpenAI chat completion payloads to and from dispatcher records."""

from typing import Any, Dict, List, Sequence

from openai.types.chat import ChatCompletion, ChatCompletionToolParam

from tool_dispatch.dispatch_core import ChatMessage, ChatResponse, ProviderToolCall, ToolSpec
from tool_dispatch.dispatch_core.tools import empty_object_schema


class OpenAIProtocolAdapter:
    """Adapter between the OpenAI chat completions API and the dispatch layer."""

    @staticmethod
    def to_chat_response(completion: ChatCompletion) -> ChatResponse:
        """Extract the reply text and function tool calls of a completion.

        Args:
            completion: The chat completion returned by OpenAI.

        Returns:
            A ``ChatResponse`` whose call records keep the raw argument strings.
        """
        if not completion.choices:
            return ChatResponse()

        message = completion.choices[0].message
        records = []
        for tool_call in message.tool_calls or []:
            # Custom (non-function) tool calls carry no JSON arguments.
            if tool_call.type != "function":
                continue
            records.append(
                ProviderToolCall(
                    id=tool_call.id,
                    name=tool_call.function.name,
                    arguments=tool_call.function.arguments or "",
                )
            )
        return ChatResponse(text=message.content, tool_calls=records)

    @staticmethod
    def to_messages(messages: Sequence[ChatMessage]) -> List[Dict[str, Any]]:
        """Convert dispatcher output into OpenAI message dictionaries."""
        return [{"role": message.role, "content": message.content} for message in messages]

    @staticmethod
    def to_tool_params(specs: Sequence[ToolSpec]) -> List[ChatCompletionToolParam]:
        """Build the ``tools`` parameter for a chat completion request.

        Args:
            specs: Capability descriptors to offer to the model.

        Returns:
            Function tool definitions. A spec without parameters gets the empty object schema.
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": spec.name,
                    "description": spec.description,
                    "parameters": spec.parameters or empty_object_schema(),
                },
            }
            for spec in specs
        ]
