"""Provider-agnostic conversation models shared by both dispatchers."""

from typing import Annotated, Any, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChatMessage(_FrozenModel):
    """A single plain chat turn.

    Attributes:
        role: Role associated with the message (system, user or assistant).
        content: Text payload of the message.
    """

    kind: Literal["chat"] = "chat"
    role: str
    content: str

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content)


class ProviderToolCall(_FrozenModel):
    """A structured call record delivered by a provider's native tool channel.

    Attributes:
        id: Provider-assigned call identifier.
        name: Name of the requested tool.
        arguments: Encoded JSON document, exactly as the provider sent it.
    """

    id: str
    name: str = Field(min_length=1)
    arguments: str = ""


class ChatResponse(_FrozenModel):
    """A model reply as handed to a dispatcher.

    Attributes:
        text: Narrative text of the reply, if any.
        tool_calls: Native call records already separated by the provider integration.
    """

    text: Optional[str] = None
    tool_calls: List[ProviderToolCall] = Field(default_factory=list)

    def text_or_empty(self) -> str:
        return self.text or ""

    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


class AssistantToolCalls(_FrozenModel):
    """An assistant turn that issued native tool calls."""

    kind: Literal["assistant_tool_calls"] = "assistant_tool_calls"
    text: Optional[str] = None
    tool_calls: List[ProviderToolCall] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: ChatResponse) -> "AssistantToolCalls":
        """Record a native reply in canonical history."""
        return cls(text=response.text, tool_calls=list(response.tool_calls))


class ToolResultMessage(_FrozenModel):
    """Output of one tool call, keyed by the call identifier."""

    tool_call_id: str
    content: str


class ToolResults(_FrozenModel):
    """An ordered batch of tool results returned in a single turn."""

    kind: Literal["tool_results"] = "tool_results"
    results: List[ToolResultMessage] = Field(default_factory=list)


ConversationMessage = Annotated[
    Union[ChatMessage, AssistantToolCalls, ToolResults],
    Field(discriminator="kind"),
]

_HISTORY_ADAPTER: TypeAdapter[List[ConversationMessage]] = TypeAdapter(List[ConversationMessage])


def parse_history(raw_history: Iterable[Any]) -> List[ConversationMessage]:
    """Validate a serialized history (dicts or models) into canonical messages.

    Args:
        raw_history: Messages as produced by ``model_dump()`` or already-built models.

    Returns:
        The canonical conversation history in the same order.
    """
    return _HISTORY_ADAPTER.validate_python(list(raw_history))
