import dataclasses

import pytest
from pydantic import ValidationError

from tool_dispatch import (
    AssistantToolCalls,
    ChatMessage,
    ChatResponse,
    ParsedToolCall,
    ProviderToolCall,
    TagToolDispatcher,
    ToolExecutionResult,
    ToolResultMessage,
    ToolResults,
)
from tool_dispatch.dispatch_core import DispatchInvariantError, parse_history


def test_chat_message_constructors() -> None:
    assert ChatMessage.system("s") == ChatMessage(role="system", content="s")
    assert ChatMessage.user("u").role == "user"
    assert ChatMessage.assistant("a").role == "assistant"


def test_messages_are_immutable() -> None:
    message = ChatMessage.user("hi")

    with pytest.raises(ValidationError):
        message.content = "changed"  # type: ignore[misc]


def test_chat_response_helpers() -> None:
    assert ChatResponse().text_or_empty() == ""
    assert not ChatResponse(text="hi").has_tool_calls()
    assert ChatResponse(tool_calls=[ProviderToolCall(id="c", name="ping")]).has_tool_calls()


def test_provider_call_requires_a_name() -> None:
    with pytest.raises(ValidationError):
        ProviderToolCall(id="c", name="")


def test_assistant_tool_calls_from_response() -> None:
    response = ChatResponse(text="ok", tool_calls=[ProviderToolCall(id="c1", name="ping", arguments="{}")])

    entry = AssistantToolCalls.from_response(response)

    assert entry.text == "ok"
    assert entry.tool_calls == response.tool_calls


def test_parse_history_restores_serialized_entries() -> None:
    history = [
        ChatMessage.user("go"),
        AssistantToolCalls(text=None, tool_calls=[ProviderToolCall(id="c1", name="ping")]),
        ToolResults(results=[ToolResultMessage(tool_call_id="c1", content="pong")]),
    ]

    restored = parse_history([entry.model_dump() for entry in history])

    assert restored == history


def test_parse_history_rejects_unknown_kinds() -> None:
    with pytest.raises(ValidationError):
        parse_history([{"kind": "mystery", "content": "?"}])


def test_unsupported_history_entry_raises() -> None:
    with pytest.raises(DispatchInvariantError):
        TagToolDispatcher().to_provider_messages(["not a message"])  # type: ignore[list-item]


class TestParsedToolCall:
    def test_defaults(self) -> None:
        call = ParsedToolCall(name="ping")

        assert call.arguments == {}
        assert call.call_id is None

    def test_is_frozen(self) -> None:
        call = ParsedToolCall(name="ping")

        with pytest.raises(dataclasses.FrozenInstanceError):
            call.name = "pong"  # type: ignore[misc]

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(DispatchInvariantError):
            ParsedToolCall(name="")

    def test_rejects_non_object_arguments(self) -> None:
        with pytest.raises(DispatchInvariantError):
            ParsedToolCall(name="ping", arguments=["a"])  # type: ignore[arg-type]


def test_execution_result_status() -> None:
    assert ToolExecutionResult(name="a", output="", success=True).status == "ok"
    assert ToolExecutionResult(name="a", output="", success=False).status == "error"
