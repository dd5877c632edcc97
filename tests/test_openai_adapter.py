from typing import Any, Dict, List
from unittest.mock import MagicMock

from openai.types.chat import ChatCompletion

from tool_dispatch import ChatMessage, NativeToolDispatcher, OpenAIProtocolAdapter, ParsedToolCall, ToolSpec


def _completion(message: Dict[str, Any]) -> ChatCompletion:
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o-mini",
            "choices": [{"index": 0, "finish_reason": "tool_calls", "message": message}],
        }
    )


def test_to_chat_response_keeps_raw_arguments() -> None:
    completion = _completion(
        {
            "role": "assistant",
            "content": None,
            "tool_calls": [
                {"id": "call_1", "type": "function", "function": {"name": "search", "arguments": '{"q": "rust"}'}},
                {"id": "call_2", "type": "function", "function": {"name": "ping", "arguments": ""}},
            ],
        }
    )

    response = OpenAIProtocolAdapter.to_chat_response(completion)

    assert response.text is None
    assert [(c.id, c.name, c.arguments) for c in response.tool_calls] == [
        ("call_1", "search", '{"q": "rust"}'),
        ("call_2", "ping", ""),
    ]


def test_completion_feeds_native_dispatcher() -> None:
    completion = _completion(
        {
            "role": "assistant",
            "content": "Looking it up.",
            "tool_calls": [
                {"id": "call_1", "type": "function", "function": {"name": "search", "arguments": "{broken"}},
            ],
        }
    )

    text, calls = NativeToolDispatcher().parse_response(OpenAIProtocolAdapter.to_chat_response(completion))

    assert text == "Looking it up."
    assert calls == [ParsedToolCall(name="search", arguments={}, call_id="call_1")]


def test_plain_reply() -> None:
    response = OpenAIProtocolAdapter.to_chat_response(_completion({"role": "assistant", "content": "Hi"}))

    assert response.text == "Hi"
    assert response.tool_calls == []


def test_to_messages() -> None:
    messages = [ChatMessage.system("sys"), ChatMessage.user("hi")]

    assert OpenAIProtocolAdapter.to_messages(messages) == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "hi"},
    ]


def test_to_tool_params(tool_specs: List[ToolSpec]) -> None:
    params = OpenAIProtocolAdapter.to_tool_params(tool_specs)

    assert params[0] == {
        "type": "function",
        "function": {"name": "search", "description": "Search the web.", "parameters": tool_specs[0].parameters},
    }
    assert params[1]["function"]["parameters"] == {"type": "object", "properties": {}}


def test_non_function_tool_calls_are_skipped() -> None:
    custom_call = MagicMock(type="custom", id="call_0")
    function_call = MagicMock(type="function", id="call_1")
    function_call.function.name = "ping"
    function_call.function.arguments = None
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = "ok"
    completion.choices[0].message.tool_calls = [custom_call, function_call]

    response = OpenAIProtocolAdapter.to_chat_response(completion)

    assert [(c.id, c.name, c.arguments) for c in response.tool_calls] == [("call_1", "ping", "")]


def test_completion_without_choices() -> None:
    completion = MagicMock()
    completion.choices = []

    assert OpenAIProtocolAdapter.to_chat_response(completion).tool_calls == []
