import logging
import sys
from typing import List

import pytest

from tool_dispatch import (
    AssistantToolCalls,
    ChatMessage,
    ChatResponse,
    NativeToolDispatcher,
    ParsedToolCall,
    ProviderToolCall,
    ToolExecutionResult,
    ToolResultMessage,
    ToolResults,
    ToolSpec,
)


def test_sends_tool_specs(native_dispatcher: NativeToolDispatcher) -> None:
    assert native_dispatcher.should_send_tool_specs() is True


def test_prompt_instructions_are_empty(native_dispatcher: NativeToolDispatcher, tool_specs: List[ToolSpec]) -> None:
    assert native_dispatcher.prompt_instructions(tool_specs) == ""


def test_parse_response_decodes_call_records(native_dispatcher: NativeToolDispatcher) -> None:
    response = ChatResponse(
        text="Searching.",
        tool_calls=[
            ProviderToolCall(id="call_1", name="search", arguments='{"q": "rust"}'),
            ProviderToolCall(id="call_2", name="ping", arguments=""),
        ],
    )

    text, calls = native_dispatcher.parse_response(response)

    assert text == "Searching."
    assert calls == [
        ParsedToolCall(name="search", arguments={"q": "rust"}, call_id="call_1"),
        ParsedToolCall(name="ping", arguments={}, call_id="call_2"),
    ]


def test_parse_response_does_not_scan_text(native_dispatcher: NativeToolDispatcher) -> None:
    reply = '<tool_call>{"name": "search"}</tool_call>'

    text, calls = native_dispatcher.parse_response(ChatResponse(text=reply))

    assert text == reply
    assert calls == []


def test_parse_response_without_text(native_dispatcher: NativeToolDispatcher) -> None:
    text, _ = native_dispatcher.parse_response(ChatResponse(tool_calls=[ProviderToolCall(id="c", name="ping")]))

    assert text == ""


@pytest.mark.parametrize("payload", ["{not json", '{"q": ', "[1, 2]", '"just a string"', "null"])
def test_malformed_arguments_default_to_empty(
    native_dispatcher: NativeToolDispatcher, payload: str, caplog: pytest.LogCaptureFixture
) -> None:
    response = ChatResponse(tool_calls=[ProviderToolCall(id="call_9", name="search", arguments=payload)])

    with caplog.at_level(logging.WARNING, logger="tool_dispatch"):
        _, calls = native_dispatcher.parse_response(response)

    assert calls == [ParsedToolCall(name="search", arguments={}, call_id="call_9")]
    assert any("search" in record.getMessage() for record in caplog.records)
    assert all(record.levelno == logging.WARNING for record in caplog.records)


def test_every_record_yields_a_call(native_dispatcher: NativeToolDispatcher) -> None:
    records = [
        ProviderToolCall(id=f"call_{i}", name=f"tool_{i}", arguments="{broken" if i % 3 == 0 else f'{{"i": {i}}}')
        for i in range(9)
    ]

    _, calls = native_dispatcher.parse_response(ChatResponse(tool_calls=records))

    assert len(calls) == 9
    assert [call.call_id for call in calls] == [record.id for record in records]
    assert [call.arguments for call in calls if call.arguments == {}] == [{}, {}, {}]


def test_empty_arguments_do_not_warn(native_dispatcher: NativeToolDispatcher, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="tool_dispatch"):
        native_dispatcher.parse_response(ChatResponse(tool_calls=[ProviderToolCall(id="c", name="ping", arguments="")]))

    assert caplog.records == []


def test_deeply_nested_arguments_default_to_empty(
    native_dispatcher: NativeToolDispatcher, caplog: pytest.LogCaptureFixture
) -> None:
    records = [
        ProviderToolCall(id="call_1", name="search", arguments="[" * 100_000),
        ProviderToolCall(id="call_2", name="ping", arguments="{}"),
    ]

    with caplog.at_level(logging.WARNING, logger="tool_dispatch"):
        _, calls = native_dispatcher.parse_response(ChatResponse(tool_calls=records))

    assert calls == [
        ParsedToolCall(name="search", arguments={}, call_id="call_1"),
        ParsedToolCall(name="ping", arguments={}, call_id="call_2"),
    ]
    assert "RecursionError" in caplog.text


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
    reason="integer digit limit not enforced",
)
def test_oversized_integer_arguments_default_to_empty(
    native_dispatcher: NativeToolDispatcher, caplog: pytest.LogCaptureFixture
) -> None:
    payload = '{"n": ' + "1" * 5_000 + "}"

    with caplog.at_level(logging.WARNING, logger="tool_dispatch"):
        _, calls = native_dispatcher.parse_response(
            ChatResponse(tool_calls=[ProviderToolCall(id="call_1", name="count", arguments=payload)])
        )

    assert calls == [ParsedToolCall(name="count", arguments={}, call_id="call_1")]
    assert "count" in caplog.text


def test_format_results_keys_by_call_id(native_dispatcher: NativeToolDispatcher) -> None:
    results = [
        ToolExecutionResult(name="search", output="3 hits", success=True, call_id="call_1"),
        ToolExecutionResult(name="shell", output="boom", success=False),
    ]

    message = native_dispatcher.format_results(results)

    assert message == ToolResults(
        results=[
            ToolResultMessage(tool_call_id="call_1", content="3 hits"),
            ToolResultMessage(tool_call_id="unknown", content="boom"),
        ]
    )


class TestToProviderMessages:
    def test_chat_messages_pass_through(self, native_dispatcher: NativeToolDispatcher) -> None:
        history = [ChatMessage.user("hi")]

        assert native_dispatcher.to_provider_messages(history) == history

    def test_assistant_tool_calls_are_summarized(self, native_dispatcher: NativeToolDispatcher) -> None:
        entry = AssistantToolCalls(
            text="Let me look.",
            tool_calls=[
                ProviderToolCall(id="c1", name="search", arguments="{}"),
                ProviderToolCall(id="c2", name="ping", arguments="{}"),
            ],
        )

        messages = native_dispatcher.to_provider_messages([entry])

        assert messages == [
            ChatMessage.assistant("Let me look."),
            ChatMessage.assistant("Tool call: search"),
            ChatMessage.assistant("Tool call: ping"),
        ]

    def test_assistant_without_text_only_lists_calls(self, native_dispatcher: NativeToolDispatcher) -> None:
        entry = AssistantToolCalls(tool_calls=[ProviderToolCall(id="c1", name="search")])

        assert native_dispatcher.to_provider_messages([entry]) == [ChatMessage.assistant("Tool call: search")]

    def test_tool_results_become_one_user_turn(self, native_dispatcher: NativeToolDispatcher) -> None:
        entry = ToolResults(
            results=[
                ToolResultMessage(tool_call_id="c1", content="first"),
                ToolResultMessage(tool_call_id="c2", content="second"),
            ]
        )

        assert native_dispatcher.to_provider_messages([entry]) == [
            ChatMessage.user("Tool result for c1: first\nTool result for c2: second\n")
        ]

    def test_full_turn_round_trip(self, native_dispatcher: NativeToolDispatcher) -> None:
        response = ChatResponse(
            text=None,
            tool_calls=[
                ProviderToolCall(id="c1", name="search", arguments='{"q": "x"}'),
                ProviderToolCall(id="c2", name="ping", arguments="{oops"),
            ],
        )
        _, calls = native_dispatcher.parse_response(response)
        results = [
            ToolExecutionResult(name=call.name, output=f"out-{call.name}", success=True, call_id=call.call_id)
            for call in calls
        ]
        history = [
            ChatMessage.user("go"),
            AssistantToolCalls.from_response(response),
            native_dispatcher.format_results(results),
        ]

        messages = native_dispatcher.to_provider_messages(history)

        assert [m.role for m in messages] == ["user", "assistant", "assistant", "user"]
        rendered = messages[-1].content
        assert rendered.count("out-search") == 1
        assert rendered.count("out-ping") == 1
        assert rendered.index("c1") < rendered.index("c2")
