from tool_dispatch import ChatResponse, NativeToolDispatcher, TagToolDispatcher, create_dispatcher
from tool_dispatch.dispatch_core.parsing import DialectFamily, closed


def test_native_provider_gets_native_dispatcher() -> None:
    dispatcher = create_dispatcher(native_tool_calling=True)

    assert isinstance(dispatcher, NativeToolDispatcher)
    assert dispatcher.should_send_tool_specs()


def test_text_provider_gets_tag_dispatcher() -> None:
    dispatcher = create_dispatcher(native_tool_calling=False)

    assert isinstance(dispatcher, TagToolDispatcher)
    assert not dispatcher.should_send_tool_specs()


def test_tag_dispatcher_options_are_forwarded() -> None:
    dispatcher = create_dispatcher(
        native_tool_calling=False,
        dialects=[closed("speak", DialectFamily.SPEECH)],
        speech_tool_name="voice",
    )

    text, calls = dispatcher.parse_response(ChatResponse(text="<speak>Hello</speak>"))

    assert text == ""
    assert [(call.name, call.arguments) for call in calls] == [("voice", {"text": "Hello"})]
