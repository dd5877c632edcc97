"""Translate Gemini content payloads to and from dispatcher records."""

import json
from typing import List, Optional, Sequence, Tuple

from google.genai import types

from tool_dispatch.dispatch_core import ChatMessage, ChatResponse, ProviderToolCall, ToolSpec
from tool_dispatch.dispatch_core import get_logger
from . import schema_sanitizer

logger = get_logger(__name__)

_ROLE_MAP = {"user": "user", "assistant": "model"}


class GeminiProtocolAdapter:
    """Adapter between the Gemini ``generate_content`` API and the dispatch layer."""

    @staticmethod
    def to_chat_response(response: types.GenerateContentResponse) -> ChatResponse:
        """Extract reply text and function calls from the first candidate.

        Gemini delivers call arguments as objects; they are re-encoded as JSON so
        the native dispatcher decodes every provider the same way. Calls without
        an id get ``<name>_<index>``.

        Args:
            response: The content response from Gemini.

        Returns:
            The normalized reply.
        """
        candidates = response.candidates or []
        content = candidates[0].content if candidates else None
        parts = (content.parts if content else None) or []

        texts: List[str] = []
        records: List[ProviderToolCall] = []
        for part in parts:
            if part.function_call is not None and part.function_call.name:
                call = part.function_call
                records.append(
                    ProviderToolCall(
                        id=call.id or f"{call.name}_{len(records)}",
                        name=call.name,
                        arguments=json.dumps(call.args or {}),
                    )
                )
            elif part.text and not part.thought:
                texts.append(part.text)

        return ChatResponse(text="".join(texts) if texts else None, tool_calls=records)

    @staticmethod
    def to_contents(messages: Sequence[ChatMessage]) -> Tuple[Optional[str], List[types.Content]]:
        """Convert dispatcher output into Gemini contents.

        System turns are collected into the system instruction since Gemini
        contents only know the ``user`` and ``model`` roles.

        Returns:
            The system instruction (or None) and the ordered contents.
        """
        system_parts: List[str] = []
        contents: List[types.Content] = []
        for message in messages:
            if message.role == "system":
                system_parts.append(message.content)
                continue
            role = _ROLE_MAP.get(message.role)
            if role is None:
                logger.warning(f"Unknown role '{message.role}' sent to Gemini as 'user'.")
                role = "user"
            contents.append(types.Content(role=role, parts=[types.Part(text=message.content)]))

        system_instruction = "\n\n".join(system_parts) if system_parts else None
        return system_instruction, contents

    @staticmethod
    def to_tool(specs: Sequence[ToolSpec]) -> Optional[types.Tool]:
        """Build a Gemini ``Tool`` declaring every spec, or None without specs."""
        if not specs:
            return None

        declarations = []
        for spec in specs:
            if spec.parameters.get("properties"):
                declarations.append(
                    types.FunctionDeclaration(
                        name=spec.name,
                        description=spec.description,
                        parameters=schema_sanitizer.sanitize(spec.parameters),
                    )
                )
            else:
                declarations.append(types.FunctionDeclaration(name=spec.name, description=spec.description))
        return types.Tool(function_declarations=declarations)
