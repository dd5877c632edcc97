"""Recover tool calls embedded as pseudo-tags in free-form model replies.

The parser makes a single left-to-right pass. At every step it selects the
first dialect of the table whose open marker still occurs in the remaining
text, keeps the text in front of it as narrative, interprets the tag content
according to the dialect family and moves the cursor past the tag. Nothing in
here raises on malformed input: content that cannot be resolved into a call
is kept as narrative text.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..logger import get_logger
from ..tools.models import ParsedToolCall
from .dialects import DEFAULT_DIALECTS, SPEECH_TOOL_NAME, DialectFamily, TagDialect, validate_dialect_order

logger = get_logger(__name__)

_ATTRIBUTE_PATTERN = re.compile(r"""([A-Za-z_][\w\-.:]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][\w\-.:]*$")
_PARAMETER_PATTERN = re.compile(
    r"""<parameter\s+name\s*=\s*["']([^"']+)["']\s*>(.*?)</parameter>""", re.DOTALL | re.IGNORECASE
)
_QUOTE_CHARS = "\"'"

# Cached position meaning "this marker does not occur in the rest of the text".
_ABSENT = -1


@dataclass(frozen=True)
class _TagMatch:
    """One matched tag: its dialect, opening-tag attribute text and body."""

    dialect: TagDialect
    attributes: str
    body: str
    end: int


class TagParser:
    """Split a model reply into narrative text and tag-encoded tool calls.

    Instances are immutable after construction and can be shared between threads.
    """

    def __init__(
        self,
        dialects: Optional[Sequence[TagDialect]] = None,
        speech_tool_name: str = SPEECH_TOOL_NAME,
    ) -> None:
        """Initialize the parser.

        Args:
            dialects: Ordered dialect table. Defaults to ``DEFAULT_DIALECTS``.
            speech_tool_name: Canonical capability name every speech alias maps to.

        Raises:
            DialectConfigurationError: If the dialect table breaks marker precedence.
        """
        table = tuple(dialects) if dialects is not None else DEFAULT_DIALECTS
        validate_dialect_order(table)
        self._dialects: Tuple[TagDialect, ...] = table
        self._speech_tool_name = speech_tool_name

    @property
    def dialects(self) -> Tuple[TagDialect, ...]:
        return self._dialects

    def parse(self, text: str) -> Tuple[str, List[ParsedToolCall]]:
        """Extract narrative text and tool calls from a reply.

        Args:
            text: Raw reply text.

        Returns:
            The narrative fragments joined by newlines, and the tool calls in encounter order.
        """
        fragments: List[str] = []
        calls: List[ParsedToolCall] = []
        positions: List[Optional[int]] = [None] * len(self._dialects)
        closes: Dict[TagDialect, int] = {}
        cursor = 0

        while cursor < len(text):
            located = self._locate(text, cursor, positions)
            if located is None:
                _append_fragment(fragments, text[cursor:])
                break

            dialect, start = located
            _append_fragment(fragments, text[cursor:start])
            tag = self._read_tag(text, dialect, start, closes)

            if dialect.family is DialectFamily.TOOL:
                call = self._extract_tool_call(tag)
                if call is None:
                    logger.debug(f"Content of '{dialect.open_marker}' is not a tool call; keeping it as text.")
                    _append_fragment(fragments, _fallback_text(tag))
                else:
                    calls.append(call)
            elif dialect.family is DialectFamily.SPEECH:
                calls.append(self._extract_speech_call(tag))
            else:
                _append_fragment(fragments, _fallback_text(tag))

            cursor = tag.end

        return "\n".join(fragments), calls

    def _locate(self, text: str, cursor: int, positions: List[Optional[int]]) -> Optional[Tuple[TagDialect, int]]:
        """Pick the first dialect in table order whose open marker occurs at or after ``cursor``."""
        for index, dialect in enumerate(self._dialects):
            cached = positions[index]
            if cached == _ABSENT:
                continue
            if cached is None or cached < cursor:
                cached = _find_open_marker(text, dialect, cursor)
                positions[index] = cached
            if cached != _ABSENT:
                return dialect, cached
        return None

    @staticmethod
    def _read_tag(text: str, dialect: TagDialect, start: int, closes: Dict[TagDialect, int]) -> _TagMatch:
        content_start = start + len(dialect.open_marker)

        if not dialect.is_open_ended:
            close = text.find(dialect.close_marker, content_start)
            if close == -1:
                # Truncated reply: the rest of the text is the content.
                return _TagMatch(dialect, "", text[content_start:], len(text))
            return _TagMatch(dialect, "", text[content_start:close], close + len(dialect.close_marker))

        tag_end = text.find(dialect.close_marker, content_start)
        if tag_end == -1:
            return _TagMatch(dialect, text[content_start:], "", len(text))

        attributes = text[content_start:tag_end]
        end = tag_end + len(dialect.close_marker)
        if attributes.rstrip().endswith("/"):
            return _TagMatch(dialect, attributes.rstrip()[:-1], "", end)

        close = _find_explicit_close(text, dialect, end, closes)
        if close == _ABSENT:
            return _TagMatch(dialect, attributes, "", end)
        return _TagMatch(dialect, attributes, text[end:close], close + len(dialect.explicit_close))

    def _extract_tool_call(self, tag: _TagMatch) -> Optional[ParsedToolCall]:
        body = tag.body.strip()
        return (
            _parse_structured_call(body)
            or _parse_parameter_block(tag, body)
            or _parse_named_block(body)
            or _parse_tag_record(tag, body)
        )

    def _extract_speech_call(self, tag: _TagMatch) -> ParsedToolCall:
        arguments: Dict[str, Any] = dict(_split_attributes(tag.attributes)[0])
        body = tag.body.strip()
        if body and "text" not in arguments:
            arguments["text"] = body
        return ParsedToolCall(name=self._speech_tool_name, arguments=arguments)


def parse_tool_tags(text: str) -> Tuple[str, List[ParsedToolCall]]:
    """Parse ``text`` with the default dialect table."""
    return _DEFAULT_PARSER.parse(text)


def _find_open_marker(text: str, dialect: TagDialect, start: int) -> int:
    marker = dialect.open_marker
    position = text.find(marker, start)
    if not dialect.is_open_ended:
        return position

    # An open-ended marker only matches at the end of a tag name.
    while position != -1:
        after = position + len(marker)
        if after >= len(text) or text[after].isspace() or text[after] in "/>":
            return position
        position = text.find(marker, position + 1)
    return _ABSENT


def _find_explicit_close(text: str, dialect: TagDialect, start: int, closes: Dict[TagDialect, int]) -> int:
    """Find the literal close tag of an open-ended marker, reusing the last search while it is still ahead."""
    cached = closes.get(dialect)
    if cached is not None and (cached == _ABSENT or cached >= start):
        return cached
    position = text.find(dialect.explicit_close, start)
    closes[dialect] = position
    return position


def _append_fragment(fragments: List[str], fragment: str) -> None:
    stripped = fragment.strip()
    if stripped:
        fragments.append(stripped)


def _fallback_text(tag: _TagMatch) -> str:
    if tag.body.strip():
        return tag.body
    return tag.attributes


def _load_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        document = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return document if isinstance(document, dict) else None


def _coerce_arguments(tool_name: str, raw_arguments: Any) -> Dict[str, Any]:
    """Turn whatever sits under ``arguments`` into an argument document."""
    if raw_arguments is None:
        return {}
    if isinstance(raw_arguments, dict):
        return raw_arguments
    if isinstance(raw_arguments, str):
        decoded = _load_object(raw_arguments) if raw_arguments.strip() else {}
        if decoded is not None:
            return decoded
    logger.debug(f"Ignoring non-object arguments for '{tool_name}': {raw_arguments!r}")
    return {}


def _parse_structured_call(body: str) -> Optional[ParsedToolCall]:
    """``{"name": ..., "arguments": {...}}``"""
    document = _load_object(body)
    if document is None:
        return None

    name = document.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    raw_arguments = document.get("arguments", document.get("parameters"))
    return ParsedToolCall(name=name.strip(), arguments=_coerce_arguments(name, raw_arguments))


def _parse_parameter_block(tag: _TagMatch, body: str) -> Optional[ParsedToolCall]:
    """``<invoke name="tool"><parameter name="key">value</parameter></invoke>``"""
    parameters = _PARAMETER_PATTERN.findall(body)
    if not parameters:
        return None

    attributes, _ = _split_attributes(tag.attributes)
    name = attributes.get("name", "").strip()
    if not name:
        return None

    return ParsedToolCall(name=name, arguments={key: value.strip() for key, value in parameters})


def _parse_named_block(body: str) -> Optional[ParsedToolCall]:
    """A tool name on the first line, then a JSON object or ``key=value`` lines."""
    if "\n" not in body:
        return None

    first_line, rest = body.split("\n", 1)
    name = first_line.strip()
    if not _IDENTIFIER_PATTERN.match(name):
        return None

    rest = rest.strip()
    arguments = _load_object(rest)
    if arguments is None:
        arguments = _parse_key_value_lines(rest)
    if arguments is None:
        return None
    return ParsedToolCall(name=name, arguments=arguments)


def _parse_key_value_lines(text: str) -> Optional[Dict[str, Any]]:
    arguments: Dict[str, Any] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        key, separator, value = line.partition("=")
        key = key.strip()
        if not separator or not key:
            return None
        arguments[key] = value.strip().strip(_QUOTE_CHARS)
    return arguments


def _parse_tag_record(tag: _TagMatch, body: str) -> Optional[ParsedToolCall]:
    """Read the opening tag itself as ``name key=value ...``.

    The call name comes from a ``name`` attribute, else from the tag name when
    that looks like a tool marker. A body may only add a JSON object of
    arguments; any other body keeps the tag as narrative text.
    """
    if "\n" in body:
        return None

    attributes, leftover = _split_attributes(tag.attributes)
    if leftover.strip():
        return None

    name = attributes.pop("name", "").strip()
    if name:
        arguments: Dict[str, Any] = dict(attributes)
        if body:
            extra = _load_object(body)
            if extra is None:
                return None
            arguments.update(extra)
        return ParsedToolCall(name=name, arguments=arguments)

    tag_name = tag.dialect.tag_name
    if body or not (tag_name.startswith("tool") or tag_name == "invoke"):
        return None
    return ParsedToolCall(name=tag_name, arguments=dict(attributes))


def _split_attributes(text: str) -> Tuple[Dict[str, str], str]:
    """Collect ``key=value`` attributes and return the text they did not cover."""
    attributes: Dict[str, str] = {}
    for match in _ATTRIBUTE_PATTERN.finditer(text):
        key, double_quoted, single_quoted, bare = match.groups()
        if double_quoted is not None:
            value = double_quoted
        elif single_quoted is not None:
            value = single_quoted
        else:
            value = bare
        attributes[key] = value
    return attributes, _ATTRIBUTE_PATTERN.sub("", text)


_DEFAULT_PARSER = TagParser()
