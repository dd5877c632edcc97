"""
Tag dialects recognised in free-form model replies.

A dialect pairs an open marker with a close marker and names the family that
decides how the enclosed content is interpreted. The table is ordered: the
parser consults it top to bottom, so a closed marker such as ``<say>`` must be
listed before the open-ended ``<say`` that would otherwise swallow it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from ..exceptions import DialectConfigurationError

SPEECH_TOOL_NAME = "tts"

# Closed by the next ``>`` instead of a literal close tag.
OPEN_ENDED_CLOSE = ">"


class DialectFamily(str, Enum):
    """How the content of a matched tag is interpreted."""

    TOOL = "tool"
    NARRATIVE = "narrative"
    SPEECH = "speech"


@dataclass(frozen=True)
class TagDialect:
    """One (open marker, close marker) pair of the dialect table."""

    open_marker: str
    close_marker: str
    family: DialectFamily

    @property
    def is_open_ended(self) -> bool:
        return self.close_marker == OPEN_ENDED_CLOSE

    @property
    def tag_name(self) -> str:
        return self.open_marker.lstrip("<").rstrip(">")

    @property
    def explicit_close(self) -> str:
        """Literal close tag for an open-ended marker carrying a body."""
        return f"</{self.tag_name}>"


def closed(name: str, family: DialectFamily) -> TagDialect:
    return TagDialect(f"<{name}>", f"</{name}>", family)


def open_ended(name: str, family: DialectFamily) -> TagDialect:
    return TagDialect(f"<{name}", OPEN_ENDED_CLOSE, family)


TOOL_TAGS: Tuple[str, ...] = ("tool_call", "toolcall", "tool-call", "invoke")

NARRATIVE_TAGS: Tuple[str, ...] = (
    "poetry",
    "poem",
    "output",
    "trash",
    "poetry_call",
    "poetry_tool_call",
    "poem_call",
    "poem_tool_call",
    "poem_write",
    "poetry_write",
    "poem_writer",
    "poetry_writer",
    "poem_generator",
    "poem_create",
    "poetry_create",
    "poem_generate",
    "poetry_generate",
    "poem_output",
    "poetry_output",
    "poem_result",
    "poetry_result",
    "poem_response",
    "poetry_response",
    "poem_text",
    "poetry_text",
    "poem_content",
    "poetry_content",
)

SPEECH_ALIASES: Tuple[str, ...] = ("text_to_speech", "voice_say", "speak", "say", "tts")

OPEN_ENDED_TOOL_TAGS: Tuple[str, ...] = ("tool_call", "invoke")
OPEN_ENDED_NARRATIVE_TAGS: Tuple[str, ...] = ("poetry_write", "poem_write", "poetry_call", "poetry_tool_call")


def _build_default_dialects() -> Tuple[TagDialect, ...]:
    dialects = [closed(name, DialectFamily.TOOL) for name in TOOL_TAGS]
    dialects += [closed(name, DialectFamily.NARRATIVE) for name in NARRATIVE_TAGS]
    dialects += [closed(name, DialectFamily.SPEECH) for name in SPEECH_ALIASES]
    dialects += [open_ended(name, DialectFamily.TOOL) for name in OPEN_ENDED_TOOL_TAGS]
    dialects += [open_ended(name, DialectFamily.NARRATIVE) for name in OPEN_ENDED_NARRATIVE_TAGS]
    dialects += [open_ended(name, DialectFamily.SPEECH) for name in SPEECH_ALIASES]
    return tuple(dialects)


DEFAULT_DIALECTS: Tuple[TagDialect, ...] = _build_default_dialects()


def validate_dialect_order(dialects: Sequence[TagDialect]) -> None:
    """Check that no open-ended marker shadows a more specific one listed after it.

    Args:
        dialects: The ordered dialect table.

    Raises:
        DialectConfigurationError: If the table is empty or breaks marker precedence.
    """
    if not dialects:
        raise DialectConfigurationError("The dialect table must contain at least one marker pair.")

    for index, general in enumerate(dialects):
        if not general.is_open_ended:
            continue
        for specific in dialects[index + 1 :]:
            if specific.open_marker != general.open_marker and specific.open_marker.startswith(general.open_marker):
                raise DialectConfigurationError(
                    f"Open-ended marker '{general.open_marker}' is listed before the more specific "
                    f"marker '{specific.open_marker}' and would shadow it."
                )

