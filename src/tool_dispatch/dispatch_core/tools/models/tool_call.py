"""Value records exchanged between the dispatchers and the host agent loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...exceptions import DispatchInvariantError


@dataclass(frozen=True)
class ParsedToolCall:
    """A tool call recovered from a model reply.

    Attributes:
        name: Name of the requested capability.
        arguments: Argument document. Always a dict, empty when the model gave none.
        call_id: Provider call identifier, only set for native tool calls.
    """

    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    call_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise DispatchInvariantError(f"Tool call name must be a non-empty string, got {self.name!r}.")
        if not isinstance(self.arguments, dict):
            raise DispatchInvariantError(
                f"Arguments of tool call '{self.name}' must be a dict, got {type(self.arguments).__name__}."
            )


@dataclass(frozen=True)
class ToolExecutionResult:
    """Outcome of executing one tool call, as reported by the tool registry."""

    name: str
    output: str
    success: bool
    call_id: Optional[str] = None

    @property
    def status(self) -> str:
        return "ok" if self.success else "error"
