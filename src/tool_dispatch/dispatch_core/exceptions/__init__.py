"""Export the dispatch-layer exception hierarchy."""

from .exceptions import (
    ToolDispatchError,
    DispatchInvariantError,
    DialectConfigurationError,
    ToolCatalogError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
)

__all__ = [
    "ToolDispatchError",
    "DispatchInvariantError",
    "DialectConfigurationError",
    "ToolCatalogError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
]
