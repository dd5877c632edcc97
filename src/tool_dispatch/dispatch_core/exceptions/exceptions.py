"""
Exception classes for the tool dispatch layer.

Malformed model output never raises: the parsing paths degrade to narrative
text instead. The classes here cover programming errors (broken invariants,
an invalid dialect table) and misuse of the tool catalog.
"""


class ToolDispatchError(Exception):
    """Base exception for all dispatch-layer errors."""

    pass


class DispatchInvariantError(ToolDispatchError):
    """Raised when a value-model invariant is violated by the calling code."""

    pass


class DialectConfigurationError(ToolDispatchError):
    """Raised when a tag dialect table breaks marker precedence."""

    pass


class ToolCatalogError(ToolDispatchError):
    """Base exception for capability catalog errors."""

    pass


class ToolRegistrationError(ToolCatalogError):
    """Raised when a tool cannot be added to the catalog."""

    pass


class ToolNotFoundError(ToolCatalogError):
    """Raised when a requested tool is not in the catalog."""

    pass


class ToolValidationError(ToolCatalogError):
    """Raised when a tool's description or parameter schema is invalid."""

    pass
