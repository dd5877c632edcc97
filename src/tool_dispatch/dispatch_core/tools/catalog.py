"""In-process source of capability descriptors."""

from typing import Callable, Dict, Iterator, List, Optional, Union

from ..exceptions import ToolNotFoundError, ToolRegistrationError
from ..logger import get_logger
from .models import ToolSpec
from .schema import build_parameters_schema, describe_callable

logger = get_logger(__name__)


class ToolCatalog:
    """
    Holds the capability descriptors offered to a model.

    Descriptors can be registered directly or derived from a documented Python
    callable. The catalog only describes tools; executing them is the host's job.
    """

    def __init__(self) -> None:
        self._specs: Dict[str, ToolSpec] = {}

    def register(
        self,
        spec_or_func: Union[ToolSpec, Callable],
        description: Optional[str] = None,
        name: Optional[str] = None,
    ) -> ToolSpec:
        """
        Add a tool to the catalog.

        Args:
            spec_or_func: A ready ``ToolSpec`` or a callable to describe.
            description: Overrides the callable's docstring.
            name: Overrides the callable's ``__name__``.

        Returns:
            The registered descriptor.

        Raises:
            ToolRegistrationError: If a tool of the same name is already registered.
            ToolValidationError: If a callable lacks a docstring or parameter descriptions.
        """
        if isinstance(spec_or_func, ToolSpec):
            spec = spec_or_func
        elif callable(spec_or_func):
            tool_name = name or spec_or_func.__name__
            spec = ToolSpec(
                name=tool_name,
                description=description or describe_callable(spec_or_func, tool_name),
                parameters=build_parameters_schema(spec_or_func, tool_name),
            )
        else:
            raise ToolRegistrationError(f"Cannot register {type(spec_or_func).__name__}; expected ToolSpec or callable.")

        if spec.name in self._specs:
            msg = f"Tool '{spec.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self._specs[spec.name] = spec
        logger.info(f"Successfully registered tool: '{spec.name}'")
        return spec

    def tool(self, func: Callable) -> Callable:
        """Decorator registering ``func`` and returning it unchanged."""
        self.register(func)
        return func

    def unregister(self, tool_name: str) -> None:
        """Remove a tool from the catalog.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        if tool_name not in self._specs:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the catalog.")
        del self._specs[tool_name]
        logger.info(f"Successfully unregistered tool: '{tool_name}'")

    def get(self, tool_name: str) -> ToolSpec:
        try:
            return self._specs[tool_name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the catalog.") from None

    @property
    def specs(self) -> List[ToolSpec]:
        """Registered descriptors in registration order."""
        return list(self._specs.values())

    @property
    def names(self) -> List[str]:
        return list(self._specs)

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self.specs)
