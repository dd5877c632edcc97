"""Derive JSON argument schemas for capability descriptors from Python callables."""

import inspect
from typing import Annotated, Any, Callable, Dict, Set, Tuple, get_args, get_origin

import jsonref  # type: ignore
from pydantic import Field, create_model
from pydantic.fields import FieldInfo

from ..exceptions import ToolValidationError
from ..logger import get_logger

logger = get_logger(__name__)

_METADATA_KEYS = ("$defs", "definitions", "$schema", "$id", "title")


def describe_callable(func: Callable, tool_name: str) -> str:
    """Return the callable's docstring, which becomes the tool description.

    Raises:
        ToolValidationError: If the callable has no docstring.
    """
    doc = inspect.getdoc(func)
    if not doc:
        msg = f"Tool '{tool_name}' missing docstring. Models need a description of what the tool does."
        logger.error(msg)
        raise ToolValidationError(msg)
    return doc


def build_parameters_schema(func: Callable, tool_name: str) -> Dict[str, Any]:
    """Build the argument schema of ``func``.

    Every parameter must be annotated as ``Annotated[T, Field(description=...)]``.
    The schema is generated through a pydantic model, checked for recursion,
    has its ``$ref``s inlined and its metadata keys removed.

    Args:
        func: The tool implementation.
        tool_name: Tool name used in error messages.

    Returns:
        A self-contained JSON schema of type ``object``.

    Raises:
        ToolValidationError: If a parameter lacks a description or the schema is recursive.
    """
    fields: Dict[str, Any] = {}
    for param_name, param in inspect.signature(func).parameters.items():
        if param_name in ("self", "cls") or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        fields[param_name] = _field_definition(param_name, param, tool_name)

    params_model = create_model(f"{tool_name}Params", **fields)
    raw_schema = params_model.model_json_schema()
    _assert_no_recursive_refs(raw_schema, tool_name)

    resolved = jsonref.replace_refs(raw_schema, proxies=False)
    return _strip_metadata(resolved)


def _field_definition(param_name: str, param: inspect.Parameter, tool_name: str) -> Tuple[Any, FieldInfo]:
    annotation = param.annotation
    description = None
    if get_origin(annotation) is Annotated:
        for metadata in get_args(annotation)[1:]:
            if isinstance(metadata, FieldInfo) and metadata.description:
                description = metadata.description
                break

    if description is None:
        msg = (
            f"Parameter '{param_name}' in tool '{tool_name}' is missing a description.\n"
            f"Usage: {param_name}: Annotated[Type, Field(description='...')] = ..."
        )
        logger.error(msg)
        raise ToolValidationError(msg)

    default = param.default if param.default is not inspect.Parameter.empty else ...
    return annotation, Field(default=default, description=description)


def _assert_no_recursive_refs(schema: Dict[str, Any], tool_name: str) -> None:
    definitions = schema.get("$defs") or schema.get("definitions") or {}

    def visit(node: Any, trail: Set[str]) -> None:
        if isinstance(node, list):
            for item in node:
                visit(item, trail)
            return
        if not isinstance(node, dict):
            return

        ref = node.get("$ref")
        if isinstance(ref, str):
            if ref in trail:
                msg = f"Tool '{tool_name}' has a recursive argument structure ({ref}), which cannot be inlined."
                logger.error(msg)
                raise ToolValidationError(msg)
            target = definitions.get(ref.rsplit("/", 1)[-1]) if ref.startswith("#/") else None
            if target is not None:
                visit(target, trail | {ref})
            return

        for value in node.values():
            visit(value, trail)

    visit(schema, set())


def _strip_metadata(schema: Any) -> Any:
    if isinstance(schema, list):
        return [_strip_metadata(item) for item in schema]
    if not isinstance(schema, dict):
        return schema

    cleaned = {}
    for key, value in schema.items():
        if key in _METADATA_KEYS:
            continue
        # "properties" maps parameter names to schemas; never drop a parameter named like a metadata key
        if key == "properties" and isinstance(value, dict):
            cleaned[key] = {name: _strip_metadata(sub) for name, sub in value.items()}
        else:
            cleaned[key] = _strip_metadata(value)
    return cleaned
