"""
Adapt a generic JSON argument schema to what the Gemini API accepts.

Gemini rejects ``additionalProperties`` and ``required`` entries that name
undeclared properties.
"""

from typing import Any, Dict, List


def sanitize(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Return a sanitized copy of ``schema``; the input is left untouched."""
    return _sanitize_node(schema, [])


def _sanitize_node(node: Any, ancestors: List[int]) -> Any:
    if not isinstance(node, (dict, list)) or id(node) in ancestors:
        return node

    ancestors.append(id(node))
    try:
        if isinstance(node, list):
            return [_sanitize_node(item, ancestors) for item in node]

        result = {
            key: _sanitize_node(value, ancestors) for key, value in node.items() if key != "additionalProperties"
        }
        _restrict_required(result)
        return result
    finally:
        ancestors.pop()


def _restrict_required(schema: Dict[str, Any]) -> None:
    properties = schema.get("properties")
    required = schema.get("required")
    if not isinstance(properties, dict) or not isinstance(required, list):
        return

    declared = [name for name in required if name in properties]
    if declared:
        schema["required"] = declared
    else:
        del schema["required"]
