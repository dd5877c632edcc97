import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


def empty_object_schema() -> Dict[str, Any]:
    return {"type": "object", "properties": {}}


class ToolSpec(BaseModel):
    """
    Read-only capability descriptor published by a tool registry.

    Attributes:
        name: The unique name of the tool.
        description: Human readable description of what the tool does.
        parameters: JSON schema of the tool's argument document.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str
    parameters: Dict[str, Any] = Field(default_factory=empty_object_schema)

    def parameters_json(self) -> str:
        """Render the argument schema as compact JSON for prompt text."""
        return json.dumps(self.parameters, separators=(",", ":"), ensure_ascii=False)
