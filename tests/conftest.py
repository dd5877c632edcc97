import pytest
from typing import List

from tool_dispatch import NativeToolDispatcher, TagToolDispatcher, ToolSpec


@pytest.fixture
def tag_dispatcher() -> TagToolDispatcher:
    return TagToolDispatcher()


@pytest.fixture
def native_dispatcher() -> NativeToolDispatcher:
    return NativeToolDispatcher()


@pytest.fixture
def tool_specs() -> List[ToolSpec]:
    """Two capability descriptors as an external registry would publish them."""
    return [
        ToolSpec(
            name="search",
            description="Search the web.",
            parameters={
                "type": "object",
                "properties": {"q": {"type": "string", "description": "Query"}},
                "required": ["q"],
            },
        ),
        ToolSpec(name="ping", description="Check connectivity."),
    ]
