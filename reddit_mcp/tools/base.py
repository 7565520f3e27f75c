"""Tool descriptors, responses and the handler protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import ToolValidationError
from ..session import ToolContext

ParamsT = TypeVar("ParamsT", bound=BaseModel)


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON input schema advertised for a tool."""

    name: str
    description: str
    input_schema: Dict[str, Any]

    @classmethod
    def from_model(cls, name: str, description: str, model: Type[BaseModel]) -> "ToolDescriptor":
        return cls(name=name, description=description, input_schema=model.model_json_schema())


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass
class ToolResponse:
    """Content blocks returned to the caller."""

    content: List[TextContent] = field(default_factory=list)

    @classmethod
    def text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])


class Tool(Protocol):
    """Executable tool interface."""

    descriptor: ToolDescriptor

    async def handle(self, context: ToolContext, params: Mapping[str, Any]) -> ToolResponse:
        """Execute the tool and return its response."""


def validate_params(model: Type[ParamsT], tool_name: str, params: Mapping[str, Any] | None) -> ParamsT:
    """Parse raw parameters, raising ToolValidationError on any violation."""

    try:
        return model.model_validate(dict(params or {}))
    except ValidationError as exc:
        raise ToolValidationError(tool_name, exc.errors(include_url=False)) from exc


__all__ = ["TextContent", "Tool", "ToolDescriptor", "ToolResponse", "validate_params"]
