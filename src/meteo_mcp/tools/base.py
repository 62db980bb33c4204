"""Tool interface definitions."""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple, Type

if TYPE_CHECKING:  # pragma: no cover
    from meteo_mcp.clients import OpenMeteoClient

    from .context import ToolContext
    from .schemas import BaseParams


class ToolError(Exception):
    """Base class for failures reported back to the caller as text."""


class UnknownOperationError(ToolError):
    """Raised when a call names a tool that is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ValidationError(ToolError):
    """Raised when caller arguments violate a tool's parameter schema.

    ``issues`` holds ``(field path, constraint)`` pairs, one per violation.
    """

    def __init__(self, issues: Sequence[Tuple[str, str]]) -> None:
        self.issues = list(issues)
        detail = "; ".join(f"{path}: {message}" for path, message in self.issues)
        super().__init__(f"Invalid arguments: {detail}")


class UnexpectedError(ToolError):
    """Generic stand-in for defects; the real exception only goes to the log."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unexpected error while running {name}; see server logs for details")
        self.name = name


@dataclass(frozen=True, slots=True)
class TextBlock:
    text: str
    type: str = "text"


@dataclass(slots=True)
class ToolResult:
    content: List[TextBlock] = field(default_factory=list)
    success: bool = True

    @classmethod
    def from_data(cls, data: Any) -> "ToolResult":
        return cls(content=[TextBlock(json.dumps(data, indent=2, ensure_ascii=False))])

    @classmethod
    def from_error(cls, message: str) -> "ToolResult":
        return cls(content=[TextBlock(f"Error: {message}")], success=False)

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


class BaseTool(ABC):
    """Base class for all Open-Meteo tool adapters."""

    name: str
    description: str
    params_model: Type["BaseParams"]

    def __init__(self, context: "ToolContext" | None = None) -> None:
        if context is None:
            from .context import ToolContext

            context = ToolContext()
        self.context = context

    @property
    def client(self) -> "OpenMeteoClient":
        client = self.context.client
        if client is None:
            raise RuntimeError(f"Tool {self.name} has no Open-Meteo client configured")
        return client

    def describe(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.params_model.model_json_schema(),
        )

    @abstractmethod
    async def run(self, params: Any) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError


__all__ = [
    "BaseTool",
    "TextBlock",
    "ToolDescriptor",
    "ToolError",
    "ToolResult",
    "UnexpectedError",
    "UnknownOperationError",
    "ValidationError",
]
