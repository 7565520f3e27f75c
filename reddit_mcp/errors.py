"""Exception types raised by tool handlers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ToolError(Exception):
    """Base class for failures surfaced to the tool caller."""


class ToolValidationError(ToolError):
    """Raised when tool parameters fail validation."""

    def __init__(self, tool_name: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.tool_name = tool_name
        self.errors = errors or []
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())) or '<root>'}: {error.get('msg', 'invalid')}"
            for error in self.errors
        )
        message = f"Invalid parameters for {tool_name}"
        if details:
            message += f": {details}"
        super().__init__(message)


class NavigationError(ToolError):
    """Raised when a page never reaches the DOM content loaded state."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Navigation to {url} failed: {reason}")


class UnknownToolError(ToolError):
    """Raised when the registry holds no tool with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


__all__ = ["ToolError", "ToolValidationError", "NavigationError", "UnknownToolError"]
