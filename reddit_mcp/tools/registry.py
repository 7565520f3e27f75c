"""Explicit name-to-tool registry used by the dispatch layer."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..config import RedditConfig
from ..errors import ToolError, UnknownToolError
from ..session import ToolContext
from .base import Tool, ToolDescriptor, ToolResponse
from .reddit_nav import RedditNavTool
from .reddit_search import RedditSearchTool

_LOG = structlog.get_logger(__name__)


class ToolRegistry:
    """Maps tool names to their descriptor and handler."""

    def __init__(self, tools: Optional[List[Tool]] = None) -> None:
        self._tools: Dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        name = tool.descriptor.name
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def descriptors(self) -> List[ToolDescriptor]:
        return [tool.descriptor for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def dispatch(self, name: str, context: ToolContext, params: Mapping[str, Any] | None) -> ToolResponse:
        tool = self.get(name)
        _LOG.info("tool_called", tool=name)
        try:
            return await tool.handle(context, params or {})
        except ToolError as exc:
            _LOG.warning("tool_failed", tool=name, error=str(exc))
            raise


def build_registry(config: RedditConfig | None = None) -> ToolRegistry:
    config = config or RedditConfig()
    return ToolRegistry([RedditNavTool(config), RedditSearchTool(config)])


__all__ = ["ToolRegistry", "build_registry"]
