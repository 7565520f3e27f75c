"""Convenience exports for tool helpers."""

from .base import TextContent, Tool, ToolDescriptor, ToolResponse
from .reddit_nav import RedditNavTool
from .reddit_search import RedditSearchTool
from .registry import ToolRegistry, build_registry

__all__ = [
    "RedditNavTool",
    "RedditSearchTool",
    "TextContent",
    "Tool",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolResponse",
    "build_registry",
]
