"""Browser-driven Reddit navigation and search tools exposed over MCP."""

from .config import PlaywrightConfig, RedditConfig, ServerConfig
from .errors import NavigationError, ToolError, ToolValidationError, UnknownToolError
from .session import ExtractedRecord, SessionHandle, ToolContext
from .tools import RedditNavTool, RedditSearchTool, ToolRegistry, build_registry

__version__ = "0.1.0"

__all__ = [
    "ExtractedRecord",
    "NavigationError",
    "PlaywrightConfig",
    "RedditConfig",
    "RedditNavTool",
    "RedditSearchTool",
    "ServerConfig",
    "SessionHandle",
    "ToolContext",
    "ToolError",
    "ToolRegistry",
    "ToolValidationError",
    "UnknownToolError",
    "build_registry",
]
