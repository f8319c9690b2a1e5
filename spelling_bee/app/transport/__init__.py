"""Protocol adapters exposing the tool service."""

from .mcp_stdio import SERVER_NAME, SpellingBeeMcpServer

__all__ = ["SERVER_NAME", "SpellingBeeMcpServer"]
