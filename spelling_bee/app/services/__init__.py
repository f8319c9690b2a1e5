"""Services behind the Spelling Bee tool server."""

from .tool_service import (
    GET_LONGEST_WORD,
    LONGEST_WORD_TOOL,
    ToolDefinition,
    ToolResult,
    ToolService,
)
from .word_filter_service import WordFilterService

__all__ = [
    "GET_LONGEST_WORD",
    "LONGEST_WORD_TOOL",
    "ToolDefinition",
    "ToolResult",
    "ToolService",
    "WordFilterService",
]
