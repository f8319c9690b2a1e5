"""Tool catalogue and the invocation boundary for tool calls."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from spelling_bee.core import ErrorKind, MethodNotFoundError, SpellingBeeError

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .word_filter_service import WordFilterService

GET_LONGEST_WORD = "get_longest_word"


@dataclass(frozen=True)
class ToolDefinition:
    """Discovery entry describing one callable tool."""

    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: text on success, or text plus an error kind."""

    text: str
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True, error_kind=kind)


LONGEST_WORD_TOOL = ToolDefinition(
    name=GET_LONGEST_WORD,
    description=(
        "Reads words from 'corpora.txt', filters them using the letters in "
        "`letters_array`, excludes those in `used_words`, and returns the "
        "longest valid word."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "used_words": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of words already used (these won't be returned)",
            },
            "letters_array": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of allowed letters (e.g. ['a', 'p', 'l', 'e'])",
            },
        },
        "required": ["used_words", "letters_array"],
    },
)


class ToolService:
    """Expose the word tools by name and convert failures into results."""

    def __init__(self, word_service: Optional[WordFilterService] = None) -> None:
        self.word_service = word_service or WordFilterService()
        self._logger = get_logger(__name__).bind(component="tool_service")
        self._handlers: Dict[str, Callable[[Optional[Mapping[str, Any]]], str]] = {
            GET_LONGEST_WORD: self.word_service.get_longest_word_from_arguments,
        }
        self._definitions: Dict[str, ToolDefinition] = {
            GET_LONGEST_WORD: LONGEST_WORD_TOOL,
        }

        self._metric_calls = create_counter(
            "spelling_bee_tool_calls_total",
            "Tool calls received, by tool name.",
            label_names=("tool",),
        )
        self._metric_failures = create_counter(
            "spelling_bee_tool_failures_total",
            "Tool calls that returned an error result.",
            label_names=("tool", "kind"),
        )
        self._metric_duration = create_histogram(
            "spelling_bee_tool_call_seconds",
            "Latency of tool calls.",
        )

    @property
    def tool_names(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def list_tools(self) -> List[ToolDefinition]:
        """Return copies of the published tool definitions."""

        return [copy.deepcopy(definition) for definition in self._definitions.values()]

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run tool ``name`` with ``arguments``.

        Raises :class:`MethodNotFoundError` for names outside the catalogue.
        Every other failure is returned as an error :class:`ToolResult`.
        """

        handler = self._handlers.get(name)
        if handler is None:
            self._logger.warning(
                "Unknown tool requested",
                context={"tool": name, "supported": list(self.tool_names)},
            )
            raise MethodNotFoundError(name, self.tool_names)

        self._metric_calls.labels(tool=name).inc()
        request_context: Dict[str, Any] = {"tool": name}
        if isinstance(arguments, Mapping):
            request_context["arguments"] = sorted(arguments)

        with start_span("tool.call", {"tool.name": name}) as span:
            with self._metric_duration.time():
                try:
                    text = handler(arguments)
                except SpellingBeeError as exc:
                    self._logger.error(
                        "Tool call failed",
                        context=dict(request_context, kind=exc.kind.value, error=str(exc)),
                    )
                    return self._failure(name, exc.kind, exc, span)
                except Exception as exc:
                    self._logger.exception(
                        "Tool call raised unexpectedly",
                        context=dict(request_context, error=str(exc)),
                    )
                    return self._failure(name, ErrorKind.INTERNAL, exc, span)

            add_span_attributes(span, {"tool.success": True})
            self._logger.info(
                "Tool call completed",
                context=dict(request_context, result=text),
            )
            return ToolResult.success(text)

    def _failure(
        self,
        name: str,
        kind: ErrorKind,
        exc: BaseException,
        span: Any,
    ) -> ToolResult:
        self._metric_failures.labels(tool=name, kind=kind.value).inc()
        record_exception(span, exc)
        return ToolResult.failure(kind, str(exc))


__all__ = [
    "GET_LONGEST_WORD",
    "LONGEST_WORD_TOOL",
    "ToolDefinition",
    "ToolResult",
    "ToolService",
]
