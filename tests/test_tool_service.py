from __future__ import annotations

import logging

import pytest

from spelling_bee.app.services import (
    GET_LONGEST_WORD,
    ToolResult,
    ToolService,
    WordFilterService,
)
from spelling_bee.core import CorpusLoader, ErrorKind, MethodNotFoundError


class ExplodingWordService:
    """Word service stub raising an unexpected error."""

    def get_longest_word_from_arguments(self, arguments):
        raise RuntimeError("boom")


@pytest.fixture
def tool_service(cat_loader: CorpusLoader) -> ToolService:
    return ToolService(WordFilterService(cat_loader))


def test_list_tools_publishes_single_tool(tool_service: ToolService) -> None:
    tools = tool_service.list_tools()

    assert [tool.name for tool in tools] == [GET_LONGEST_WORD]
    schema = tools[0].input_schema
    assert schema["type"] == "object"
    assert sorted(schema["required"]) == ["letters_array", "used_words"]
    for field in ("used_words", "letters_array"):
        assert schema["properties"][field]["type"] == "array"
        assert schema["properties"][field]["items"] == {"type": "string"}
    assert "longest valid word" in tools[0].description


def test_list_tools_returns_copies(tool_service: ToolService) -> None:
    tool_service.list_tools()[0].input_schema["required"].clear()

    assert tool_service.list_tools()[0].input_schema["required"] == [
        "used_words",
        "letters_array",
    ]


def test_call_tool_returns_longest_word(tool_service: ToolService) -> None:
    result = tool_service.call_tool(
        GET_LONGEST_WORD, {"used_words": [], "letters_array": ["c", "a", "t", "s"]}
    )

    assert result == ToolResult(text="cats")
    assert result.is_error is False
    assert result.error_kind is None


def test_call_tool_returns_sentinel_as_success(tool_service: ToolService) -> None:
    result = tool_service.call_tool(
        GET_LONGEST_WORD, {"used_words": [], "letters_array": ["c", "a", "t"]}
    )
    assert result.text == "cat"

    result = tool_service.call_tool(
        GET_LONGEST_WORD, {"used_words": ["cat", "act"], "letters_array": ["c", "a", "t"]}
    )
    assert result == ToolResult(text="No valid words found")


def test_unknown_tool_raises_method_not_found(tool_service: ToolService) -> None:
    with pytest.raises(MethodNotFoundError) as excinfo:
        tool_service.call_tool("get_shortest_word", {})

    assert excinfo.value.name == "get_shortest_word"
    assert excinfo.value.supported == (GET_LONGEST_WORD,)
    assert "Unknown tool: get_shortest_word" in str(excinfo.value)
    assert GET_LONGEST_WORD in str(excinfo.value)


def test_invalid_arguments_become_error_result(tool_service: ToolService) -> None:
    result = tool_service.call_tool(GET_LONGEST_WORD, {"used_words": [], "letters_array": "cat"})

    assert result.is_error is True
    assert result.error_kind is ErrorKind.INVALID_ARGUMENT
    assert result.text.startswith("Error: ")
    assert "letters_array" in result.text


def test_missing_corpus_becomes_error_result(tmp_path, caplog) -> None:
    service = ToolService(WordFilterService(CorpusLoader(tmp_path / "gone.txt")))
    caplog.set_level(logging.ERROR, logger="spelling_bee")

    result = service.call_tool(GET_LONGEST_WORD, {"used_words": [], "letters_array": ["a"]})

    assert result.is_error is True
    assert result.error_kind is ErrorKind.RESOURCE_UNAVAILABLE
    assert "gone.txt" in result.text
    assert any("Tool call failed" in record.message for record in caplog.records)


def test_unexpected_exception_is_contained_and_logged(caplog) -> None:
    service = ToolService(ExplodingWordService())  # type: ignore[arg-type]
    caplog.set_level(logging.ERROR, logger="spelling_bee")

    result = service.call_tool(GET_LONGEST_WORD, {"used_words": [], "letters_array": []})

    assert result == ToolResult(
        text="Error: boom", is_error=True, error_kind=ErrorKind.INTERNAL
    )
    records = [r for r in caplog.records if "Tool call raised unexpectedly" in r.message]
    assert records and records[0].exc_info is not None


def test_completed_calls_are_logged_with_context(tool_service: ToolService, caplog) -> None:
    caplog.set_level(logging.INFO, logger="spelling_bee")

    tool_service.call_tool(GET_LONGEST_WORD, {"used_words": [], "letters_array": ["c", "a", "t"]})

    messages = [record.message for record in caplog.records]
    assert any(
        "Tool call completed" in message and '"result": "cat"' in message
        for message in messages
    )


def test_services_can_be_constructed_repeatedly(cat_loader: CorpusLoader) -> None:
    # Metrics are registered once per process and reused afterwards.
    first = ToolService(WordFilterService(cat_loader))
    second = ToolService(WordFilterService(cat_loader))

    assert first.tool_names == second.tool_names == (GET_LONGEST_WORD,)
