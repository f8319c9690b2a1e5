"""Application wiring and process entry point for the Spelling Bee server."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import anyio

from spelling_bee import __version__
from spelling_bee.core import CorpusLoader

from ..utils.logging_config import configure_logging
from ..utils.observability import get_logger
from .config import ServerSettings
from .services.tool_service import ToolDefinition, ToolResult, ToolService
from .services.word_filter_service import WordFilterService
from .transport.mcp_stdio import SpellingBeeMcpServer


class SpellingBeeApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        settings: Optional[ServerSettings] = None,
        *,
        corpus_loader: Optional[CorpusLoader] = None,
        word_service: Optional[WordFilterService] = None,
        tool_service: Optional[ToolService] = None,
    ) -> None:
        self.settings = settings or ServerSettings.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.corpus_loader = corpus_loader or CorpusLoader(
            self.settings.corpus_path,
            cache=self.settings.cache_corpus,
        )
        self.word_service = word_service or WordFilterService(self.corpus_loader)
        self.tool_service = tool_service or ToolService(self.word_service)
        self.mcp_server = SpellingBeeMcpServer(self.tool_service, version=__version__)

        self._logger.info(
            "Application dependencies wired",
            context={
                "corpus_path": self.corpus_loader.corpus_path,
                "cache_corpus": self.corpus_loader.cache,
                "tools": list(self.tool_service.tool_names),
            },
        )

    # Public API ------------------------------------------------------------
    def list_tools(self) -> List[ToolDefinition]:
        return self.tool_service.list_tools()

    def call_tool(self, name: str, arguments: Optional[dict] = None) -> ToolResult:
        return self.tool_service.call_tool(name, arguments)

    def get_longest_word(self, used_words: Sequence[str], letters_array: Sequence[str]) -> str:
        return self.word_service.get_longest_word(used_words, letters_array)

    def run(self) -> int:
        """Serve on stdio until the client disconnects or SIGINT arrives."""

        try:
            anyio.run(self.mcp_server.serve_stdio)
        except KeyboardInterrupt:
            self._logger.info("Interrupt received, shutting down")
        else:
            self._logger.info("Client disconnected, shutting down")
        return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spelling-bee-mcp",
        description=(
            "Serve the get_longest_word Spelling Bee tool over the Model "
            "Context Protocol on stdio."
        ),
    )
    parser.add_argument(
        "--corpus",
        default=None,
        help="Path to a newline-delimited word list (defaults to the bundled corpora.txt).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level written to stderr (defaults to SPELLING_BEE_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Reread the corpus on every call instead of keeping it in memory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = ServerSettings.from_env().override(
        corpus_path=args.corpus,
        log_level=args.log_level,
        cache_corpus=False if args.no_cache else None,
    )
    configure_logging(settings.log_level)
    return SpellingBeeApp(settings).run()


__all__ = ["SpellingBeeApp", "main"]
