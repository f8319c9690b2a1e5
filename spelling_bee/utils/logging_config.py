"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LEVEL_ENV_VAR = "SPELLING_BEE_LOG_LEVEL"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, logging.INFO)


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Initialise root logging handlers for the server process.

    Stdout carries MCP protocol frames, so every record is written to stderr.
    The level comes from ``level`` when given, otherwise from
    ``SPELLING_BEE_LOG_LEVEL``, falling back to ``INFO``. Returns the level
    that was applied.
    """

    global _CONFIGURED

    env_level = os.environ.get(_LEVEL_ENV_VAR)
    resolved_level = _resolve_level(level if level is not None else env_level)

    if _CONFIGURED and not force:
        return resolved_level

    logging.basicConfig(
        level=resolved_level,
        format=_DEFAULT_FORMAT,
        stream=sys.stderr,
        force=force,
    )
    logging.getLogger("spelling_bee").setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["configure_logging"]
