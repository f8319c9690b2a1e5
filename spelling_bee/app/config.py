"""Environment-driven settings for the server process."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

CORPUS_ENV_VAR = "SPELLING_BEE_CORPUS"
LOG_LEVEL_ENV_VAR = "SPELLING_BEE_LOG_LEVEL"
CACHE_ENV_VAR = "SPELLING_BEE_CACHE_CORPUS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = str(value).strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


@dataclass(frozen=True)
class ServerSettings:
    """Runtime options; ``corpus_path`` of ``None`` means the bundled corpus."""

    corpus_path: Optional[Path] = None
    log_level: Optional[str] = None
    cache_corpus: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        corpus = (env.get(CORPUS_ENV_VAR) or "").strip()
        level = (env.get(LOG_LEVEL_ENV_VAR) or "").strip()
        return cls(
            corpus_path=Path(corpus).expanduser() if corpus else None,
            log_level=level or None,
            cache_corpus=_parse_flag(env.get(CACHE_ENV_VAR), True),
        )

    def override(
        self,
        *,
        corpus_path: Optional[Path | str] = None,
        log_level: Optional[str] = None,
        cache_corpus: Optional[bool] = None,
    ) -> "ServerSettings":
        """Return a copy with every non-``None`` argument applied."""

        return replace(
            self,
            corpus_path=Path(corpus_path).expanduser() if corpus_path is not None else self.corpus_path,
            log_level=log_level if log_level is not None else self.log_level,
            cache_corpus=cache_corpus if cache_corpus is not None else self.cache_corpus,
        )


__all__ = ["ServerSettings", "CORPUS_ENV_VAR", "LOG_LEVEL_ENV_VAR", "CACHE_ENV_VAR"]
