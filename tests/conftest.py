import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from spelling_bee.core import CorpusLoader


@pytest.fixture
def write_corpus(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Write ``lines`` to a temporary corpus file and return its path."""

    def _write(lines: Iterable[str], name: str = "corpora.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cat_corpus(write_corpus) -> Path:
    """Corpus used by the cat/cats/act scenarios."""

    return write_corpus(["cat", "cats", "act"])


@pytest.fixture
def cat_loader(cat_corpus: Path) -> CorpusLoader:
    return CorpusLoader(cat_corpus)
