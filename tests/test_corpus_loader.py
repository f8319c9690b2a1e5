from pathlib import Path

import pytest

import spelling_bee.core.corpus as corpus_module
from spelling_bee.core import (
    CorpusLoader,
    ResourceUnavailableError,
    default_corpus_path,
    longest_word,
    read_corpus,
)


@pytest.fixture
def counting_reads(monkeypatch):
    """Record every path the loader reads from disk."""

    reads = []
    real_read = corpus_module.read_corpus

    def counting_read(path):
        reads.append(path)
        return real_read(path)

    monkeypatch.setattr(corpus_module, "read_corpus", counting_read)
    return reads


def test_default_corpus_ships_with_the_package():
    path = default_corpus_path()

    assert path.name == "corpora.txt"
    assert path.parent == Path(__file__).resolve().parent.parent / "spelling_bee" / "core"
    assert path.exists()


def test_bundled_corpus_is_normalized():
    words = CorpusLoader().load()

    assert words, "Expected the bundled corpus to contain words"
    assert all(word == word.strip().lower() and word for word in words)


def test_read_corpus_trims_lowercases_and_skips_blank_lines(write_corpus):
    path = write_corpus(["  Apple ", "", "PEAR", "   ", "plum\r"])

    assert read_corpus(path) == ("apple", "pear", "plum")


def test_read_corpus_ignores_byte_order_mark(tmp_path):
    path = tmp_path / "corpora.txt"
    path.write_bytes("\ufeffcats\ncat\n".encode("utf-8"))

    words = read_corpus(path)

    assert words == ("cats", "cat")
    assert longest_word(words, ["c", "a", "t", "s"]) == "cats"


def test_read_corpus_missing_file_raises_resource_unavailable(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(ResourceUnavailableError) as excinfo:
        read_corpus(missing)

    assert excinfo.value.path == missing
    assert "nope.txt" in str(excinfo.value)


def test_read_corpus_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "corpora.txt"
    path.write_bytes(b"cat\n\xff\xfe\n")

    with pytest.raises(ResourceUnavailableError):
        read_corpus(path)


def test_loader_caches_parsed_corpus(cat_corpus, counting_reads):
    loader = CorpusLoader(cat_corpus)

    first = loader.load()
    cat_corpus.write_text("dog\n", encoding="utf-8")
    second = loader.load()

    assert first == second == ("cat", "cats", "act")
    assert counting_reads == [cat_corpus]

    loader.clear_cached_results()
    assert loader.loaded is False
    assert loader.load() == ("dog",)
    assert counting_reads == [cat_corpus, cat_corpus]


def test_loader_without_cache_rereads_every_call(cat_corpus, counting_reads):
    loader = CorpusLoader(cat_corpus, cache=False)

    assert loader.load() == ("cat", "cats", "act")
    cat_corpus.write_text("dog\n", encoding="utf-8")
    assert loader.load() == ("dog",)
    assert loader.loaded is False
    assert len(counting_reads) == 2


def test_loader_retries_after_file_creation(tmp_path):
    path = tmp_path / "corpora.txt"
    loader = CorpusLoader(path)

    with pytest.raises(ResourceUnavailableError):
        loader.load()
    assert loader.loaded is False

    path.write_text("bee\n", encoding="utf-8")

    assert loader.load() == ("bee",)
    assert loader.loaded is True
