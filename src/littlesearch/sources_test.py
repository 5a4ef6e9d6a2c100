from pathlib import Path

import polars as pl
import pytest

from littlesearch.data_models.doc import Doc
from littlesearch.sources import (
    SourceUnavailable,
    docs_token_provider,
    file_token_provider,
    read_docs,
    read_words,
)


def test_read_words(tmp_path: Path) -> None:
    path = tmp_path / "noisewords.txt"
    path.write_text("the\na  an\n\nand\n")
    assert read_words(path) == ["the", "a", "an", "and"]


def test_read_words_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable) as exc_info:
        read_words(tmp_path / "missing.txt")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_source_unavailable_is_os_error() -> None:
    assert issubclass(SourceUnavailable, OSError)


def test_file_token_provider_relative_to_base_dir(tmp_path: Path) -> None:
    (tmp_path / "doc1.txt").write_text("The cat\nsat on  the mat.\n")
    tokens = file_token_provider(tmp_path)
    assert list(tokens("doc1.txt")) == ["The", "cat", "sat", "on", "the", "mat."]


def test_file_token_provider_absolute_path(tmp_path: Path) -> None:
    path = tmp_path / "doc1.txt"
    path.write_text("hello world")
    tokens = file_token_provider(tmp_path / "elsewhere")
    assert list(tokens(str(path))) == ["hello", "world"]


def test_file_token_provider_missing_document(tmp_path: Path) -> None:
    tokens = file_token_provider(tmp_path)
    with pytest.raises(SourceUnavailable, match="missing.txt"):
        list(tokens("missing.txt"))


def test_read_docs(tmp_path: Path) -> None:
    path = tmp_path / "docs.parquet"
    pl.DataFrame(
        {"doc_id": ["d1", "d2"], "text": ["cat cat", None], "year": [2020, 2021]}
    ).write_parquet(path)
    assert read_docs(path) == [
        Doc(doc_id="d1", text="cat cat"),
        Doc(doc_id="d2", text=""),
    ]


def test_read_docs_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        read_docs(tmp_path / "docs.parquet")


def test_read_docs_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "docs.parquet"
    pl.DataFrame({"doc_id": ["d1"]}).write_parquet(path)
    with pytest.raises(ValueError, match="text"):
        read_docs(path)


def test_docs_token_provider() -> None:
    tokens = docs_token_provider([Doc(doc_id="d1", text="a b\nc")])
    assert list(tokens("d1")) == ["a", "b", "c"]
    with pytest.raises(SourceUnavailable):
        tokens("d2")


def test_read_words_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "noisewords.txt"
    path.write_bytes(b"the \xff")
    with pytest.raises(SourceUnavailable) as exc_info:
        read_words(path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_file_token_provider_invalid_utf8(tmp_path: Path) -> None:
    (tmp_path / "d1.txt").write_bytes(b"cat \xff\xfe dog")
    tokens = file_token_provider(tmp_path)
    with pytest.raises(SourceUnavailable, match="d1.txt"):
        list(tokens("d1.txt"))


def test_read_docs_not_parquet(tmp_path: Path) -> None:
    path = tmp_path / "docs.parquet"
    path.write_text("doc_id,text\nd1,cat\n")
    with pytest.raises(SourceUnavailable):
        read_docs(path)
