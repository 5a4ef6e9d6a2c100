"""Document and noise-word sources for the index builder.

A token provider maps a document identifier to that document's raw
whitespace-delimited tokens. Failing to open or read a source raises
SourceUnavailable, which aborts an index build.
"""

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import polars as pl

from littlesearch.data_models.doc import Doc

TokenProvider = Callable[[str], Iterable[str]]


class SourceUnavailable(OSError):
    """A document or noise-word source cannot be opened or read."""


def read_words(path: str | Path) -> list[str]:
    """Return the whitespace-delimited words of a text file."""
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"Cannot read {path}: {exc}") from exc


def file_token_provider(base_dir: str | Path | None = None) -> TokenProvider:
    """Token provider that treats document identifiers as file paths.

    Relative identifiers resolve against base_dir when it is given.
    """

    def tokens(doc_id: str) -> Iterator[str]:
        path = Path(doc_id)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        try:
            with open(path, encoding="utf-8") as f:
                for line in f:
                    yield from line.split()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(f"Cannot read document {doc_id}: {exc}") from exc

    return tokens


def read_docs(path: str | Path) -> list[Doc]:
    """Load docs from a Parquet file with doc_id and text columns."""
    if not Path(path).is_file():
        raise SourceUnavailable(f"No docs file at {path}")
    try:
        df = pl.read_parquet(path)
    except (OSError, pl.exceptions.PolarsError) as exc:
        raise SourceUnavailable(f"Cannot read docs from {path}: {exc}") from exc
    missing = {"doc_id", "text"} - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {sorted(missing)}")
    return [
        Doc(doc_id=row["doc_id"], text=row["text"] or "")
        for row in df.select("doc_id", "text").iter_rows(named=True)
    ]


def docs_token_provider(docs: Iterable[Doc]) -> TokenProvider:
    """Token provider over in-memory docs, keyed by doc_id."""
    docs_map = {doc.doc_id: doc.text for doc in docs}

    def tokens(doc_id: str) -> list[str]:
        text = docs_map.get(doc_id)
        if text is None:
            raise SourceUnavailable(f"No document with id {doc_id!r}")
        return text.split()

    return tokens
