"""In-memory inverted index: keyword → occurrences in descending frequency."""

from collections.abc import Iterator

import polars as pl

from littlesearch.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


class KeywordIndex:
    """Keyword → list of Occurrence, each list sorted by frequency, descending.

    Lists are only replaced through ``set``, which the merger calls once per
    keyword per document. Readers get the stored lists back and must not
    mutate them.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[Occurrence]] = {}

    def get(self, keyword: str) -> list[Occurrence] | None:
        return self._entries.get(keyword)

    def set(self, keyword: str, occs: list[Occurrence]) -> None:
        self._entries[keyword] = occs

    def keywords(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, keyword: str) -> list[Occurrence]:
        return self._entries[keyword]

    def to_polars(self) -> pl.DataFrame:
        """One row per (keyword, doc_id); rank is the 0-based list position."""
        rows = [
            (keyword, occ.doc_id, occ.frequency, rank)
            for keyword in self.keywords()
            for rank, occ in enumerate(self._entries[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
