from collections.abc import Iterable

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.normalize import normalize


def index_document(
    doc_id: str,
    tokens: Iterable[str],
    noise_words: frozenset[str] = frozenset(),
) -> dict[str, Occurrence]:
    """Count the keywords of one document.

    The whole token stream is consumed before anything is returned, since a
    frequency is only final at end of document. Errors from the token source
    propagate.
    """
    counts: dict[str, int] = {}
    for token in tokens:
        keyword = normalize(token, noise_words)
        if keyword is None:
            continue
        counts[keyword] = counts.get(keyword, 0) + 1
    return {
        keyword: Occurrence(doc_id=doc_id, frequency=count)
        for keyword, count in counts.items()
    }
