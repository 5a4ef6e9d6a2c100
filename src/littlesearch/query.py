"""Top-k disjunctive search over two keywords."""

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence

TOP_K = 5


def _take(occs: list[Occurrence], start: int, result: list[str], k: int) -> None:
    for occ in occs[start:]:
        if len(result) >= k:
            return
        if occ.doc_id not in result:
            result.append(occ.doc_id)


def top_k(
    index: KeywordIndex, kw1: str, kw2: str, k: int = TOP_K
) -> list[str] | None:
    """Return up to k documents containing kw1 or kw2, by frequency, descending.

    None means neither keyword is in the index. A document matched by both
    keywords appears once. On equal frequencies kw1's document comes first.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    occs1 = index.get(kw1)
    occs2 = index.get(kw2)
    if occs1 is None and occs2 is None:
        return None

    result: list[str] = []
    if occs1 is None or occs2 is None:
        _take(occs1 if occs2 is None else occs2, 0, result, k)
        return result

    i = j = 0
    while len(result) < k and i < len(occs1) and j < len(occs2):
        a, b = occs1[i], occs2[j]
        if a.frequency > b.frequency:
            if a.doc_id not in result:
                result.append(a.doc_id)
            i += 1
        elif a.frequency < b.frequency:
            if b.doc_id not in result:
                result.append(b.doc_id)
            j += 1
        else:
            if a.doc_id not in result:
                result.append(a.doc_id)
            if len(result) < k and b.doc_id not in result:
                result.append(b.doc_id)
            i += 1
            j += 1

    # one side is exhausted (or the result is full); drain the other
    _take(occs1, i, result, k)
    _take(occs2, j, result, k)
    return result
