"""Fold per-document keyword counts into the global index.

Every keyword's occurrence list is kept in descending frequency order. A new
document's occurrence is appended and then moved into place by ``insert_last``,
which finds the slot with a binary search over the already-sorted prefix.
"""

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence


def _end_of_ties(occs: list[Occurrence], low: int, hi: int, frequency: int) -> int:
    """First index in [low, hi + 1] whose frequency is below ``frequency``.

    Every element in [low, hi] is <= frequency and everything after hi is
    strictly below it.
    """
    while low <= hi:
        mid = (low + hi) // 2
        if occs[mid].frequency == frequency:
            low = mid + 1
        else:
            hi = mid - 1
    return low


def insert_last(
    occs: list[Occurrence],
) -> tuple[list[Occurrence], list[int] | None]:
    """Move the last occurrence into its sorted position.

    ``occs[:-1]`` must already be sorted by frequency, descending. Returns the
    rebuilt list and the midpoints probed by the binary search, or None for
    the probes when the list has a single element. Ties go after existing
    entries with the same frequency. The input list is not modified.

    insert_last([(a,5), (b,3), (c,1), (d,4)])
        -> ([(a,5), (d,4), (b,3), (c,1)], [1, 0])
    """
    if len(occs) == 1:
        return list(occs), None

    last = len(occs) - 1
    target = occs[last].frequency
    probes: list[int] = []
    low, hi = 0, last - 1
    mid = 0
    tied = False
    while low <= hi:
        mid = (low + hi) // 2
        probes.append(mid)
        if occs[mid].frequency == target:
            tied = True
            break
        # descending list: a lower frequency at mid means the slot is earlier
        if occs[mid].frequency < target:
            hi = mid - 1
        else:
            low = mid + 1

    if tied:
        position = _end_of_ties(occs, mid + 1, hi, target)
    elif occs[mid].frequency > target:
        position = mid + 1
    else:
        position = mid

    rebuilt = occs[:position] + [occs[last]] + occs[position:last]
    return rebuilt, probes


def merge_document(index: KeywordIndex, doc_map: dict[str, Occurrence]) -> None:
    """Merge one document's keyword occurrences into index, in place."""
    for keyword, occurrence in doc_map.items():
        occs = index.get(keyword)
        if occs is None:
            index.set(keyword, [occurrence])
            continue
        if any(occ.doc_id == occurrence.doc_id for occ in occs):
            raise ValueError(
                f"Document {occurrence.doc_id!r} already indexed for {keyword!r}"
            )
        merged, _probes = insert_last(occs + [occurrence])
        index.set(keyword, merged)
