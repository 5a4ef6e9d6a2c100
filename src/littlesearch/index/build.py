from collections.abc import Iterable

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.index.document import index_document
from littlesearch.index.merge import merge_document
from littlesearch.normalize import load_noise_words
from littlesearch.sources import TokenProvider


def build_index(
    doc_ids: Iterable[str],
    token_provider: TokenProvider,
    noise_words: Iterable[str],
) -> KeywordIndex:
    """Index every document in order and return the finished index.

    A doc_id listed more than once is indexed once, at its first position.
    SourceUnavailable from token_provider aborts the build.
    """
    noise = load_noise_words(noise_words)
    index = KeywordIndex()
    seen: set[str] = set()
    for doc_id in doc_ids:
        if doc_id in seen:
            continue
        seen.add(doc_id)
        merge_document(index, index_document(doc_id, token_provider(doc_id), noise))
    return index
