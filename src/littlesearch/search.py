"""Build a keyword index over a corpus and run one two-keyword top-k search.

Usage:
    python -m littlesearch.search \\
        --docs docs.txt --noise-words noisewords.txt [--base-dir corpus/] \\
        deep world [--top-k 5] [--show-index]

    python -m littlesearch.search \\
        --docs-parquet docs.parquet --noise-words noisewords.txt deep world
"""

import argparse
import sys

import polars as pl

from littlesearch.index.build import build_index
from littlesearch.normalize import load_noise_words, normalize
from littlesearch.query import TOP_K, top_k
from littlesearch.sources import (
    SourceUnavailable,
    TokenProvider,
    docs_token_provider,
    file_token_provider,
    read_docs,
    read_words,
)


def _load_corpus(args: argparse.Namespace) -> tuple[list[str], TokenProvider]:
    if args.docs_parquet:
        docs = read_docs(args.docs_parquet)
        return [doc.doc_id for doc in docs], docs_token_provider(docs)
    return read_words(args.docs), file_token_provider(args.base_dir)


def main() -> None:
    parser = argparse.ArgumentParser(description="Top-k search over two keywords")
    corpus = parser.add_mutually_exclusive_group(required=True)
    corpus.add_argument(
        "--docs", help="Text file listing document files, one per line"
    )
    corpus.add_argument(
        "--docs-parquet", help="Parquet file with doc_id and text columns"
    )
    parser.add_argument(
        "--noise-words", required=True, help="Text file of noise words"
    )
    parser.add_argument(
        "--base-dir", default=None, help="Directory relative document paths are in"
    )
    parser.add_argument("--top-k", type=int, default=TOP_K)
    parser.add_argument(
        "--show-index", action="store_true", help="Print the index as a table"
    )
    parser.add_argument("kw1")
    parser.add_argument("kw2")
    args = parser.parse_args()

    try:
        noise_words = read_words(args.noise_words)
        doc_ids, token_provider = _load_corpus(args)
        print(f"Indexing {len(doc_ids)} documents ({len(noise_words)} noise words)...")
        index = build_index(doc_ids, token_provider, noise_words)
    except SourceUnavailable as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Indexed {len(index)} keywords")

    if args.show_index:
        with pl.Config(tbl_rows=-1):
            print(index.to_polars())

    noise = load_noise_words(noise_words)
    # an unacceptable query word is looked up as-is and so matches nothing
    kw1 = normalize(args.kw1, noise) or args.kw1
    kw2 = normalize(args.kw2, noise) or args.kw2
    results = top_k(index, kw1, kw2, args.top_k)

    if results is None:
        print(f"Neither {kw1!r} nor {kw2!r} is indexed")
        return
    if not results:
        print("No matching documents")
        return
    print(f"Top {len(results)} for {kw1!r} or {kw2!r}:")
    for rank, doc_id in enumerate(results, start=1):
        print(f"  {rank}. {doc_id}")


if __name__ == "__main__":
    main()
