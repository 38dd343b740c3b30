"""Rank the documents matching "kw1 or kw2" by keyword frequency.

Usage:
    python -m wordindex.search.top_search \\
        --docs-list docs.txt --noise-words noisewords.txt \\
        --kw1 deep --kw2 world [--limit 5] [--docs-parquet docs.parquet]
"""

import argparse

from wordindex.data_models.keyword_index import KeywordIndex
from wordindex.index.build_index import add_corpus_args, index_from_args

TOP_K = 5


def top_search(
    index: KeywordIndex, kw1: str, kw2: str, limit: int = TOP_K
) -> list[str]:
    """Return up to limit doc_ids containing kw1 or kw2, highest frequency first.

    Ties in frequency go to kw1. A document matching both keywords is listed
    once, at the rank of its higher frequency. Unknown keywords match nothing.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    first = index.occurrences(kw1.strip().lower())
    second = index.occurrences(kw2.strip().lower())

    result: list[str] = []
    seen: set[str] = set()
    i = j = 0
    while len(result) < limit and (i < len(first) or j < len(second)):
        if j >= len(second) or (
            i < len(first) and first[i].frequency >= second[j].frequency
        ):
            doc_id = first[i].doc_id
            i += 1
        else:
            doc_id = second[j].doc_id
            j += 1
        if doc_id not in seen:
            seen.add(doc_id)
            result.append(doc_id)
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Top documents for kw1 or kw2")
    add_corpus_args(parser)
    parser.add_argument("--kw1", required=True, help="First keyword (wins ties)")
    parser.add_argument("--kw2", required=True, help="Second keyword")
    parser.add_argument("--limit", type=int, default=TOP_K)
    args = parser.parse_args()

    index = index_from_args(args)
    docs = top_search(index, args.kw1, args.kw2, limit=args.limit)

    if not docs:
        print(f"No documents contain '{args.kw1}' or '{args.kw2}'")
        return
    print(f"Top {len(docs)} for '{args.kw1}' or '{args.kw2}':")
    for rank, doc_id in enumerate(docs, start=1):
        print(f"  {rank}. {doc_id}")


if __name__ == "__main__":
    main()
