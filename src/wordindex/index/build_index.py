"""Build the keyword index for a list of documents and print it.

Usage:
    python -m wordindex.index.build_index \\
        --docs-list docs.txt --noise-words noisewords.txt \\
        [--docs-parquet docs.parquet] [--show 20]
"""

import argparse
from collections.abc import Callable, Iterable, Iterator, Set
from pathlib import Path

import polars as pl

from wordindex.corpus import (
    parquet_reader,
    read_doc_list,
    read_lines,
    read_noise_words,
    read_parquet_docs,
    resolve_under,
)
from wordindex.data_models.keyword_index import KeywordIndex
from wordindex.data_models.occurrence import Occurrence
from wordindex.index.merge import merge_keywords
from wordindex.keywords import load_keywords


def build_index(
    doc_ids: Iterable[str],
    noise_words: Set[str],
    read_doc: Callable[[str], Iterator[str]] = read_lines,
) -> KeywordIndex:
    """Index every document in order; raises DocumentNotFound on a missing one."""
    entries: dict[str, list[Occurrence]] = {}
    for doc_id in doc_ids:
        kws = load_keywords(doc_id, read_doc(doc_id), noise_words)
        merge_keywords(entries, kws)
    return KeywordIndex(
        entries={keyword: tuple(occs) for keyword, occs in entries.items()}
    )


def add_corpus_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--docs-list",
        required=True,
        help="File of whitespace-separated document ids",
    )
    parser.add_argument(
        "--noise-words",
        required=True,
        help="File of whitespace-separated noise words",
    )
    parser.add_argument(
        "--docs-parquet",
        default=None,
        help="Resolve document ids against this docs.parquet instead of text files",
    )


def index_from_args(args: argparse.Namespace) -> KeywordIndex:
    """Load the corpus named by add_corpus_args() flags and build its index."""
    docs_list = Path(args.docs_list)
    noise_words = read_noise_words(Path(args.noise_words))
    print(f"Loaded {len(noise_words)} noise words from {args.noise_words}")

    doc_ids = read_doc_list(docs_list)
    if args.docs_parquet:
        read_doc = parquet_reader(read_parquet_docs(Path(args.docs_parquet)))
    else:
        read_doc = resolve_under(docs_list.parent)
    print(f"Indexing {len(doc_ids)} documents...")

    index = build_index(doc_ids, noise_words, read_doc)
    print(f"Indexed {len(index)} keywords")
    return index


def main() -> None:
    parser = argparse.ArgumentParser(description="Build and print a keyword index")
    add_corpus_args(parser)
    parser.add_argument(
        "--show", type=int, default=20, help="Number of keywords to print"
    )
    args = parser.parse_args()

    index = index_from_args(args)

    with pl.Config(tbl_rows=args.show):
        print(index.keyword_stats().head(args.show))
    for keyword in index.keywords()[: args.show]:
        occs = ", ".join(str(occ) for occ in index.occurrences(keyword))
        print(f"  {keyword} [{occs}]")


if __name__ == "__main__":
    main()
