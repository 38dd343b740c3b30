"""Document sources: document lists, noise words and document text."""

from collections.abc import Callable, Iterator
from pathlib import Path

import polars as pl

from wordindex.data_models.doc import Doc


class DocumentNotFound(FileNotFoundError):
    """A listed document or input list could not be located or read."""


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFound(f"Cannot read {path}: {e}") from e


def read_doc_list(path: Path) -> list[str]:
    """Return the document identifiers in path, in order (whitespace-separated)."""
    return _read_text(Path(path)).split()


def read_noise_words(path: Path) -> frozenset[str]:
    return frozenset(word.lower() for word in _read_text(Path(path)).split())


def read_lines(doc_id: str) -> Iterator[str]:
    """Return the lines of the text file named by doc_id."""
    return iter(_read_text(Path(doc_id)).splitlines())


def resolve_under(base_dir: Path) -> Callable[[str], Iterator[str]]:
    """Reader that looks for relative doc_ids under base_dir before the cwd."""

    def read(doc_id: str) -> Iterator[str]:
        candidate = base_dir / doc_id
        if not Path(doc_id).is_absolute() and candidate.exists():
            return read_lines(str(candidate))
        return read_lines(doc_id)

    return read


def read_parquet_docs(path: Path) -> dict[str, Doc]:
    """Load a docs.parquet corpus (columns: doc_id, text, optional title)."""
    if not Path(path).exists():
        raise DocumentNotFound(f"No parquet corpus at {path}")
    df = pl.read_parquet(path)
    columns = [c for c in ("doc_id", "text", "title") if c in df.columns]
    return {
        row["doc_id"]: Doc.model_validate(row)
        for row in df.select(columns).iter_rows(named=True)
    }


def parquet_reader(docs: dict[str, Doc]) -> Callable[[str], Iterator[str]]:
    """Reader that resolves doc_ids against an in-memory parquet corpus."""

    def read(doc_id: str) -> Iterator[str]:
        doc = docs.get(doc_id)
        if doc is None:
            raise DocumentNotFound(f"No document with doc_id {doc_id!r} in corpus")
        return iter(doc.text.splitlines())

    return read
