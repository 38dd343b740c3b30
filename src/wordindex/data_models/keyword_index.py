"""Read-only keyword index: keyword → occurrences ranked by frequency."""

from collections.abc import Mapping
from types import MappingProxyType

import polars as pl
from pydantic import BaseModel, ConfigDict, Field, field_validator

from wordindex.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}

_STATS_SCHEMA = {
    "keyword": pl.String,
    "n_docs": pl.Int64,
    "total_frequency": pl.Int64,
}


class KeywordIndex(BaseModel):
    """The full index. Each list is sorted by descending frequency."""

    model_config = ConfigDict(frozen=True)

    entries: Mapping[str, tuple[Occurrence, ...]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("entries", mode="after")
    @classmethod
    def freeze_entries(
        cls, v: Mapping[str, tuple[Occurrence, ...]]
    ) -> Mapping[str, tuple[Occurrence, ...]]:
        return MappingProxyType(dict(v))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.entries

    def occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        """Return the ranked occurrences of keyword, or () if it is not indexed."""
        return self.entries.get(keyword, ())

    def keywords(self) -> list[str]:
        return sorted(self.entries)

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.doc_id, occ.frequency, rank)
            for keyword, occs in self.entries.items()
            for rank, occ in enumerate(occs, start=1)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

    def keyword_stats(self) -> pl.DataFrame:
        """Per-keyword document count and total frequency, most frequent first."""
        df = self.to_polars()
        if df.is_empty():
            return pl.DataFrame(schema=_STATS_SCHEMA)
        return (
            df.group_by("keyword")
            .agg(
                pl.len().cast(pl.Int64).alias("n_docs"),
                pl.col("frequency").sum().alias("total_frequency"),
            )
            .sort(["total_frequency", "keyword"], descending=[True, False])
        )
