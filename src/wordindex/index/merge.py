from wordindex.data_models.occurrence import Occurrence
from wordindex.index.insert import insert_last_occurrence


def merge_keywords(
    entries: dict[str, list[Occurrence]], kws: dict[str, Occurrence]
) -> None:
    """Fold one document's keyword occurrences into entries, keeping ranks.

    Not idempotent: merging the same document twice counts it twice.
    """
    for keyword, occ in kws.items():
        existing = entries.get(keyword)
        if existing is None:
            entries[keyword] = [occ]
            continue
        existing.append(occ)
        insert_last_occurrence(existing)
