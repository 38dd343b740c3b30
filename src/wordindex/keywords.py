"""Keyword extraction and per-document keyword counting."""

from collections import Counter
from collections.abc import Iterable, Set

from wordindex.data_models.occurrence import Occurrence


def get_keyword(word: str, noise_words: Set[str]) -> str | None:
    """Return word as a keyword, or None if it does not qualify.

    A keyword is a run of letters optionally followed by trailing punctuation,
    lower-cased, and not a noise word:

    get_keyword("Apple.", ...)  -> "apple"
    get_keyword("don't", ...)   -> None
    get_keyword("!!!", ...)     -> None
    """
    i = 0
    while i < len(word) and word[i].isalpha():
        i += 1
    j = i
    while j < len(word) and not word[j].isalpha():
        j += 1
    if j < len(word):
        return None  # letters after punctuation
    keyword = word[:i].lower()
    if not keyword.isalpha() or keyword in noise_words:
        return None
    return keyword


def load_keywords(
    doc_id: str, lines: Iterable[str], noise_words: Set[str]
) -> dict[str, Occurrence]:
    """Count every keyword in one document's lines."""
    counts: Counter[str] = Counter()
    for line in lines:
        for word in line.split():
            keyword = get_keyword(word, noise_words)
            if keyword is not None:
                counts[keyword] += 1
    return {
        keyword: Occurrence(doc_id=doc_id, frequency=n)
        for keyword, n in counts.items()
    }
