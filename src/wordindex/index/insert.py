"""Binary-search insertion into a descending-frequency occurrence list."""

from wordindex.data_models.occurrence import Occurrence


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """Move the last element of occurrences into its ranked position, in place.

    occurrences[:-1] must already be sorted by descending frequency. The new
    element lands after every existing element of equal frequency, i.e. just
    before the first element with a strictly smaller frequency.

    Returns the midpoint indices probed by the binary search, in order; empty
    when there was nothing to search.
    """
    if not occurrences:
        raise ValueError("Cannot insert into an empty occurrence list")
    new = occurrences[-1]
    lo, hi = 0, len(occurrences) - 2
    mids: list[int] = []
    while lo <= hi:
        mid = (lo + hi) // 2
        mids.append(mid)
        if occurrences[mid].frequency < new.frequency:
            hi = mid - 1
        else:
            lo = mid + 1
    if lo != len(occurrences) - 1:
        occurrences.pop()
        occurrences.insert(lo, new)
    return mids
