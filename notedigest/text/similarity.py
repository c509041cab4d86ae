"""Set-overlap similarity measures over content-token sets."""

from collections.abc import Set


def overlap_coefficient(a: Set[str], b: Set[str]) -> float:
    """Compute ``|A & B| / min(|A|, |B|)``.

    Favors containment: a short question fully covered by a long
    paragraph scores 1.0. Returns 0.0 when either set is empty.
    """
    if not a or not b:
        return 0.0
    return len(a & b) / min(len(a), len(b))


def jaccard(a: Set[str], b: Set[str]) -> float:
    """Compute ``|A & B| / |A | B|``, or 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union
