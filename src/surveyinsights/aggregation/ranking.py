"""
Top-N selection over frequency tables.
"""

from collections.abc import Mapping


def rank_key(entry: tuple[str, int]) -> tuple[int, str]:
    """Sort key: count descending, then label ascending."""
    label, count = entry
    return (-count, label)


def select_top_n(
    frequencies: Mapping[str, int],
    n: int | None,
) -> list[tuple[str, int]]:
    """
    Rank a frequency table and keep the N largest entries.

    Ties on count are broken by ascending label, so the result does not
    depend on the insertion order of ``frequencies``.

    Args:
        frequencies: Label to count mapping.
        n: Number of entries to keep; None keeps the whole ranked table.

    Returns:
        (label, count) pairs, ``min(n, len(frequencies))`` long.

    Raises:
        ValueError: If n is negative.
    """
    if n is not None and n < 0:
        msg = f"n must be non-negative, got {n}"
        raise ValueError(msg)

    ranked = sorted(frequencies.items(), key=rank_key)
    return ranked if n is None else ranked[:n]
