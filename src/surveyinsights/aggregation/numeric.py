"""
Numeric observations extracted from survey fields.
"""

from collections.abc import Iterable

from surveyinsights.aggregation.accessors import RawRecord, field_accessor
from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_BOUNDS: tuple[float, float] = (0.0, 300_000.0)


def parse_float(value: str | None) -> float | None:
    """Parse a field value as float, returning None when it is not a number."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def extract_numeric(
    records: Iterable[RawRecord],
    field: str,
    bounds: tuple[float, float] = DEFAULT_BOUNDS,
) -> list[float]:
    """
    Extract valid numeric observations of a field, in record order.

    A value is kept only if it parses as a float and lies strictly inside
    ``bounds``. Unparsable and out-of-range values are dropped without
    distinction; NaN fails every comparison and is dropped too.

    Args:
        records: Survey records.
        field: Numeric field (e.g. ConvertedCompYearly).
        bounds: Exclusive (low, high) validity bounds.

    Returns:
        Valid observations.
    """
    low, high = bounds
    read = field_accessor(field)

    observations: list[float] = []
    n_seen = 0
    for record in records:
        n_seen += 1
        number = parse_float(read(record))
        if number is not None and low < number < high:
            observations.append(number)

    log.debug(
        "Extracted numeric observations",
        field=field,
        records=n_seen,
        kept=len(observations),
        dropped=n_seen - len(observations),
    )
    return observations
