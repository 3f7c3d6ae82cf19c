"""
Frequency tallies of categorical survey fields.

Single-valued fields (Employment, EdLevel, RemoteWork) count each distinct
answer once per record. Multi-valued fields (LanguageHaveWorkedWith) hold
several answers joined by a separator and count every token.
"""

from collections import Counter
from collections.abc import Iterable

from surveyinsights.aggregation.accessors import RawRecord, field_accessor, has_value
from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_SEPARATOR = ";"


def tally_field(records: Iterable[RawRecord], field: str) -> Counter[str]:
    """
    Count occurrences of each distinct value of a single-valued field.

    Records where the field is absent or empty contribute nothing.

    Args:
        records: Survey records.
        field: Field to tally.

    Returns:
        Counter mapping each exact value to its number of records.
    """
    read = field_accessor(field)
    counts: Counter[str] = Counter(
        value for value in map(read, records) if has_value(value)
    )
    log.debug("Tallied field", field=field, categories=len(counts), total=counts.total())
    return counts


def tally_multi_value(
    records: Iterable[RawRecord],
    field: str,
    separator: str = DEFAULT_SEPARATOR,
) -> Counter[str]:
    """
    Count every token of a separator-joined field.

    Tokens are not trimmed or normalized. A present value always yields at
    least one token, so a trailing separator or an empty string tallies an
    empty token. Only an absent field contributes nothing.

    Args:
        records: Survey records.
        field: Field to tally.
        separator: Token separator.

    Returns:
        Counter whose total equals the number of tokens seen.

    Raises:
        ValueError: If separator is empty.
    """
    if not separator:
        msg = "separator must be a non-empty string"
        raise ValueError(msg)

    read = field_accessor(field)
    counts: Counter[str] = Counter()
    for record in records:
        value = read(record)
        if value is None:
            continue
        counts.update(value.split(separator))

    log.debug(
        "Tallied multi-value field",
        field=field,
        separator=separator,
        categories=len(counts),
        tokens=counts.total(),
    )
    return counts
