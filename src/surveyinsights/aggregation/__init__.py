"""
Aggregation of survey records into chart-ready summaries.

Every function here is pure: it reads a batch of records (or the output of
another aggregation) and returns a new value.
"""

from surveyinsights.aggregation.accessors import (
    FieldAccessor,
    RawRecord,
    field_accessor,
    has_value,
)
from surveyinsights.aggregation.histogram import HistogramBin, bin_histogram
from surveyinsights.aggregation.numeric import extract_numeric, parse_float
from surveyinsights.aggregation.ranking import rank_key, select_top_n
from surveyinsights.aggregation.tally import tally_field, tally_multi_value

__all__ = [
    "FieldAccessor",
    "HistogramBin",
    "RawRecord",
    "bin_histogram",
    "extract_numeric",
    "field_accessor",
    "has_value",
    "parse_float",
    "rank_key",
    "select_top_n",
    "tally_field",
    "tally_multi_value",
]
