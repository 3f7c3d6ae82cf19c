"""
Pandera schemas for aggregation output tables.
"""

from collections.abc import Iterable, Sequence

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from surveyinsights.aggregation.histogram import HistogramBin


class FrequencyTableSchema(pa.DataFrameModel):
    """
    Schema for a frequency table (one row per category).
    """

    label: Series[str] = pa.Field(description="Category label")
    count: Series[int] = pa.Field(ge=0, description="Number of occurrences")

    class Config:
        """Schema configuration."""

        name = "FrequencyTableSchema"
        strict = True
        coerce = True


class HistogramBinSchema(pa.DataFrameModel):
    """
    Schema for histogram bins.

    Bins must be ordered and contiguous; see the dataframe checks.
    """

    x0: Series[float] = pa.Field(description="Lower bin edge")
    x1: Series[float] = pa.Field(description="Upper bin edge")
    count: Series[int] = pa.Field(ge=0, description="Observations in the bin")

    @pa.dataframe_check
    def edges_ordered(cls, df: pd.DataFrame) -> Series[bool]:
        """Upper edge must not be below the lower edge."""
        return df["x1"] >= df["x0"]

    @pa.dataframe_check
    def bins_contiguous(cls, df: pd.DataFrame) -> bool:
        """Each bin starts where the previous one ended."""
        return bool((df["x0"].iloc[1:].to_numpy() == df["x1"].iloc[:-1].to_numpy()).all())

    class Config:
        """Schema configuration."""

        name = "HistogramBinSchema"
        strict = True
        coerce = True


def frequency_frame(entries: Iterable[tuple[str, int]]) -> pd.DataFrame:
    """
    Tabulate (label, count) pairs, keeping their order.

    Returns:
        DataFrame validated against FrequencyTableSchema.
    """
    df = pd.DataFrame(list(entries), columns=["label", "count"])
    return FrequencyTableSchema.validate(df)


def histogram_frame(bins: Sequence[HistogramBin]) -> pd.DataFrame:
    """
    Tabulate histogram bins in ascending order.

    Returns:
        DataFrame validated against HistogramBinSchema.
    """
    df = pd.DataFrame(
        {
            "x0": [b.x0 for b in bins],
            "x1": [b.x1 for b in bins],
            "count": [b.count for b in bins],
        }
    )
    return HistogramBinSchema.validate(df)
