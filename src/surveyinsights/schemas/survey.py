"""
Pandera schemas for raw survey responses.

Every survey cell is kept as text; empty cells stay empty strings and
configured NA tokens become nulls.
"""

from collections.abc import Iterable

import pandera.pandas as pa
from pandera.typing import Series


class SurveyResponseSchema(pa.DataFrameModel):
    """
    Schema for the Stack Overflow developer survey columns used by the
    reference dashboard.
    """

    LanguageHaveWorkedWith: Series[str] = pa.Field(
        nullable=True,
        description="Languages worked with, ';'-separated",
    )
    Employment: Series[str] = pa.Field(
        nullable=True,
        description="Employment status",
    )
    EdLevel: Series[str] = pa.Field(
        nullable=True,
        description="Highest education level",
    )
    RemoteWork: Series[str] = pa.Field(
        nullable=True,
        description="Remote work situation",
    )
    ConvertedCompYearly: Series[str] = pa.Field(
        nullable=True,
        description="Yearly compensation in USD, as text",
    )

    class Config:
        """Schema configuration."""

        name = "SurveyResponseSchema"
        strict = False  # Allow extra columns
        coerce = False


def build_record_schema(
    fields: Iterable[str],
    *,
    required: bool = False,
) -> pa.DataFrameSchema:
    """
    Build a schema of nullable text columns for the given fields.

    Args:
        fields: Column names read by the configured charts.
        required: Whether every field must exist as a column.

    Returns:
        DataFrameSchema accepting extra columns.
    """
    return pa.DataFrameSchema(
        {
            name: pa.Column(str, nullable=True, required=required)
            for name in dict.fromkeys(fields)
        },
        name="SurveyRecordSchema",
        strict=False,
    )
