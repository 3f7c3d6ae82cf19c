"""
Schema definitions using Pandera for data validation.

Raw survey input and tabulated aggregation output are validated here.
"""

from surveyinsights.schemas.output import (
    FrequencyTableSchema,
    HistogramBinSchema,
    frequency_frame,
    histogram_frame,
)
from surveyinsights.schemas.survey import SurveyResponseSchema, build_record_schema

__all__ = [
    "FrequencyTableSchema",
    "HistogramBinSchema",
    "SurveyResponseSchema",
    "build_record_schema",
    "frequency_frame",
    "histogram_frame",
]
