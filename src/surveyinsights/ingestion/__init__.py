"""
Data ingestion layer for loading survey records with schema validation.

All raw data loading happens through this module; a failure here is fatal
for the whole pipeline run.
"""

from surveyinsights.ingestion.base import RecordSource, RecordSourceError, to_records
from surveyinsights.ingestion.survey import CsvRecordSource, load_survey_records

__all__ = [
    "CsvRecordSource",
    "RecordSource",
    "RecordSourceError",
    "load_survey_records",
    "to_records",
]
