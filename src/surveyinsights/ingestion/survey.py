"""
Survey CSV record source.

Reads the public survey results file with every cell as text. Only the
configured NA tokens are treated as missing; everything else, including
literal strings such as 'NA', is left for the aggregations to judge.
"""

from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from surveyinsights.aggregation.accessors import RawRecord
from surveyinsights.config.settings import DataSourceConfig, PipelineConfig
from surveyinsights.ingestion.base import RecordSource, RecordSourceError
from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)


class CsvRecordSource(RecordSource):
    """Record source backed by a delimited text file."""

    def __init__(self, config: DataSourceConfig, fields: Iterable[str] = ()) -> None:
        """
        Initialize CSV record source.

        Args:
            config: Data source configuration.
            fields: Fields read downstream.
        """
        super().__init__(fields)
        self.config = config

    @property
    def path(self) -> Path:
        """Resolved survey file path."""
        return self.config.survey_path

    def _load_raw(self) -> pd.DataFrame:
        """Read the survey file as text columns."""
        path = self.path
        if not path.exists():
            msg = f"Survey file not found: {path}"
            raise RecordSourceError(msg)

        try:
            df = pd.read_csv(
                path,
                sep=self.config.delimiter,
                dtype=str,
                encoding=self.config.encoding,
                keep_default_na=False,
                na_values=self.config.na_values or None,
            )
        except pd.errors.EmptyDataError as e:
            msg = f"Survey file is empty: {path}"
            raise RecordSourceError(msg) from e
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            msg = f"Could not parse survey file {path}: {e}"
            raise RecordSourceError(msg) from e

        log.debug("Read survey file", path=str(path), rows=len(df))
        return df


def load_survey_records(config: PipelineConfig, *, validate: bool = True) -> list[RawRecord]:
    """
    Convenience function to load the survey records of a pipeline config.

    Args:
        config: Pipeline configuration.
        validate: Whether to validate against the record schema.

    Returns:
        Records in file order.
    """
    source = CsvRecordSource(config.data, fields=config.field_names)
    return source.records(validate=validate)
