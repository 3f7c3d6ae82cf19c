"""
Base classes and utilities for record sources.

A record source reads the raw survey table once and hands the aggregation
layer a list of plain records.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

import pandas as pd
from pandera.errors import SchemaError

from surveyinsights.aggregation.accessors import RawRecord
from surveyinsights.schemas.survey import build_record_schema
from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)


class RecordSourceError(RuntimeError):
    """Raised when the survey data cannot be fetched or parsed into records."""


class RecordSource(ABC):
    """
    Abstract base class for record sources.

    All sources validate the raw table against a schema of the configured
    fields before records are produced.
    """

    def __init__(self, fields: Iterable[str] = ()) -> None:
        """
        Initialize record source.

        Args:
            fields: Fields read downstream; used to build the schema.
        """
        self.fields = list(dict.fromkeys(fields))
        self.schema = build_record_schema(self.fields)

    @abstractmethod
    def _load_raw(self) -> pd.DataFrame:
        """Load the raw table. Implemented by subclasses."""
        ...

    def load(self, *, validate: bool = True) -> pd.DataFrame:
        """
        Load and optionally validate the raw table.

        Args:
            validate: Whether to validate against the record schema.

        Returns:
            Loaded (and optionally validated) DataFrame.

        Raises:
            RecordSourceError: If the table cannot be read, is empty, or
                fails validation.
        """
        log.info("Loading records", source=self.__class__.__name__)

        df = self._load_raw()
        if df.empty:
            msg = "Survey data is empty or could not be parsed"
            raise RecordSourceError(msg)
        log.info("Loaded raw data", rows=len(df), columns=len(df.columns))

        missing = [name for name in self.fields if name not in df.columns]
        if missing:
            log.warning("Configured fields missing from source", missing=missing)

        if validate:
            try:
                df = self.schema.validate(df)
            except SchemaError as e:
                msg = f"Survey data failed validation: {e}"
                raise RecordSourceError(msg) from e
            log.info("Schema validation passed")

        return df

    def records(self, *, validate: bool = True) -> list[RawRecord]:
        """
        Load the table as a list of records.

        Null cells become None; all other values are kept as text.

        Returns:
            One mapping per row, in source order.
        """
        df = self.load(validate=validate)
        return to_records(df)


def to_records(df: pd.DataFrame) -> list[RawRecord]:
    """Convert a DataFrame to records, mapping nulls to None."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")
