"""
Configuration management with typed Pydantic models.

Chart definitions carry the survey field names, so the aggregation
code stays independent of any particular survey schema.
"""

from surveyinsights.config.loader import load_config
from surveyinsights.config.settings import (
    AggregationStrategy,
    ChartDefinition,
    ChartKind,
    DataSourceConfig,
    LabelFormatConfig,
    LoggingConfig,
    NumericBounds,
    OutputConfig,
    PipelineConfig,
    StyleConfig,
    default_chart_definitions,
)

__all__ = [
    "AggregationStrategy",
    "ChartDefinition",
    "ChartKind",
    "DataSourceConfig",
    "LabelFormatConfig",
    "LoggingConfig",
    "NumericBounds",
    "OutputConfig",
    "PipelineConfig",
    "StyleConfig",
    "default_chart_definitions",
    "load_config",
]
