"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Survey field names live in chart definitions, never in processing code.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ChartKind(str, Enum):
    """Chart types understood by the rendering surface."""

    BAR = "bar"
    PIE = "pie"
    DOUGHNUT = "doughnut"

    @property
    def is_radial(self) -> bool:
        """Whether the chart colors each category separately."""
        return self in (ChartKind.PIE, ChartKind.DOUGHNUT)


class AggregationStrategy(str, Enum):
    """How a chart's field is aggregated."""

    CATEGORICAL_TALLY = "categorical-tally"
    MULTI_VALUE_TALLY = "multi-value-tally"
    NUMERIC_HISTOGRAM = "numeric-histogram"


class NumericBounds(BaseModel):
    """Exclusive validity bounds for numeric observations."""

    model_config = ConfigDict(frozen=True)

    low: float = Field(default=0.0, description="Values must be strictly greater")
    high: float = Field(default=300_000.0, description="Values must be strictly smaller")

    @model_validator(mode="after")
    def validate_order(self) -> "NumericBounds":
        """Ensure the interval is not empty."""
        if self.high <= self.low:
            msg = f"bounds.high must be greater than bounds.low, got ({self.low}, {self.high})"
            raise ValueError(msg)
        return self

    def as_tuple(self) -> tuple[float, float]:
        """Return bounds as a (low, high) tuple."""
        return (self.low, self.high)


class LabelFormatConfig(BaseModel):
    """Formatting of histogram bin labels (e.g. '50k-65k')."""

    model_config = ConfigDict(frozen=True)

    scale: float = Field(default=1000.0, gt=0, description="Divisor applied to bin edges")
    suffix: str = Field(default="k", description="Suffix appended to each scaled edge")


class ChartDefinition(BaseModel):
    """A single chart: which field to read and how to aggregate and show it."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Chart identifier / render target id")
    kind: ChartKind
    title: str = Field(default="", description="Displayed chart title")
    field: str = Field(min_length=1, description="Record field to aggregate")
    strategy: AggregationStrategy

    # Strategy parameters
    top_n: int | None = Field(default=None, ge=0, description="Keep only the N largest")
    separator: str = Field(default=";", min_length=1, description="Multi-value separator")
    bins: int = Field(default=20, ge=1, description="Histogram bin count")
    bounds: NumericBounds = Field(default_factory=NumericBounds)
    label_format: LabelFormatConfig = Field(default_factory=LabelFormatConfig)

    # Display options passed alongside the dataset
    index_axis: Literal["x", "y"] | None = Field(
        default=None, description="Set to 'y' for horizontal bar charts"
    )
    x_axis_title: str | None = None
    y_axis_title: str | None = None
    legend_position: Literal["top", "bottom", "left", "right"] | None = None

    @model_validator(mode="after")
    def validate_strategy_parameters(self) -> "ChartDefinition":
        """Reject parameter combinations that have no meaning."""
        if self.strategy == AggregationStrategy.NUMERIC_HISTOGRAM and self.top_n is not None:
            msg = f"Chart {self.id!r}: top_n does not apply to numeric-histogram charts"
            raise ValueError(msg)
        return self


class StyleConfig(BaseModel):
    """Colors and borders applied to chart datasets."""

    model_config = ConfigDict(frozen=True)

    palette: list[str] = Field(
        default_factory=lambda: [
            "rgba(255, 99, 132, 0.6)",
            "rgba(54, 162, 235, 0.6)",
            "rgba(255, 206, 86, 0.6)",
            "rgba(75, 192, 192, 0.6)",
            "rgba(153, 102, 255, 0.6)",
        ],
        min_length=1,
        description="Category colors for pie/doughnut charts (cycled)",
    )
    bar_color: str = Field(default="rgba(75, 192, 192, 0.6)")
    bar_border_color: str = Field(default="rgba(75, 192, 192, 1)")
    border_width: int = Field(default=1, ge=0)
    title_font_size: int = Field(default=16, ge=1)


class DataSourceConfig(BaseModel):
    """Location and parsing options of the survey file."""

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("./data"), description="Root directory for all data files"
    )
    survey: Path = Field(
        default=Path("survey_results_public.csv"),
        description="Survey CSV path, relative to data_root",
    )
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    encoding: str = Field(default="utf-8")
    na_values: list[str] = Field(
        default_factory=list,
        description="Cell texts treated as missing (e.g. 'NA')",
    )

    @property
    def survey_path(self) -> Path:
        """Survey file path resolved against data_root."""
        return self.data_root / self.survey


class OutputConfig(BaseModel):
    """Output paths configuration.

    Structure: ./output/{project}/charts
    """

    model_config = ConfigDict(frozen=True)

    output_root: Path = Field(
        default=Path("./output"), description="Root directory for all outputs"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


def default_chart_definitions() -> list[ChartDefinition]:
    """Charts of the Stack Overflow developer survey dashboard."""
    return [
        ChartDefinition(
            id="language-chart",
            kind=ChartKind.BAR,
            title="Programming language popularity",
            field="LanguageHaveWorkedWith",
            strategy=AggregationStrategy.MULTI_VALUE_TALLY,
            top_n=10,
            index_axis="y",
        ),
        ChartDefinition(
            id="employment-chart",
            kind=ChartKind.PIE,
            title="Employment status",
            field="Employment",
            strategy=AggregationStrategy.CATEGORICAL_TALLY,
        ),
        ChartDefinition(
            id="education-chart",
            kind=ChartKind.PIE,
            title="Education level",
            field="EdLevel",
            strategy=AggregationStrategy.CATEGORICAL_TALLY,
        ),
        ChartDefinition(
            id="salary-chart",
            kind=ChartKind.BAR,
            title="Salary distribution",
            field="ConvertedCompYearly",
            strategy=AggregationStrategy.NUMERIC_HISTOGRAM,
            bins=20,
            x_axis_title="Salary (USD)",
            y_axis_title="Frequency",
        ),
        ChartDefinition(
            id="remote-chart",
            kind=ChartKind.DOUGHNUT,
            title="Remote work",
            field="RemoteWork",
            strategy=AggregationStrategy.CATEGORICAL_TALLY,
        ),
    ]


class PipelineConfig(BaseModel):
    """Complete pipeline configuration.

    The project name drives the output directory structure: ./output/{project}/
    """

    model_config = ConfigDict(frozen=True)

    project: str = Field(description="Project identifier (e.g., 'so-survey-2023')")

    data: DataSourceConfig = Field(default_factory=DataSourceConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    charts: list[ChartDefinition] = Field(default_factory=default_chart_definitions)

    @field_validator("charts")
    @classmethod
    def validate_unique_ids(cls, v: list[ChartDefinition]) -> list[ChartDefinition]:
        """Ensure every chart id is used once."""
        seen: set[str] = set()
        duplicates = []
        for chart in v:
            if chart.id in seen:
                duplicates.append(chart.id)
            seen.add(chart.id)
        if duplicates:
            msg = f"Duplicate chart ids: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    @property
    def field_names(self) -> list[str]:
        """Distinct record fields read by the configured charts, in order."""
        return list(dict.fromkeys(chart.field for chart in self.charts))

    @property
    def charts_dir(self) -> Path:
        """Path to the chart config output directory."""
        return self.output.output_root / self.project / "charts"

    def chart(self, chart_id: str) -> ChartDefinition:
        """Look up a chart definition by id."""
        for chart in self.charts:
            if chart.id == chart_id:
                return chart
        msg = f"No chart with id {chart_id!r}"
        raise KeyError(msg)

    def summary(self) -> dict[str, Any]:
        """Short description used in log events."""
        return {
            "project": self.project,
            "survey": str(self.data.survey_path),
            "charts": [chart.id for chart in self.charts],
        }
