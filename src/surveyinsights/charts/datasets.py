"""
Chart datasets: labels, value series and style, ready for a rendering surface.

Builders here only package finished aggregates; they never count anything.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from itertools import cycle, islice
from typing import Any

from surveyinsights.aggregation.histogram import HistogramBin
from surveyinsights.config.settings import ChartKind, LabelFormatConfig, StyleConfig


@dataclass(frozen=True)
class ChartSeries:
    """
    One value series with its style.

    Attributes:
        data: Values, parallel to the dataset labels.
        background_color: A single fill color, or one color per value.
        border_color: Border color, if drawn.
        border_width: Border width in pixels, if drawn.
        label: Optional series name shown in legends/tooltips.
    """

    data: tuple[float, ...]
    background_color: str | tuple[str, ...]
    border_color: str | None = None
    border_width: int | None = None
    label: str | None = None

    def to_chartjs(self) -> dict[str, Any]:
        """Serialize to a Chart.js dataset mapping."""
        payload: dict[str, Any] = {
            "data": list(self.data),
            "backgroundColor": (
                list(self.background_color)
                if isinstance(self.background_color, tuple)
                else self.background_color
            ),
        }
        if self.label is not None:
            payload["label"] = self.label
        if self.border_color is not None:
            payload["borderColor"] = self.border_color
        if self.border_width is not None:
            payload["borderWidth"] = self.border_width
        return payload


@dataclass(frozen=True)
class ChartDataset:
    """Ordered labels plus one or more parallel value series."""

    labels: tuple[str, ...]
    series: tuple[ChartSeries, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Ensure every series is parallel to the labels."""
        for index, series in enumerate(self.series):
            if len(series.data) != len(self.labels):
                msg = (
                    f"Series {index} has {len(series.data)} values "
                    f"for {len(self.labels)} labels"
                )
                raise ValueError(msg)
            if (
                isinstance(series.background_color, tuple)
                and len(series.background_color) != len(self.labels)
            ):
                msg = (
                    f"Series {index} has {len(series.background_color)} colors "
                    f"for {len(self.labels)} labels"
                )
                raise ValueError(msg)

    @property
    def values(self) -> tuple[float, ...]:
        """Values of the first series."""
        return self.series[0].data if self.series else ()

    def to_chartjs(self) -> dict[str, Any]:
        """Serialize to the Chart.js ``data`` mapping."""
        return {
            "labels": list(self.labels),
            "datasets": [series.to_chartjs() for series in self.series],
        }


def palette_colors(palette: Sequence[str], n: int) -> tuple[str, ...]:
    """Take n colors from the palette, cycling when it runs out."""
    if not palette:
        msg = "palette must contain at least one color"
        raise ValueError(msg)
    return tuple(islice(cycle(palette), n))


def _series(kind: ChartKind, values: Sequence[float], style: StyleConfig) -> ChartSeries:
    if kind.is_radial:
        return ChartSeries(
            data=tuple(values),
            background_color=palette_colors(style.palette, len(values)),
        )
    return ChartSeries(
        data=tuple(values),
        background_color=style.bar_color,
        border_color=style.bar_border_color,
        border_width=style.border_width,
    )


def build_ranked_dataset(
    entries: Sequence[tuple[str, int]],
    kind: ChartKind,
    style: StyleConfig,
) -> ChartDataset:
    """
    Package (label, count) pairs, keeping their order.

    Args:
        entries: Ranked or otherwise ordered (label, count) pairs.
        kind: Chart kind; pie/doughnut get one palette color per label.
        style: Colors and borders.

    Returns:
        ChartDataset with one series.
    """
    labels = tuple(label for label, _ in entries)
    values = [count for _, count in entries]
    return ChartDataset(labels=labels, series=(_series(kind, values, style),))


def build_frequency_dataset(
    frequencies: Mapping[str, int],
    kind: ChartKind,
    style: StyleConfig,
) -> ChartDataset:
    """Package a frequency map in its own iteration order."""
    return build_ranked_dataset(list(frequencies.items()), kind, style)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def format_bin_label(
    histogram_bin: HistogramBin,
    label_format: LabelFormatConfig | None = None,
) -> str:
    """Format a bin as e.g. '45k-60k'."""
    fmt = label_format or LabelFormatConfig()
    x0 = round_half_up(histogram_bin.x0 / fmt.scale)
    x1 = round_half_up(histogram_bin.x1 / fmt.scale)
    return f"{x0}{fmt.suffix}-{x1}{fmt.suffix}"


def build_histogram_dataset(
    bins: Sequence[HistogramBin],
    style: StyleConfig,
    label_format: LabelFormatConfig | None = None,
    kind: ChartKind = ChartKind.BAR,
) -> ChartDataset:
    """
    Package histogram bins, one label per bin in ascending order.

    Args:
        bins: Histogram bins.
        style: Colors and borders.
        label_format: Scale and suffix of bin edge labels.
        kind: Chart kind (bar unless configured otherwise).

    Returns:
        ChartDataset with bin counts as values.
    """
    labels = tuple(format_bin_label(b, label_format) for b in bins)
    values = [b.count for b in bins]
    return ChartDataset(labels=labels, series=(_series(kind, values, style),))


@dataclass(frozen=True)
class ChartSpec:
    """A finished chart: dataset plus display options for one render target."""

    chart_id: str
    kind: ChartKind
    dataset: ChartDataset
    options: dict[str, Any] = field(default_factory=dict)

    def to_chartjs(self) -> dict[str, Any]:
        """Serialize to a complete Chart.js configuration."""
        return {
            "type": self.kind.value,
            "data": self.dataset.to_chartjs(),
            "options": self.options,
        }
