"""Tests for chart datasets and display options."""

import pytest

from surveyinsights.aggregation import HistogramBin
from surveyinsights.charts import (
    ChartDataset,
    ChartSeries,
    ChartSpec,
    build_frequency_dataset,
    build_histogram_dataset,
    build_options,
    build_ranked_dataset,
    format_bin_label,
)
from surveyinsights.charts.datasets import palette_colors, round_half_up
from surveyinsights.config import (
    AggregationStrategy,
    ChartDefinition,
    ChartKind,
    LabelFormatConfig,
    StyleConfig,
    default_chart_definitions,
)


@pytest.fixture
def style() -> StyleConfig:
    """Style with a short palette to exercise cycling."""
    return StyleConfig(
        palette=["red", "green", "blue"],
        bar_color="teal",
        bar_border_color="navy",
        border_width=2,
    )


class TestChartDataset:
    """Tests for the ChartDataset invariants."""

    def test_length_mismatch(self) -> None:
        """Test that values must be parallel to labels."""
        with pytest.raises(ValueError, match="2 values for 3 labels"):
            ChartDataset(
                labels=("a", "b", "c"),
                series=(ChartSeries(data=(1, 2), background_color="red"),),
            )

    def test_color_mismatch(self) -> None:
        """Test that per-category colors must match the label count."""
        with pytest.raises(ValueError, match="colors"):
            ChartDataset(
                labels=("a", "b"),
                series=(ChartSeries(data=(1, 2), background_color=("red",)),),
            )

    def test_empty_dataset(self) -> None:
        """Test that an empty dataset is valid."""
        dataset = ChartDataset(labels=(), series=(ChartSeries(data=(), background_color=()),))
        assert dataset.values == ()
        assert dataset.to_chartjs() == {
            "labels": [],
            "datasets": [{"data": [], "backgroundColor": []}],
        }


class TestBuilders:
    """Tests for dataset builders."""

    def test_bar_uses_single_color(self, style: StyleConfig) -> None:
        """Test that bar charts repeat one fill color with borders."""
        dataset = build_ranked_dataset([("Go", 2), ("Python", 1)], ChartKind.BAR, style)
        assert dataset.labels == ("Go", "Python")
        assert dataset.values == (2, 1)
        assert dataset.to_chartjs()["datasets"] == [
            {
                "data": [2, 1],
                "backgroundColor": "teal",
                "borderColor": "navy",
                "borderWidth": 2,
            }
        ]

    def test_pie_cycles_palette(self, style: StyleConfig) -> None:
        """Test that pie charts get one color per category, cycled."""
        entries = [(f"c{i}", i) for i in range(5)]
        dataset = build_ranked_dataset(entries, ChartKind.PIE, style)
        series = dataset.series[0]
        assert series.background_color == ("red", "green", "blue", "red", "green")
        assert series.border_color is None
        assert "borderWidth" not in series.to_chartjs()

    def test_frequency_keeps_map_order(self, style: StyleConfig) -> None:
        """Test that frequency maps are packaged in their own order."""
        dataset = build_frequency_dataset({"b": 1, "a": 5}, ChartKind.DOUGHNUT, style)
        assert dataset.labels == ("b", "a")
        assert dataset.values == (1, 5)

    def test_histogram_labels(self, style: StyleConfig) -> None:
        """Test bin labels rounded to thousands."""
        bins = [
            HistogramBin(x0=1_000.0, x1=15_500.0, count=3),
            HistogramBin(x0=15_500.0, x1=30_000.0, count=4),
        ]
        dataset = build_histogram_dataset(bins, style)
        assert dataset.labels == ("1k-16k", "16k-30k")
        assert dataset.values == (3, 4)
        assert dataset.series[0].background_color == "teal"

    def test_palette_colors(self) -> None:
        """Test palette cycling helper."""
        assert palette_colors(["a"], 3) == ("a", "a", "a")
        assert palette_colors(["a", "b"], 0) == ()
        with pytest.raises(ValueError):
            palette_colors([], 1)


class TestLabelFormatting:
    """Tests for histogram label formatting."""

    def test_round_half_up(self) -> None:
        """Test that halves round up."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.4) == 2
        assert round_half_up(-0.5) == 0

    def test_custom_format(self) -> None:
        """Test a custom scale and suffix."""
        fmt = LabelFormatConfig(scale=1_000_000, suffix="M")
        label = format_bin_label(HistogramBin(0.0, 2_500_000.0, 1), fmt)
        assert label == "0M-3M"


class TestOptions:
    """Tests for chart display options."""

    def test_horizontal_bar(self) -> None:
        """Test options of the language chart."""
        definition = default_chart_definitions()[0]
        options = build_options(definition, StyleConfig())
        assert options["indexAxis"] == "y"
        assert options["plugins"]["legend"] == {"display": False}
        assert options["plugins"]["title"]["text"] == definition.title
        assert options["plugins"]["title"]["font"] == {"size": 16}
        assert options["maintainAspectRatio"] is False
        assert "scales" not in options

    def test_axis_titles(self) -> None:
        """Test options of the salary chart."""
        definition = default_chart_definitions()[3]
        options = build_options(definition, StyleConfig())
        assert options["scales"]["x"]["title"]["text"] == "Salary (USD)"
        assert options["scales"]["y"]["title"]["text"] == "Frequency"
        assert "indexAxis" not in options

    def test_pie_legend_right(self) -> None:
        """Test that pie charts put the legend on the right."""
        definition = ChartDefinition(
            id="employment-chart",
            kind=ChartKind.PIE,
            title="Employment",
            field="Employment",
            strategy=AggregationStrategy.CATEGORICAL_TALLY,
        )
        options = build_options(definition, StyleConfig())
        assert options["plugins"]["legend"] == {"position": "right"}
        assert "scales" not in options

    def test_chart_spec_serialization(self, style: StyleConfig) -> None:
        """Test the complete Chart.js configuration."""
        dataset = build_ranked_dataset([("Remote", 2)], ChartKind.DOUGHNUT, style)
        spec = ChartSpec(chart_id="remote-chart", kind=ChartKind.DOUGHNUT, dataset=dataset)
        payload = spec.to_chartjs()
        assert payload["type"] == "doughnut"
        assert payload["data"]["labels"] == ["Remote"]
        assert payload["options"] == {}
