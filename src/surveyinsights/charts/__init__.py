"""
Chart datasets, display options, rendering surfaces and the pipeline
that ties them to the aggregations.
"""

from surveyinsights.charts.datasets import (
    ChartDataset,
    ChartSeries,
    ChartSpec,
    build_frequency_dataset,
    build_histogram_dataset,
    build_ranked_dataset,
    format_bin_label,
)
from surveyinsights.charts.options import build_options
from surveyinsights.charts.pipeline import (
    ChartPipeline,
    PipelineResult,
    build_chart,
    run_pipeline,
)
from surveyinsights.charts.surface import (
    JsonFileSurface,
    MemorySurface,
    MissingRenderTargetError,
    RenderSurface,
)

__all__ = [
    "ChartDataset",
    "ChartPipeline",
    "ChartSeries",
    "ChartSpec",
    "JsonFileSurface",
    "MemorySurface",
    "MissingRenderTargetError",
    "PipelineResult",
    "RenderSurface",
    "build_chart",
    "build_frequency_dataset",
    "build_histogram_dataset",
    "build_options",
    "build_ranked_dataset",
    "format_bin_label",
    "run_pipeline",
]
