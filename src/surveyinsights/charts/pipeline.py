"""
Chart pipeline implementation.

Runs every configured chart definition over one batch of survey records:
aggregate the field, package the result as a dataset, and hand it to the
rendering surface.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from surveyinsights.aggregation.accessors import RawRecord
from surveyinsights.aggregation.histogram import HistogramBin, bin_histogram
from surveyinsights.aggregation.numeric import extract_numeric
from surveyinsights.aggregation.ranking import select_top_n
from surveyinsights.aggregation.tally import tally_field, tally_multi_value
from surveyinsights.charts.datasets import (
    ChartDataset,
    ChartSpec,
    build_histogram_dataset,
    build_ranked_dataset,
)
from surveyinsights.charts.options import build_options
from surveyinsights.charts.surface import MissingRenderTargetError, RenderSurface
from surveyinsights.config.settings import (
    AggregationStrategy,
    ChartDefinition,
    PipelineConfig,
    StyleConfig,
)
from surveyinsights.ingestion.survey import load_survey_records
from surveyinsights.utils.logging import get_logger, log_context

log = get_logger(__name__)

Aggregate = list[tuple[str, int]] | list[HistogramBin]


@dataclass
class PipelineResult:
    """
    Result of a pipeline run.

    Attributes:
        specs: Built charts by id, in definition order.
        rendered: Ids handed to the surface successfully.
        failed: Ids that could not be rendered, with the reason.
        n_records: Number of records processed.
    """

    specs: dict[str, ChartSpec] = field(default_factory=dict)
    rendered: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    n_records: int = 0

    @property
    def ok(self) -> bool:
        """Whether every chart was rendered."""
        return not self.failed


def aggregate(records: Sequence[RawRecord], definition: ChartDefinition) -> Aggregate:
    """
    Aggregate records according to a chart definition.

    Tallies keep first-seen order unless ``top_n`` is set, in which case
    they are ranked and truncated. Histograms return their bins.

    Args:
        records: Survey records.
        definition: Chart definition.

    Returns:
        Ordered (label, count) pairs, or histogram bins.
    """
    strategy = definition.strategy

    if strategy == AggregationStrategy.NUMERIC_HISTOGRAM:
        observations = extract_numeric(
            records, definition.field, definition.bounds.as_tuple()
        )
        return bin_histogram(observations, definition.bins)

    if strategy == AggregationStrategy.MULTI_VALUE_TALLY:
        counts = tally_multi_value(records, definition.field, definition.separator)
    else:
        counts = tally_field(records, definition.field)

    if definition.top_n is None:
        return list(counts.items())
    return select_top_n(counts, definition.top_n)


def build_dataset(
    result: Aggregate,
    definition: ChartDefinition,
    style: StyleConfig,
) -> ChartDataset:
    """Package an aggregate as a dataset for the definition's chart kind."""
    if definition.strategy == AggregationStrategy.NUMERIC_HISTOGRAM:
        return build_histogram_dataset(
            result,  # type: ignore[arg-type]
            style,
            definition.label_format,
            kind=definition.kind,
        )
    return build_ranked_dataset(result, definition.kind, style)  # type: ignore[arg-type]


def build_chart(
    records: Sequence[RawRecord],
    definition: ChartDefinition,
    style: StyleConfig,
) -> ChartSpec:
    """
    Build one finished chart from records.

    Args:
        records: Survey records.
        definition: Chart definition.
        style: Style configuration.

    Returns:
        ChartSpec with dataset and display options.
    """
    result = aggregate(records, definition)
    dataset = build_dataset(result, definition, style)
    log.debug("Built dataset", labels=len(dataset.labels), total=sum(dataset.values))
    return ChartSpec(
        chart_id=definition.id,
        kind=definition.kind,
        dataset=dataset,
        options=build_options(definition, style),
    )


class ChartPipeline:
    """
    Chart pipeline for survey summaries.

    Every run rebuilds all charts from the given records; nothing is kept
    between runs except what the surface chooses to keep.
    """

    def __init__(
        self,
        config: PipelineConfig,
        surface: RenderSurface | None = None,
    ) -> None:
        """
        Initialize chart pipeline.

        Args:
            config: Pipeline configuration.
            surface: Rendering surface; if None charts are only built.
        """
        self.config = config
        self.surface = surface

    def run(self, records: Iterable[RawRecord]) -> PipelineResult:
        """
        Build and render every configured chart.

        A chart whose render target is missing is logged and skipped; the
        remaining charts are still processed.

        Args:
            records: Survey records.

        Returns:
            PipelineResult with built specs and render outcome.
        """
        batch = list(records)
        result = PipelineResult(n_records=len(batch))
        log.info("Building charts", records=len(batch), charts=len(self.config.charts))

        for definition in self.config.charts:
            with log_context(chart_id=definition.id):
                spec = build_chart(batch, definition, self.config.style)
                result.specs[definition.id] = spec

                if self.surface is None:
                    continue

                try:
                    self.surface.render(spec)
                except MissingRenderTargetError as e:
                    log.error("Render target not found", error=str(e))
                    result.failed[definition.id] = str(e)
                    continue
                result.rendered.append(definition.id)

        log.info(
            "Chart pipeline finished",
            built=len(result.specs),
            rendered=len(result.rendered),
            failed=len(result.failed),
        )
        return result


def run_pipeline(
    config: PipelineConfig,
    surface: RenderSurface | None = None,
    records: Iterable[RawRecord] | None = None,
) -> PipelineResult:
    """
    Convenience function to run the chart pipeline.

    Args:
        config: Pipeline configuration.
        surface: Rendering surface.
        records: Records to use; loaded from the configured survey file if None.

    Returns:
        PipelineResult with built specs and render outcome.

    Raises:
        RecordSourceError: If the survey file cannot be loaded.
    """
    log.info("Running chart pipeline", **config.summary())
    if records is None:
        records = load_survey_records(config)
    pipeline = ChartPipeline(config, surface)
    return pipeline.run(records)
