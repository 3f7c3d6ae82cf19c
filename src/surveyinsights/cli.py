"""Command-line interface for the surveyinsights pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from surveyinsights.config.settings import PipelineConfig

app = typer.Typer(
    name="surveyinsights",
    help="Chart-ready summaries of developer survey results.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load(config: Path) -> "PipelineConfig":
    """Load the config and set up logging from it."""
    from surveyinsights.config.loader import load_config
    from surveyinsights.utils.logging import configure_logging

    console.print(f"[blue]Loading configuration from {config}[/blue]")
    try:
        pipeline_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=pipeline_config.logging.level,
        json_output=pipeline_config.logging.json_output,
    )
    return pipeline_config


@app.command()
def charts(
    config: ConfigOption,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory for chart config JSON files.",
        ),
    ] = None,
) -> None:
    """Build every configured chart and write its Chart.js config."""
    from surveyinsights.charts import JsonFileSurface, run_pipeline
    from surveyinsights.ingestion import RecordSourceError

    pipeline_config = _load(config)

    if output is None:
        output = pipeline_config.charts_dir

    console.print(f"[blue]Reading survey data from {pipeline_config.data.survey_path}[/blue]")
    console.print(f"[dim]Output: {output}[/dim]")

    surface = JsonFileSurface(output)
    try:
        result = run_pipeline(pipeline_config, surface)
    except RecordSourceError as e:
        console.print(f"[red]Failed to load survey data: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print()
    table = Table(title=f"Charts ({result.n_records} records)")
    table.add_column("Chart", style="cyan", no_wrap=True)
    table.add_column("Type", style="blue")
    table.add_column("Labels", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Status", justify="center")

    for chart_id, spec in result.specs.items():
        if chart_id in result.failed:
            status = "[red]Failed[/red]"
        else:
            status = "[green]Written[/green]"
        table.add_row(
            chart_id,
            spec.kind.value,
            str(len(spec.dataset.labels)),
            f"{sum(spec.dataset.values):,.0f}",
            status,
        )

    console.print(table)

    for chart_id, reason in result.failed.items():
        console.print(f"[red]{chart_id}: {reason}[/red]")

    if not result.ok:
        raise typer.Exit(code=1)

    console.print(f"\n[green]Saved to: {output}[/green]")


@app.command()
def summary(
    config: ConfigOption,
    chart: Annotated[
        str | None,
        typer.Option(
            "--chart",
            help="Only summarize the chart with this id.",
        ),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option(
            "--top",
            "-n",
            min=0,
            help="Show only the N largest categories (tally charts).",
        ),
    ] = None,
) -> None:
    """Print the aggregate behind each chart as a table."""
    from surveyinsights.aggregation import HistogramBin, select_top_n
    from surveyinsights.charts.datasets import format_bin_label
    from surveyinsights.charts.pipeline import aggregate
    from surveyinsights.ingestion import RecordSourceError, load_survey_records
    from surveyinsights.schemas import frequency_frame, histogram_frame

    pipeline_config = _load(config)

    if chart is not None:
        try:
            definitions = [pipeline_config.chart(chart)]
        except KeyError as e:
            console.print(f"[red]Unknown chart: {chart}[/red]")
            raise typer.Exit(code=1) from e
    else:
        definitions = pipeline_config.charts

    try:
        records = load_survey_records(pipeline_config)
    except RecordSourceError as e:
        console.print(f"[red]Failed to load survey data: {e}[/red]")
        raise typer.Exit(code=1) from e

    for definition in definitions:
        result = aggregate(records, definition)
        table = Table(title=f"{definition.title or definition.id} ({definition.field})")

        if result and isinstance(result[0], HistogramBin):
            df = histogram_frame(result)  # type: ignore[arg-type]
            table.add_column("Bin", style="cyan")
            table.add_column("Range", style="dim")
            table.add_column("Count", justify="right", style="green")
            for b, row in zip(result, df.to_dict(orient="records"), strict=True):
                table.add_row(
                    format_bin_label(b, definition.label_format),  # type: ignore[arg-type]
                    f"{row['x0']:,.0f} - {row['x1']:,.0f}",
                    str(row["count"]),
                )
        else:
            entries = result if top is None else select_top_n(dict(result), top)  # type: ignore[arg-type]
            df = frequency_frame(entries)  # type: ignore[arg-type]
            table.add_column("Label", style="cyan")
            table.add_column("Count", justify="right", style="green")
            for row in df.to_dict(orient="records"):
                label = escape(row["label"]) if row["label"] else "[dim](empty)[/dim]"
                table.add_row(label, str(row["count"]))

        console.print(table)
        console.print(f"[dim]Total: {int(df['count'].sum())}[/dim]\n")


@app.command()
def validate(config: ConfigOption) -> None:
    """Validate the survey file against the configured fields."""
    from surveyinsights.ingestion import CsvRecordSource, RecordSourceError

    pipeline_config = _load(config)
    console.print("[blue]Running schema validation...[/blue]")

    source = CsvRecordSource(pipeline_config.data, fields=pipeline_config.field_names)
    try:
        df = source.load(validate=True)
    except RecordSourceError as e:
        console.print(f"[red]Validation failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Configured Fields", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Status", justify="center")
    table.add_column("Non-empty", justify="right")

    missing = []
    for name in pipeline_config.field_names:
        if name not in df.columns:
            missing.append(name)
            table.add_row(name, "[yellow]Missing[/yellow]", "-")
            continue
        column = df[name]
        non_empty = int((column.notna() & (column != "")).sum())
        table.add_row(name, "[green]Present[/green]", f"{non_empty}/{len(df)}")

    console.print(table)

    if missing:
        console.print(
            f"[yellow]Fields missing from {source.path}: {', '.join(missing)}[/yellow]"
        )
        raise typer.Exit(code=1)

    console.print(f"[green]All {len(pipeline_config.field_names)} fields present[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from surveyinsights import __version__

    console.print(f"surveyinsights version {__version__}")


if __name__ == "__main__":
    app()
