"""
Rendering surfaces.

A surface owns the chart instances: it decides where a finished ChartSpec
goes and replaces whatever it previously showed for the same chart id.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from surveyinsights.charts.datasets import ChartSpec
from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)


class MissingRenderTargetError(LookupError):
    """Raised when a surface has no target for a chart id."""

    def __init__(self, chart_id: str) -> None:
        super().__init__(f"No render target for chart id {chart_id!r}")
        self.chart_id = chart_id


class RenderSurface(ABC):
    """Abstract base class for rendering surfaces."""

    @abstractmethod
    def has_target(self, chart_id: str) -> bool:
        """Whether the surface can show a chart with this id."""
        ...

    @abstractmethod
    def _draw(self, spec: ChartSpec) -> None:
        """Draw or store the chart. Implemented by subclasses."""
        ...

    def render(self, spec: ChartSpec) -> None:
        """
        Render a chart, replacing any previous instance with the same id.

        Raises:
            MissingRenderTargetError: If the surface has no target for the id.
        """
        if not self.has_target(spec.chart_id):
            raise MissingRenderTargetError(spec.chart_id)
        self._draw(spec)


class MemorySurface(RenderSurface):
    """
    Keeps rendered charts in a dict keyed by chart id.

    Args:
        targets: Chart ids that can be rendered; None accepts any id.
    """

    def __init__(self, targets: Iterable[str] | None = None) -> None:
        self.targets = set(targets) if targets is not None else None
        self.charts: dict[str, ChartSpec] = {}

    def has_target(self, chart_id: str) -> bool:
        return self.targets is None or chart_id in self.targets

    def _draw(self, spec: ChartSpec) -> None:
        self.charts[spec.chart_id] = spec


class JsonFileSurface(RenderSurface):
    """
    Writes each chart as a Chart.js configuration file ``{chart_id}.json``.

    Args:
        output_dir: Directory receiving the files (created on demand).
        targets: Chart ids that can be rendered; None accepts any id.
    """

    def __init__(self, output_dir: Path, targets: Iterable[str] | None = None) -> None:
        self.output_dir = output_dir
        self.targets = set(targets) if targets is not None else None
        self.written: dict[str, Path] = {}

    def has_target(self, chart_id: str) -> bool:
        return self.targets is None or chart_id in self.targets

    def path_for(self, chart_id: str) -> Path:
        """Output file of a chart."""
        return self.output_dir / f"{chart_id}.json"

    def _draw(self, spec: ChartSpec) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(spec.chart_id)
        with path.open("w", encoding="utf-8") as f:
            json.dump(spec.to_chartjs(), f, ensure_ascii=False, indent=2)
        self.written[spec.chart_id] = path
        log.info("Wrote chart config", chart_id=spec.chart_id, path=str(path))
