"""
Equal-width histogram binning.

Observations are partitioned into ``bin_count`` contiguous bins spanning
[min, max]. Each bin is half-open [x0, x1) except the last one, which also
holds the maximum: the top bin is closed on both ends.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from surveyinsights.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_BIN_COUNT = 20


@dataclass(frozen=True)
class HistogramBin:
    """A histogram interval and the number of observations inside it."""

    x0: float
    x1: float
    count: int

    @property
    def width(self) -> float:
        """Interval width."""
        return self.x1 - self.x0


def bin_histogram(
    values: Sequence[float],
    bin_count: int = DEFAULT_BIN_COUNT,
) -> list[HistogramBin]:
    """
    Count observations per equal-width bin.

    Bin index is ``floor((value - min) / width)``, clamped into
    ``[0, bin_count - 1]`` so the maximum lands in the last bin. When every
    observation has the same value the range has zero width and a single
    bin [min, max] holds them all.

    Args:
        values: Numeric observations.
        bin_count: Number of bins.

    Returns:
        Bins in ascending order; empty if there are no observations.

    Raises:
        ValueError: If bin_count is smaller than 1.
    """
    if bin_count < 1:
        msg = f"bin_count must be at least 1, got {bin_count}"
        raise ValueError(msg)

    if len(values) == 0:
        log.debug("No observations to bin")
        return []

    data = np.asarray(values, dtype=float)
    lo = float(data.min())
    hi = float(data.max())

    if hi == lo:
        log.debug("Degenerate histogram range", value=lo, observations=len(data))
        return [HistogramBin(x0=lo, x1=hi, count=len(data))]

    width = (hi - lo) / bin_count
    indices = np.floor((data - lo) / width).astype(int)
    indices = np.clip(indices, 0, bin_count - 1)
    counts = np.bincount(indices, minlength=bin_count)

    # Edges computed from lo, with the top edge pinned to the exact maximum
    edges = [lo + i * width for i in range(bin_count)] + [hi]
    bins = [
        HistogramBin(x0=edges[i], x1=edges[i + 1], count=int(counts[i]))
        for i in range(bin_count)
    ]

    log.debug(
        "Binned observations",
        observations=len(data),
        bins=bin_count,
        min=lo,
        max=hi,
        width=width,
    )
    return bins
