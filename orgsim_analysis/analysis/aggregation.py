"""Cross-run aggregation: quantized-state entropy and performance statistics.

``ResultAggregator`` is built once from a batch of final-state results.  Each
result is flattened into a state vector (board, agent states, plant,
reporting, then the priority tensor), every dimension is split into
``bin_count`` equal-width bins between the batch minimum and maximum, and the
quantized vectors are counted into a histogram.  The normalised histogram is
the discrete distribution whose Shannon entropy measures how diverse the
batch's end states are.
"""

from __future__ import annotations

import logging
import math
import statistics
from typing import Any, Iterable, Sequence

from orgsim_analysis.config.constants import (
    DEFAULT_HISTOGRAM_BIN_COUNT,
    MIN_RESULTS_FOR_STDEV,
    STATE_VECTOR_FIELDS,
)
from orgsim_analysis.domain.records import Result
from orgsim_analysis.tensor import flatten_priority_tensor

logger = logging.getLogger(__name__)

StateKey = tuple[float, ...]


def state_vector(result: Result) -> list[float]:
    """Concatenate a result's numeric fields into one flat vector."""
    vector: list[float] = []
    for name in STATE_VECTOR_FIELDS:
        value = getattr(result, name)
        if name == "priority_tensor":
            value = flatten_priority_tensor(value)
        vector.extend(value)
    return vector


def bin_sizes(minimum: Sequence[float], maximum: Sequence[float], bin_count: int) -> list[float]:
    """Per-dimension bin width; 0 everywhere when ``bin_count <= 0``."""
    if bin_count <= 0:
        return [0.0] * len(minimum)
    return [(hi - lo) / bin_count for lo, hi in zip(minimum, maximum, strict=False)]


def quantize(
    vector: Sequence[float], minimum: Sequence[float], sizes: Sequence[float]
) -> StateKey:
    """Map each value to the left edge of its bin.

    A zero-width dimension always maps to bin 0, i.e. to its minimum.  So does
    a value whose bin offset is not finite (NaN or infinite measurements).
    """
    quantized: list[float] = []
    for value, lo, size in zip(vector, minimum, sizes, strict=False):
        index = 0
        if size != 0:
            offset = (value - lo) / size
            if math.isfinite(offset):
                index = math.floor(offset)
        quantized.append(lo if index == 0 else index * size + lo)
    return tuple(quantized)


def shannon_entropy(probabilities: Iterable[float]) -> float:
    """Entropy in bits; zero-probability terms contribute nothing."""
    total = 0.0
    for p in probabilities:
        if p > 0:
            total += p * math.log2(p)
    return max(0.0, -total)


def _performance_value(result: Result) -> float:
    value = result.performance
    if value is None:
        return 0.0
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        logger.debug("Non-numeric performance %r counted as 0", value)
        return 0.0
    if not math.isfinite(numeric):
        logger.debug("Non-finite performance %r counted as 0", value)
        return 0.0
    return numeric


class ResultAggregator:
    """Histogram, entropy and performance statistics over a result batch."""

    def __init__(
        self, results: Iterable[Any] | None, bin_count: int = DEFAULT_HISTOGRAM_BIN_COUNT
    ) -> None:
        self._results: tuple[Result, ...] = tuple(Result.coerce(r) for r in (results or ()))
        self._bin_count = bin_count
        self._histogram_min: list[float] = []
        self._histogram_max: list[float] = []
        self._histogram_bin_sizes: list[float] = []
        self._histogram: dict[StateKey, float] | None = None

        if not self._results:
            return
        self._histogram = self._build_histogram()

    def _build_histogram(self) -> dict[StateKey, float]:
        vectors = [state_vector(result) for result in self._results]

        self._histogram_min = list(vectors[0])
        self._histogram_max = list(vectors[0])
        for vector in vectors:
            for i, value in enumerate(vector):
                if i >= len(self._histogram_min):
                    self._histogram_min.append(value)
                    self._histogram_max.append(value)
                    continue
                if value < self._histogram_min[i]:
                    self._histogram_min[i] = value
                if value > self._histogram_max[i]:
                    self._histogram_max[i] = value
        self._histogram_bin_sizes = bin_sizes(
            self._histogram_min, self._histogram_max, self._bin_count
        )

        counts: dict[StateKey, int] = {}
        if self._histogram_max != self._histogram_min:
            for vector in vectors:
                key = quantize(vector, self._histogram_min, self._histogram_bin_sizes)
                counts[key] = counts.get(key, 0) + 1
        else:
            # Every result is the same point: one bucket, no quantization.
            logger.debug("All %d state vectors identical; single histogram bucket", len(vectors))
            counts[tuple(self._histogram_max)] = len(vectors)

        n = len(vectors)
        return {key: count / n for key, count in counts.items()}

    @property
    def histogram(self) -> dict[StateKey, float] | None:
        """Copy of the normalised histogram, or ``None`` for an empty batch."""
        return None if self._histogram is None else dict(self._histogram)

    @property
    def histogram_min(self) -> list[float]:
        return list(self._histogram_min)

    @property
    def histogram_max(self) -> list[float]:
        return list(self._histogram_max)

    @property
    def histogram_bin_sizes(self) -> list[float]:
        return list(self._histogram_bin_sizes)

    def get_results(self) -> tuple[Result, ...]:
        return self._results

    def get_histogram_bin_count(self) -> int:
        return self._bin_count

    def get_entropy(self) -> float | None:
        """Shannon entropy (bits) of the quantized-state distribution."""
        if self._histogram is None:
            return None
        return shannon_entropy(self._histogram.values())

    def get_performance(self) -> dict[str, float | None]:
        """Mean and sample standard deviation of run performance.

        Results without a finite performance value (missing, NaN or
        infinite) count as 0 rather than being excluded, which pulls the mean
        down when many runs lack one.  The standard deviation is reported only
        for three or more results.
        """
        values = [_performance_value(result) for result in self._results]
        avg_performance: float | None = None
        stdev_performance: float | None = None
        if values:
            avg_performance = statistics.fmean(values)
            if len(values) >= MIN_RESULTS_FOR_STDEV:
                stdev_performance = statistics.stdev(values, xbar=avg_performance)
        return {
            "avg_performance": avg_performance,
            "stdev_performance": stdev_performance,
        }

    def get_summary(self) -> dict[str, float | None]:
        performance = self.get_performance()
        return {
            "avg_performance": performance["avg_performance"],
            "stdev_performance": performance["stdev_performance"],
            "entropy": self.get_entropy(),
        }
