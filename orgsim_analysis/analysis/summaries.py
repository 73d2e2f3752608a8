"""Per-simulation-config summary rows built from a flat result batch.

The engine stores average performance, its standard deviation and the
end-state entropy on each simulation config.  ``summarize_by_config`` groups
results by ``sim_config_id`` and computes those values with one
``ResultAggregator`` per group.
"""

from __future__ import annotations

from typing import Any, Iterable

from orgsim_analysis.analysis.aggregation import ResultAggregator
from orgsim_analysis.config.constants import DEFAULT_HISTOGRAM_BIN_COUNT, SUMMARY_SCHEMA_VERSION
from orgsim_analysis.domain.records import Result


def group_by_config(results: Iterable[Any]) -> dict[int | None, list[Result]]:
    """Group results by ``sim_config_id`` in first-seen order."""
    groups: dict[int | None, list[Result]] = {}
    for raw in results:
        result = Result.coerce(raw)
        groups.setdefault(result.sim_config_id, []).append(result)
    return groups


def build_summary_row(
    sim_config_id: int | None,
    aggregator: ResultAggregator,
) -> dict[str, int | float | None]:
    """Flatten one aggregator into a row matching ``SUMMARY_SCHEMA``."""
    summary = aggregator.get_summary()
    return {
        "schema_version": SUMMARY_SCHEMA_VERSION,
        "sim_config_id": sim_config_id,
        "result_count": len(aggregator.get_results()),
        "histogram_bin_count": aggregator.get_histogram_bin_count(),
        "avg_performance": summary["avg_performance"],
        "stdev_performance": summary["stdev_performance"],
        "entropy": summary["entropy"],
    }


def summarize_by_config(
    results: Iterable[Any] | None,
    bin_count: int = DEFAULT_HISTOGRAM_BIN_COUNT,
) -> list[dict[str, int | float | None]]:
    """One summary row per simulation config; empty input gives no rows."""
    return [
        build_summary_row(config_id, ResultAggregator(group, bin_count))
        for config_id, group in group_by_config(results or ()).items()
    ]


def summary_to_dto(summary: dict[str, Any]) -> dict[str, Any]:
    """Rename summary keys to the engine's SimConfig field names."""
    return {
        "avgPerformance": summary.get("avg_performance"),
        "stdDevPerformance": summary.get("stdev_performance"),
        "entropy": summary.get("entropy"),
    }
