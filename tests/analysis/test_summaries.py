from __future__ import annotations

import pytest

from orgsim_analysis.analysis.summaries import (
    build_summary_row,
    group_by_config,
    summarize_by_config,
    summary_to_dto,
)
from orgsim_analysis.analysis.aggregation import ResultAggregator
from orgsim_analysis.config.constants import SUMMARY_SCHEMA_VERSION


def _row(config_id, performance, board=1):
    return {
        "simConfigId": config_id,
        "board": [board],
        "agentStates": [0],
        "plant": [],
        "reporting": [],
        "priorityTensor": [],
        "performance": performance,
    }


def test_group_by_config_first_seen_order() -> None:
    groups = group_by_config([_row(7, 1), _row(3, 2), _row(7, 3), _row(None, 4)])
    assert list(groups) == [7, 3, None]
    assert [r.performance for r in groups[7]] == [1, 3]


def test_summarize_by_config_one_row_per_config() -> None:
    results = [_row(1, 100), _row(1, 200), _row(1, 300), _row(2, 50, board=2)]
    rows = summarize_by_config(results, bin_count=10)
    assert [row["sim_config_id"] for row in rows] == [1, 2]
    first, second = rows
    assert first["result_count"] == 3
    assert first["avg_performance"] == pytest.approx(200.0)
    assert first["stdev_performance"] == pytest.approx(100.0)
    assert first["entropy"] == 0.0
    assert first["histogram_bin_count"] == 10
    assert first["schema_version"] == SUMMARY_SCHEMA_VERSION
    assert second["result_count"] == 1
    assert second["stdev_performance"] is None


def test_summarize_by_config_empty() -> None:
    assert summarize_by_config([]) == []
    assert summarize_by_config(None) == []


def test_build_summary_row_for_empty_aggregator() -> None:
    row = build_summary_row(None, ResultAggregator([], 5))
    assert row["result_count"] == 0
    assert row["entropy"] is None
    assert row["avg_performance"] is None


def test_summary_to_dto_uses_engine_names() -> None:
    dto = summary_to_dto({"avg_performance": 1.5, "stdev_performance": None, "entropy": 0.0})
    assert dto == {"avgPerformance": 1.5, "stdDevPerformance": None, "entropy": 0.0}
