from __future__ import annotations

from orgsim_analysis.analysis.summaries import summarize_by_config
from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer
from orgsim_analysis.io.schemas import SUMMARY_SCHEMA, TRAJECTORY_SCHEMA
from orgsim_analysis.io.tables import summary_table, trajectory_table


def test_trajectory_table_long_format() -> None:
    analyzer = TrajectoryAnalyzer(
        [
            {"clockTick": 0, "agentStates": [0, 1]},
            {"clockTick": 1, "agentStates": [2]},
            {"clockTick": 2},
        ]
    )
    table = trajectory_table(analyzer)
    assert table.schema.equals(TRAJECTORY_SCHEMA)
    assert table.to_pydict() == {
        "clock_tick": [0, 0, 1],
        "agent_id": [0, 1, 0],
        "state": [0, 1, 2],
    }


def test_trajectory_table_skips_non_integral_states() -> None:
    analyzer = TrajectoryAnalyzer([{"clockTick": 4, "agentStates": [1.7, "busy", 2.0, None, 3]}])
    table = trajectory_table(analyzer)
    assert table.to_pydict() == {
        "clock_tick": [4, 4],
        "agent_id": [2, 4],
        "state": [2, 3],
    }


def test_trajectory_table_empty() -> None:
    table = trajectory_table(TrajectoryAnalyzer())
    assert table.num_rows == 0
    assert table.schema.equals(TRAJECTORY_SCHEMA)


def test_summary_table_matches_schema() -> None:
    results = [
        {"simConfigId": 1, "board": [1], "agentStates": [0], "performance": 5.0},
        {"simConfigId": 2, "board": [2], "agentStates": [1]},
    ]
    table = summary_table(summarize_by_config(results, bin_count=4))
    assert table.schema.equals(SUMMARY_SCHEMA)
    assert table.num_rows == 2
    assert table.column("sim_config_id").to_pylist() == [1, 2]
    assert table.column("stdev_performance").to_pylist() == [None, None]
    assert table.column("avg_performance").to_pylist() == [5.0, 0.0]


def test_summary_table_empty() -> None:
    assert summary_table([]).num_rows == 0
