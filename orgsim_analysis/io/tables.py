"""In-memory Arrow tables for trajectories and summary rows."""

from __future__ import annotations

from typing import Any

import pyarrow as pa

from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer, state_index
from orgsim_analysis.io.schemas import SUMMARY_SCHEMA, TRAJECTORY_SCHEMA


def trajectory_table(analyzer: TrajectoryAnalyzer) -> pa.Table:
    """Long-format table with one row per (tick, agent).

    Snapshots without ``agent_states`` contribute no rows, and neither do
    entries that are not integral state indices.
    """
    columns: dict[str, list[int]] = {"clock_tick": [], "agent_id": [], "state": []}
    for point in analyzer:
        for agent_id, state in enumerate(point.agent_states or ()):
            index = state_index(state)
            if index is None:
                continue
            columns["clock_tick"].append(int(point.clock_tick))
            columns["agent_id"].append(agent_id)
            columns["state"].append(index)
    return pa.Table.from_pydict(columns, schema=TRAJECTORY_SCHEMA)


def summary_table(rows: list[dict[str, Any]]) -> pa.Table:
    """Build a summary table from ``summarize_by_config`` rows."""
    return pa.Table.from_pylist(rows, schema=SUMMARY_SCHEMA)
