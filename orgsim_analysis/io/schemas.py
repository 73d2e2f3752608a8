"""Arrow schema definitions for tables handed to downstream reporting.

Trajectory and summary tables are built against these static schemas so that
every consumer works against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

TRAJECTORY_SCHEMA = pa.schema(
    [
        ("clock_tick", pa.int64()),
        ("agent_id", pa.int64()),
        ("state", pa.int64()),
    ]
)

SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("sim_config_id", pa.int64()),
        ("result_count", pa.int64()),
        ("histogram_bin_count", pa.int64()),
        ("avg_performance", pa.float64()),
        ("stdev_performance", pa.float64()),
        ("entropy", pa.float64()),
    ]
)

# Columns a Parquet result file must carry, each as accepted spellings.
RESULT_REQUIRED_COLUMNS: tuple[tuple[str, ...], ...] = (("agentStates", "agent_states"),)
