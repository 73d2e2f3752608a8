"""Centralized defaults for result aggregation and trajectory analysis.

Consuming modules import from here rather than defining inline literals.
"""

from __future__ import annotations

DEFAULT_HISTOGRAM_BIN_COUNT = 100
"""Bins per state-vector dimension when quantizing a result batch."""

MIN_RESULTS_FOR_STDEV = 3
"""Smallest batch size for which a sample standard deviation is reported."""

SUMMARY_SCHEMA_VERSION = 1
"""Version stamped on every summary row built for downstream reporting."""

STATE_VECTOR_FIELDS: tuple[str, ...] = (
    "board",
    "agent_states",
    "plant",
    "reporting",
    "priority_tensor",
)
"""Result fields concatenated, in this order, into a state vector."""
