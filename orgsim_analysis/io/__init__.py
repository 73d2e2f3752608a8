"""Result loading and Arrow table contracts."""

from orgsim_analysis.io.loaders import load_results
from orgsim_analysis.io.schemas import SUMMARY_SCHEMA, TRAJECTORY_SCHEMA
from orgsim_analysis.io.tables import summary_table, trajectory_table

__all__ = [
    "SUMMARY_SCHEMA",
    "TRAJECTORY_SCHEMA",
    "load_results",
    "summary_table",
    "trajectory_table",
]
