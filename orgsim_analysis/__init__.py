"""Post-processing statistics for multi-agent organisational simulation runs."""

from orgsim_analysis.analysis import ResultAggregator, TrajectoryAnalyzer
from orgsim_analysis.domain import Result, Snapshot

__all__ = ["Result", "ResultAggregator", "Snapshot", "TrajectoryAnalyzer"]

__version__ = "0.1.0"
