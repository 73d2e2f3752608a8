"""Trajectory and cross-run analysis."""

from orgsim_analysis.analysis.aggregation import (
    ResultAggregator,
    quantize,
    shannon_entropy,
    state_vector,
)
from orgsim_analysis.analysis.summaries import summarize_by_config, summary_to_dto
from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer

__all__ = [
    "ResultAggregator",
    "TrajectoryAnalyzer",
    "quantize",
    "shannon_entropy",
    "state_vector",
    "summarize_by_config",
    "summary_to_dto",
]
