"""Configuration layer: constants and typed config dataclasses."""

from orgsim_analysis.config.constants import (
    DEFAULT_HISTOGRAM_BIN_COUNT,
    MIN_RESULTS_FOR_STDEV,
    STATE_VECTOR_FIELDS,
    SUMMARY_SCHEMA_VERSION,
)
from orgsim_analysis.config.types import AnalysisConfig

__all__ = [
    "AnalysisConfig",
    "DEFAULT_HISTOGRAM_BIN_COUNT",
    "MIN_RESULTS_FOR_STDEV",
    "STATE_VECTOR_FIELDS",
    "SUMMARY_SCHEMA_VERSION",
]
