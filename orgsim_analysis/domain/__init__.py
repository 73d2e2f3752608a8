"""Typed domain records consumed from the simulation engine."""

from orgsim_analysis.domain.records import PriorityTensor, Result, Snapshot, Vector

__all__ = ["PriorityTensor", "Result", "Snapshot", "Vector"]
