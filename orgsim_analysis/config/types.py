"""Configuration dataclasses for analysis runs."""

from __future__ import annotations

from dataclasses import dataclass

from orgsim_analysis.config.constants import DEFAULT_HISTOGRAM_BIN_COUNT

__all__ = ["AnalysisConfig"]


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters shared by the CLI and batch summaries.

    ``bin_count == 0`` is accepted: it collapses every dimension into a single
    bin rather than failing.
    """

    bin_count: int = DEFAULT_HISTOGRAM_BIN_COUNT
    state_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.bin_count < 0:
            raise ValueError("bin_count must be >= 0")
        if len(set(self.state_names)) != len(self.state_names):
            raise ValueError("state_names must be unique")
        if any(not name for name in self.state_names):
            raise ValueError("state_names must not contain empty names")

    @classmethod
    def from_csv(cls, state_names: str | None, bin_count: int = DEFAULT_HISTOGRAM_BIN_COUNT):
        """Build a config from a comma-separated state-name string."""
        names = tuple(n.strip() for n in state_names.split(",")) if state_names else ()
        return cls(bin_count=bin_count, state_names=names)
