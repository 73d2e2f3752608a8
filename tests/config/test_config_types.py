from __future__ import annotations

import pytest

from orgsim_analysis.config import AnalysisConfig


def test_defaults() -> None:
    config = AnalysisConfig()
    assert config.bin_count == 100
    assert config.state_names == ()


def test_zero_bins_allowed() -> None:
    assert AnalysisConfig(bin_count=0).bin_count == 0


def test_negative_bins_rejected() -> None:
    with pytest.raises(ValueError, match="bin_count"):
        AnalysisConfig(bin_count=-1)


@pytest.mark.parametrize("names", [("a", "a"), ("a", "")])
def test_invalid_state_names(names: tuple[str, ...]) -> None:
    with pytest.raises(ValueError, match="state_names"):
        AnalysisConfig(state_names=names)


def test_from_csv_strips_whitespace() -> None:
    config = AnalysisConfig.from_csv("idle, work ,report", bin_count=7)
    assert config.state_names == ("idle", "work", "report")
    assert config.bin_count == 7


@pytest.mark.parametrize("raw", ["", None])
def test_from_csv_empty(raw: str | None) -> None:
    assert AnalysisConfig.from_csv(raw).state_names == ()
