"""Visualization theme presets for analysis figures.

Themes are frozen dataclasses grouping the styling constants used by
``viz.render`` so that palettes can be swapped via ``--theme`` or
programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Heatmap colormaps
    probability_cmap: str = "viridis"
    coordination_cmap: str = "magma"
    state_cmap: str = "tab10"

    # Titles keyed by figure name
    figure_titles: dict[str, str] = field(default_factory=dict)

    annotate_threshold: int = 12
    """Largest matrix side for which cells get numeric annotations."""

    dpi: int = 150


_DEFAULT_FIGURE_TITLES: dict[str, str] = {
    "state_probabilities": "Agent state probabilities",
    "coordination": "Agent state coordination",
    "agent_states": "Agent states over time",
}

DEFAULT_THEME = Theme(figure_titles=_DEFAULT_FIGURE_TITLES)

PAPER_THEME = Theme(
    probability_cmap="Greys",
    coordination_cmap="Greys",
    state_cmap="Set2",
    figure_titles=_DEFAULT_FIGURE_TITLES,
    annotate_threshold=8,
    dpi=300,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
