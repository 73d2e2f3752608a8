"""Figures for trajectory statistics."""

from orgsim_analysis.viz.render import (
    render_agent_states,
    render_coordination_matrix,
    render_state_probabilities,
)
from orgsim_analysis.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "Theme",
    "get_theme",
    "render_agent_states",
    "render_coordination_matrix",
    "render_state_probabilities",
]
