"""Matplotlib heatmaps for single-run trajectory statistics."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import numpy as np

from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer
from orgsim_analysis.viz.theme import DEFAULT_THEME, Theme


def _annotate_cells(ax: plt.Axes, matrix: np.ndarray, cmap_name: str) -> None:
    """Draw numeric annotations; text colour follows cell luminance."""
    cmap = plt.get_cmap(cmap_name)
    norm = mcolors.Normalize(vmin=0.0, vmax=1.0)
    for r in range(matrix.shape[0]):
        for c in range(matrix.shape[1]):
            val = matrix[r, c]
            rgba = cmap(norm(val))
            luminance = 0.2126 * rgba[0] + 0.7152 * rgba[1] + 0.0722 * rgba[2]
            ax.text(
                c,
                r,
                f"{val:.2f}",
                ha="center",
                va="center",
                fontsize=8,
                color="white" if luminance < 0.5 else "black",
            )


def _save(fig: plt.Figure, output_path: Path, dpi: int) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
    return output_path


def _require_agents(analyzer: TrajectoryAnalyzer) -> None:
    if len(analyzer) == 0 or analyzer.agent_count == 0:
        raise ValueError("Trajectory has no snapshots with agent states to render")


def render_state_probabilities(
    analyzer: TrajectoryAnalyzer,
    state_names: Sequence[str],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Heatmap of ``agent_state_probabilities``: agents as rows, states as columns."""
    _require_agents(analyzer)
    if not state_names:
        raise ValueError("state_names must not be empty")
    matrix = np.asarray(analyzer.agent_state_probabilities(state_names), dtype=float)

    width = max(4, 0.8 * len(state_names) + 2)
    fig, ax = plt.subplots(figsize=(width, max(3, 0.3 * len(matrix))))
    image = ax.imshow(matrix, cmap=theme.probability_cmap, vmin=0.0, vmax=1.0, aspect="auto")
    ax.set_xticks(range(len(state_names)))
    ax.set_xticklabels(state_names, rotation=45, ha="right")
    ax.set_ylabel("Agent")
    ax.set_title(theme.figure_titles.get("state_probabilities", "State probabilities"))
    if max(matrix.shape) <= theme.annotate_threshold:
        _annotate_cells(ax, matrix, theme.probability_cmap)
    fig.colorbar(image, ax=ax, label="Fraction of ticks")
    return _save(fig, output_path, theme.dpi)


def render_coordination_matrix(
    analyzer: TrajectoryAnalyzer,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Heatmap of ``agent_state_coordination_matrix``."""
    _require_agents(analyzer)
    matrix = np.asarray(analyzer.agent_state_coordination_matrix(), dtype=float)

    side = max(4, 0.4 * analyzer.agent_count + 2)
    fig, ax = plt.subplots(figsize=(side, side))
    image = ax.imshow(matrix, cmap=theme.coordination_cmap, vmin=0.0, vmax=1.0)
    ax.set_xlabel("Agent")
    ax.set_ylabel("Agent")
    ax.set_title(theme.figure_titles.get("coordination", "Coordination"))
    if analyzer.agent_count <= theme.annotate_threshold:
        _annotate_cells(ax, matrix, theme.coordination_cmap)
    fig.colorbar(image, ax=ax, label="Fraction of ticks in same state")
    return _save(fig, output_path, theme.dpi)


def render_agent_states(
    analyzer: TrajectoryAnalyzer,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Agent-by-tick raster of raw state indices; missing entries left blank."""
    _require_agents(analyzer)
    grid = np.array(
        [[np.nan if s is None else float(s) for s in row] for row in analyzer.agent_states()],
        dtype=float,
    )
    ticks = [point.clock_tick for point in analyzer]

    fig, ax = plt.subplots(figsize=(8, max(3, 0.3 * analyzer.agent_count)))
    image = ax.imshow(
        np.ma.masked_invalid(grid),
        cmap=theme.state_cmap,
        aspect="auto",
        interpolation="nearest",
    )
    n_labels = min(len(ticks), 10)
    positions = np.linspace(0, len(ticks) - 1, n_labels).round().astype(int)
    ax.set_xticks(positions)
    ax.set_xticklabels([str(ticks[i]) for i in positions])
    ax.set_xlabel("Clock tick")
    ax.set_ylabel("Agent")
    ax.set_title(theme.figure_titles.get("agent_states", "Agent states"))
    fig.colorbar(image, ax=ax, label="State index")
    return _save(fig, output_path, theme.dpi)
