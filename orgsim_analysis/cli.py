from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from orgsim_analysis.analysis.aggregation import ResultAggregator
from orgsim_analysis.analysis.summaries import summarize_by_config, summary_to_dto
from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer
from orgsim_analysis.config import DEFAULT_HISTOGRAM_BIN_COUNT, AnalysisConfig
from orgsim_analysis.domain.records import Result
from orgsim_analysis.io.loaders import load_results
from orgsim_analysis.io.tables import summary_table
from orgsim_analysis.viz.render import (
    render_agent_states,
    render_coordination_matrix,
    render_state_probabilities,
)
from orgsim_analysis.viz.theme import get_theme

logger = logging.getLogger(__name__)


def _add_results_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--results",
        type=Path,
        required=True,
        help="Result batch as a .json array or .parquet file",
    )


def _add_trajectory_arguments(p: argparse.ArgumentParser) -> None:
    _add_results_argument(p)
    p.add_argument("--run-index", type=int, default=0, help="Position of the run in the batch")
    p.add_argument(
        "--state-names",
        type=str,
        required=True,
        help="Comma-separated agent state names, in index order",
    )


def _build_summary_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("summary", help="Entropy and performance over the whole batch")
    p.set_defaults(func=_handle_summary)
    _add_results_argument(p)
    p.add_argument("--bin-count", type=int, default=DEFAULT_HISTOGRAM_BIN_COUNT)
    p.add_argument(
        "--dto",
        action="store_true",
        help="Emit the engine's camelCase field names",
    )


def _build_by_config_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("by-config", help="One summary row per simulation config")
    p.set_defaults(func=_handle_by_config)
    _add_results_argument(p)
    p.add_argument("--bin-count", type=int, default=DEFAULT_HISTOGRAM_BIN_COUNT)


def _build_trajectory_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("trajectory", help="Agent-level statistics for one run")
    p.set_defaults(func=_handle_trajectory)
    _add_trajectory_arguments(p)


def _build_plot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("plot", help="Render trajectory heatmaps for one run")
    p.set_defaults(func=_handle_plot)
    _add_trajectory_arguments(p)
    p.add_argument("--output-dir", type=Path, required=True)
    p.add_argument("--theme", type=str, default="default", help="Theme preset (default, paper)")


def _select_run(results: list[Result], run_index: int) -> TrajectoryAnalyzer:
    if not 0 <= run_index < len(results):
        raise ValueError(f"run-index {run_index} out of range for {len(results)} results")
    result = results[run_index]
    if result.state_space is None:
        logger.warning("Run %d carries no state space; statistics will be empty", run_index)
    return result.trajectory()


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _handle_summary(args: argparse.Namespace) -> None:
    config = AnalysisConfig(bin_count=args.bin_count)
    aggregator = ResultAggregator(load_results(args.results), config.bin_count)
    summary = aggregator.get_summary()
    _print_json(summary_to_dto(summary) if args.dto else summary)


def _handle_by_config(args: argparse.Namespace) -> None:
    config = AnalysisConfig(bin_count=args.bin_count)
    rows = summarize_by_config(load_results(args.results), config.bin_count)
    _print_json(summary_table(rows).to_pylist())


def _handle_trajectory(args: argparse.Namespace) -> None:
    config = AnalysisConfig.from_csv(args.state_names)
    analyzer = _select_run(load_results(args.results), args.run_index)
    _print_json(
        {
            "run_index": args.run_index,
            "ticks": len(analyzer),
            "agent_count": analyzer.agent_count,
            "state_names": list(config.state_names),
            "agent_state_probabilities": analyzer.agent_state_probabilities(config.state_names),
            "agent_state_average": analyzer.agent_state_average(),
            "agent_state_coordination_matrix": analyzer.agent_state_coordination_matrix(),
        }
    )


def _handle_plot(args: argparse.Namespace) -> None:
    config = AnalysisConfig.from_csv(args.state_names)
    theme = get_theme(args.theme)
    analyzer = _select_run(load_results(args.results), args.run_index)
    output_dir = Path(args.output_dir)
    prefix = f"run_{args.run_index}"
    written = [
        render_state_probabilities(
            analyzer,
            config.state_names,
            output_dir / f"{prefix}_state_probabilities.png",
            theme=theme,
        ),
        render_coordination_matrix(
            analyzer, output_dir / f"{prefix}_coordination.png", theme=theme
        ),
        render_agent_states(analyzer, output_dir / f"{prefix}_agent_states.png", theme=theme),
    ]
    _print_json({"figures": [str(path) for path in written]})


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(
        description="Trajectory and cross-run statistics for organisational simulation results"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_summary_parser(sub)
    _build_by_config_parser(sub)
    _build_trajectory_parser(sub)
    _build_plot_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
