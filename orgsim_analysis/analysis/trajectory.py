"""Per-run trajectory statistics over agent state indices.

``TrajectoryAnalyzer`` wraps the ordered snapshots of one simulation run
(index = clock-tick order) and derives agent-level statistics from the
``agent_states`` field:

- state occupancy probabilities per agent,
- agent-major state time series,
- mean state index per agent,
- pairwise coordination (fraction of ticks two agents share a state).

State indices are opaque small integers.  None of the methods raise on
degenerate input: an absent or empty trajectory, a first snapshot without
``agent_states``, or out-of-range indices all produce the empty/zero results
documented on each method.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Sequence

from orgsim_analysis.domain.records import Snapshot
from orgsim_analysis.tensor import tensor, zeros

logger = logging.getLogger(__name__)


def state_index(state: Any) -> int | None:
    """Return ``state`` as an int index, or ``None`` if it is not integral."""
    if isinstance(state, bool):
        return None
    if isinstance(state, float) and state.is_integer():
        return int(state)
    if isinstance(state, int):
        return state
    return None


class TrajectoryAnalyzer:
    """Ordered snapshots of one run plus the derived agent count."""

    def __init__(self, snapshots: Iterable[Any] | None = None) -> None:
        self._snapshots: tuple[Snapshot, ...] = tuple(
            Snapshot.coerce(point) for point in (snapshots or ())
        )
        self._agent_count = 0
        if self._snapshots and self._snapshots[0].agent_states is not None:
            self._agent_count = len(self._snapshots[0].agent_states)

    @property
    def agent_count(self) -> int:
        return self._agent_count

    @property
    def snapshots(self) -> tuple[Snapshot, ...]:
        return self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self._snapshots[index]

    def __repr__(self) -> str:
        return f"TrajectoryAnalyzer(ticks={len(self)}, agent_count={self._agent_count})"

    def to_dicts(self) -> list[dict[str, Any]]:
        """Serialise back to the engine's camelCase snapshot records."""
        return [point.to_dict() for point in self._snapshots]

    def _state(self, tick: int, agent: int) -> int | None:
        states = self._snapshots[tick].agent_states
        if states is None or agent >= len(states):
            return None
        return states[agent]

    def agent_state_probabilities(self, state_names: Sequence[str] | None) -> list[list[float]]:
        """Fraction of ticks each agent spends in each named state.

        Returns an ``agent_count x len(state_names)`` matrix.  Indices outside
        ``[0, len(state_names))`` are dropped, but every cell is still divided
        by the full trajectory length, so a row sums to less than 1 when
        invalid indices were observed.  Returns ``[[]]`` when ``state_names``
        is empty or the trajectory has no snapshots.
        """
        if not state_names or not self._snapshots:
            return [[]]
        n_states = len(state_names)
        counts = tensor([self._agent_count, n_states], 0)
        dropped = 0
        for point in self._snapshots:
            for agent, state in enumerate(point.agent_states or ()):
                if agent >= self._agent_count:
                    dropped += 1
                    continue
                index = state_index(state)
                if index is not None and 0 <= index < n_states:
                    counts[agent][index] += 1
                else:
                    dropped += 1
        if dropped:
            logger.debug("Dropped %d out-of-range agent/state entries", dropped)

        length = len(self._snapshots)
        return [[count / length for count in row] for row in counts]

    def agent_states(self) -> list[list[int | None]]:
        """Agent-major state time series: ``result[agent][tick]``.

        Raw indices pass through unfiltered.  An entry is ``None`` where a
        later snapshot carries fewer agents than the first.
        """
        return [
            [self._state(tick, agent) for tick in range(len(self._snapshots))]
            for agent in range(self._agent_count)
        ]

    def agent_state_average(self) -> list[float]:
        """Mean raw state index per agent; all zeros for an empty trajectory."""
        averages = zeros(self._agent_count)
        length = len(self._snapshots)
        if length == 0:
            return averages
        for agent in range(self._agent_count):
            total = 0
            for tick in range(length):
                state = self._state(tick, agent)
                if state is not None:
                    total += state
            averages[agent] = total / length
        return averages

    def agent_state_coordination_matrix(self) -> list[list[float]]:
        """Fraction of ticks in which each pair of agents shares a state.

        Symmetric with a unit diagonal for a non-empty trajectory; the zero
        matrix when there are no snapshots.
        """
        matrix = zeros(self._agent_count, self._agent_count)
        length = len(self._snapshots)
        if length == 0:
            return matrix
        for alpha in range(self._agent_count):
            matrix[alpha][alpha] = 1.0
            for beta in range(alpha + 1, self._agent_count):
                matches = sum(
                    1
                    for tick in range(length)
                    if self._state(tick, alpha) == self._state(tick, beta)
                )
                matrix[alpha][beta] = matrix[beta][alpha] = matches / length
        return matrix
