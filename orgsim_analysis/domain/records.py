"""Typed records for simulation snapshots and final-state results.

The simulation engine emits camelCase JSON (``agentStates``,
``priorityTensor``, ``stateSpace`` ...).  ``Snapshot`` and ``Result`` are frozen
dataclasses built from either that payload, a snake_case mapping, or any object
exposing the same attributes.  Coercion is tolerant: missing sequence fields
become empty tuples so that the analyzers can apply their own degenerate-input
policies instead of failing here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

Vector = tuple[float, ...]
PriorityTensor = tuple[tuple[tuple[float, ...], ...], ...]

_MISSING = object()


def _lookup(source: Any, snake: str, camel: str | None = None) -> Any:
    """Fetch a field by snake_case or camelCase name; ``_MISSING`` if absent."""
    names = (snake,) if camel is None or camel == snake else (snake, camel)
    if isinstance(source, Mapping):
        for name in names:
            if name in source:
                return source[name]
        return _MISSING
    for name in names:
        value = getattr(source, name, _MISSING)
        if value is not _MISSING:
            return value
    return _MISSING


def _freeze(value: Any) -> Any:
    """Recursively convert lists to tuples."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _absent(value: Any) -> bool:
    return value is _MISSING or value is None


def _vector(value: Any) -> tuple:
    if _absent(value):
        return ()
    if hasattr(value, "tolist"):
        value = value.tolist()
    if isinstance(value, (list, tuple)):
        return _freeze(value)
    return (value,)


def _optional(value: Any) -> Any:
    return None if value is _MISSING else value


def _plain(value: Any) -> Any:
    """Recursively convert tuples back to lists for JSON output."""
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    return value


@dataclass(frozen=True)
class Snapshot:
    """One clock tick of one run.

    ``agent_states`` is ``None`` when the source record lacked the field, which
    is distinct from a tick with zero agents.
    """

    clock_tick: int = 0
    board: Vector = ()
    agent_states: tuple[int, ...] | None = None
    plant: Vector = ()
    reporting: Vector = ()
    priority_tensor: PriorityTensor = ()

    @classmethod
    def coerce(cls, source: Any) -> Snapshot:
        """Return ``source`` unchanged if already a Snapshot, else build one."""
        if isinstance(source, Snapshot):
            return source
        agent_states = _lookup(source, "agent_states", "agentStates")
        clock_tick = _lookup(source, "clock_tick", "clockTick")
        return cls(
            clock_tick=0 if _absent(clock_tick) else clock_tick,
            board=_vector(_lookup(source, "board")),
            agent_states=None if _absent(agent_states) else _vector(agent_states),
            plant=_vector(_lookup(source, "plant")),
            reporting=_vector(_lookup(source, "reporting")),
            priority_tensor=_vector(_lookup(source, "priority_tensor", "priorityTensor")),
        )

    from_dict = coerce

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "clockTick": self.clock_tick,
            "board": _plain(self.board),
            "plant": _plain(self.plant),
            "reporting": _plain(self.reporting),
            "priorityTensor": _plain(self.priority_tensor),
        }
        if self.agent_states is not None:
            payload["agentStates"] = _plain(self.agent_states)
        return payload


# Optional run metadata carried through unchanged: (attribute, camelCase key).
_RESULT_METADATA: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("sim_config_id", "simConfigId"),
    ("run_count", "runCount"),
    ("node_id", "nodeId"),
    ("duration_sec", "durationSec"),
    ("agent_count", "agentCount"),
)


@dataclass(frozen=True)
class Result:
    """Final-state summary of one completed run, with optional trajectory."""

    board: Vector = ()
    agent_states: tuple[int, ...] = ()
    plant: Vector = ()
    reporting: Vector = ()
    priority_tensor: PriorityTensor = ()
    performance: float | None = None
    state_space: tuple[Snapshot, ...] | None = None
    id: int | None = None
    sim_config_id: int | None = None
    run_count: int | None = None
    node_id: str | None = None
    duration_sec: float | None = None
    agent_count: int | None = None

    @classmethod
    def coerce(cls, source: Any) -> Result:
        """Return ``source`` unchanged if already a Result, else build one."""
        if isinstance(source, Result):
            return source
        raw_space = _lookup(source, "state_space", "stateSpace")
        state_space = (
            None
            if _absent(raw_space)
            else tuple(Snapshot.coerce(point) for point in _vector(raw_space))
        )
        metadata = {
            attr: _optional(_lookup(source, attr, camel)) for attr, camel in _RESULT_METADATA
        }
        return cls(
            board=_vector(_lookup(source, "board")),
            agent_states=_vector(_lookup(source, "agent_states", "agentStates")),
            plant=_vector(_lookup(source, "plant")),
            reporting=_vector(_lookup(source, "reporting")),
            priority_tensor=_vector(_lookup(source, "priority_tensor", "priorityTensor")),
            performance=_optional(_lookup(source, "performance")),
            state_space=state_space,
            **metadata,
        )

    from_dict = coerce

    def trajectory(self):
        """Wrap the embedded state space in a ``TrajectoryAnalyzer``."""
        from orgsim_analysis.analysis.trajectory import TrajectoryAnalyzer

        return TrajectoryAnalyzer(self.state_space)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "board": _plain(self.board),
            "agentStates": _plain(self.agent_states),
            "plant": _plain(self.plant),
            "reporting": _plain(self.reporting),
            "priorityTensor": _plain(self.priority_tensor),
            "performance": self.performance,
        }
        if self.state_space is not None:
            payload["stateSpace"] = [point.to_dict() for point in self.state_space]
        for attr, camel in _RESULT_METADATA:
            value = getattr(self, attr)
            if value is not None:
                payload[camel] = value
        return payload
