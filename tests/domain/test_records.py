"""Tests for tolerant Snapshot / Result coercion."""

from __future__ import annotations

from types import SimpleNamespace

import numpy as np

from orgsim_analysis.domain.records import Result, Snapshot


def test_snapshot_from_camel_case() -> None:
    snap = Snapshot.from_dict(
        {
            "clockTick": 3,
            "board": [1, 2],
            "agentStates": [0, 1],
            "plant": [5.0],
            "reporting": [0.1],
            "priorityTensor": [[[1, 0], [0, 1]]],
        }
    )
    assert snap.clock_tick == 3
    assert snap.agent_states == (0, 1)
    assert snap.priority_tensor == (((1, 0), (0, 1)),)


def test_snapshot_from_snake_case() -> None:
    snap = Snapshot.from_dict({"clock_tick": 1, "agent_states": [2]})
    assert snap.clock_tick == 1
    assert snap.agent_states == (2,)
    assert snap.board == ()


def test_snapshot_missing_agent_states_is_none() -> None:
    assert Snapshot.from_dict({}).agent_states is None
    assert Snapshot.from_dict({"agentStates": None}).agent_states is None


def test_snapshot_empty_agent_states_is_not_none() -> None:
    assert Snapshot.from_dict({"agentStates": []}).agent_states == ()


def test_snapshot_to_dict_omits_missing_agent_states() -> None:
    assert "agentStates" not in Snapshot().to_dict()
    assert Snapshot(agent_states=(1,)).to_dict()["agentStates"] == [1]


def test_snapshot_coerce_from_attributes() -> None:
    source = SimpleNamespace(clock_tick=2, agent_states=[1, 1], board=[0])
    snap = Snapshot.coerce(source)
    assert snap.agent_states == (1, 1)
    assert snap.plant == ()


def test_snapshot_coerce_numpy_arrays() -> None:
    snap = Snapshot.coerce({"agentStates": np.array([0, 2, 1])})
    assert snap.agent_states == (0, 2, 1)


def test_snapshot_coerce_is_identity_for_instances() -> None:
    snap = Snapshot(agent_states=(0,))
    assert Snapshot.coerce(snap) is snap


def test_result_from_dict_with_state_space_and_metadata() -> None:
    result = Result.from_dict(
        {
            "id": 9,
            "simConfigId": 4,
            "runCount": 2,
            "nodeId": "node-a",
            "board": [1],
            "agentStates": [0, 1],
            "plant": [10],
            "reporting": [0.5],
            "priorityTensor": [[[1]]],
            "performance": 12.5,
            "stateSpace": [{"clockTick": 0, "agentStates": [0, 1]}],
        }
    )
    assert result.id == 9
    assert result.sim_config_id == 4
    assert result.node_id == "node-a"
    assert result.performance == 12.5
    assert result.state_space[0].agent_states == (0, 1)
    assert result.trajectory().agent_count == 2


def test_result_without_state_space_gives_empty_trajectory() -> None:
    result = Result.from_dict({"agentStates": [0]})
    assert result.state_space is None
    assert result.trajectory().agent_count == 0
    assert len(result.trajectory()) == 0


def test_result_missing_fields_default_to_empty() -> None:
    result = Result.coerce({})
    assert result.board == ()
    assert result.agent_states == ()
    assert result.priority_tensor == ()
    assert result.performance is None


def test_result_to_dict_round_trip() -> None:
    payload = {
        "board": [1, 2],
        "agentStates": [0],
        "plant": [3],
        "reporting": [],
        "priorityTensor": [[[1, 2]]],
        "performance": 1.0,
        "stateSpace": [
            {
                "clockTick": 0,
                "board": [1, 2],
                "agentStates": [0],
                "plant": [3],
                "reporting": [],
                "priorityTensor": [[[1, 2]]],
            }
        ],
        "simConfigId": 5,
    }
    assert Result.from_dict(payload).to_dict() == payload
