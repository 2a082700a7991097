"""Tests for cave_steering.model.engine and agent modules."""

from __future__ import annotations

from typing import List

import numpy as np
import pytest

from cave_steering.config import AgentConfig, CaveConfig, SimulationConfig, SteeringConfig
from cave_steering.errors import CaveGenerationError
from cave_steering.model.agent import Agent, AgentState
from cave_steering.model.brain import SteeringBrain
from cave_steering.model.engine import SimulationEngine
from cave_steering.model.vector import Vector2


def _config(width: int = 12, height: int = 1, alive_chance: float = 0.0,
            step_count: int = 0, behaviours: List[str] | None = None,
            count: int = 3, max_steps: int = 200, seed: int = 1) -> SimulationConfig:
    return SimulationConfig(
        cave=CaveConfig(width=width, height=height, alive_chance=alive_chance,
                        step_count=step_count, regenerate_attempts=3),
        steering=SteeringConfig(max_speed=1.0, learning_rate=0.05,
                                weight_scale=0.0, goal_radius=0.5),
        agents=AgentConfig(count=count, behaviours=behaviours or ["seek"]),
        max_steps=max_steps,
        seed=seed,
    )


class TestEngineSetup:
    def test_agents_spawn_at_start(self) -> None:
        engine = SimulationEngine(_config())
        assert engine.cave.start == (0, 0)
        assert len(engine.agents) == 3
        for agent in engine.agents:
            assert agent.position == Vector2(0.5, 0.5)
            assert agent.brain.input_count == 1

    def test_target_is_empty_non_start_cell(self) -> None:
        engine = SimulationEngine(_config(width=20, height=15, alive_chance=0.45,
                                          step_count=2))
        assert engine.target != engine.cave.start
        assert engine.cave.is_walkable(*engine.target)
        assert engine.cave.is_walkable(*engine.hazard)

    def test_same_seed_same_world(self) -> None:
        a = SimulationEngine(_config(width=25, height=20, alive_chance=0.45, step_count=2, seed=5))
        b = SimulationEngine(_config(width=25, height=20, alive_chance=0.45, step_count=2, seed=5))
        assert np.array_equal(a.cave.grid, b.cave.grid)
        assert (a.target, a.hazard) == (b.target, b.hazard)

    def test_solid_cave_fails_after_attempts(self) -> None:
        with pytest.raises(CaveGenerationError):
            SimulationEngine(_config(alive_chance=1.0))

    def test_single_empty_cell_targets_start(self) -> None:
        engine = SimulationEngine(_config(width=1, height=1, count=1))
        assert engine.target == engine.cave.start == (0, 0)
        engine.step()
        assert engine.agents[0].state == AgentState.ARRIVED
        assert engine.is_finished()


class TestEngineStep:
    def test_snapshot_shape(self) -> None:
        engine = SimulationEngine(_config(behaviours=["seek", "flee"]))
        state = engine.step()
        assert state.step == 1
        assert len(state.agents) == 3
        for snap in state.agents:
            assert len(snap.weights) == 2
        assert state.metrics["total_agents"] == 3

    def test_first_tick_with_zero_weights_only_learns(self) -> None:
        engine = SimulationEngine(_config())
        state = engine.step()
        for agent, snap in zip(engine.agents, state.agents):
            assert agent.position == Vector2(0.5, 0.5)
            assert snap.state == "waiting"
            # seek force lines up with the error, so the weight grows
            assert snap.weights[0] > 0

    def test_seekers_reach_target(self) -> None:
        engine = SimulationEngine(_config())
        while not engine.is_finished():
            engine.step()
        summary = engine.get_summary()
        assert summary["agents_arrived"] == 3
        assert summary["agents_remaining"] == 0
        assert summary["total_steps"] < 200

    def test_stops_at_max_steps(self) -> None:
        engine = SimulationEngine(_config(max_steps=1))
        engine.step()
        assert engine.is_finished()


class TestAgent:
    def _agent(self, behaviours: List[str], weights: List[float]) -> Agent:
        steering = SteeringConfig(max_speed=2.0, goal_radius=0.5)
        brain = SteeringBrain(len(weights), initial_weights=weights)
        return Agent(1, Vector2(0.0, 0.0), Vector2(10.0, 0.0), behaviours,
                     brain, steering, hazard=Vector2(0.0, -3.0))

    def test_forces_follow_behaviour_order(self) -> None:
        agent = self._agent(["flee", "seek"], [1.0, 1.0])
        flee_force, seek_force = agent.compute_forces()
        assert flee_force.y == pytest.approx(2.0)
        assert seek_force.x == pytest.approx(2.0)

    def test_desired_velocity_is_clamped(self) -> None:
        agent = self._agent(["seek"], [5.0])
        velocity = agent.desired_velocity(agent.compute_forces())
        assert velocity.length() == pytest.approx(2.0)

    def test_update_state(self) -> None:
        agent = self._agent(["seek"], [1.0])
        agent.update_state(Vector2(2.0, 0.0), moved=True)
        assert agent.state == AgentState.MOVING
        assert agent.steps_taken == 1
        agent.update_state(Vector2(2.0, 0.0), moved=False)
        assert agent.state == AgentState.WAITING
        agent.update_state(Vector2(9.7, 0.0), moved=True)
        assert agent.state == AgentState.ARRIVED

    def test_learn_uses_offset_to_target(self) -> None:
        agent = self._agent(["seek"], [0.0])
        forces = agent.compute_forces()
        agent.learn(forces)
        # 0.01 * dot((10, 0), (2, 0))
        assert agent.brain.weights[0] == pytest.approx(0.2)
