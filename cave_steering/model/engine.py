"""Headless simulation driver: one generated cave, agents steering to a target."""

import numpy as np
from typing import List, Dict, Tuple, TYPE_CHECKING

from ..errors import CaveGenerationError
from .agent import Agent, AgentState
from .brain import SteeringBrain
from .cave import generate_cave
from .grid import CaveMap
from .state import SimulationState, AgentSnapshot

if TYPE_CHECKING:
    from ..config import SimulationConfig


class SimulationEngine:
    """
    Orchestrates the discrete-time simulation loop.

    Implements:
    1. Cave generation (regenerating when no start marker was placed)
    2. Target and hazard selection
    3. Agent spawning at the start cell
    4. Per-tick combine / move / train cycle
    5. State snapshot generation
    """

    def __init__(self, config: "SimulationConfig"):
        self.config = config
        self.current_step = 0
        self.rng = np.random.default_rng(config.seed)

        # Generate cave
        self.regenerations = 0
        self.cave = self._generate_map()

        self.target, self.hazard = self._pick_target_and_hazard()

        # Initialize agents
        self.agents: List[Agent] = []
        self.active_agents: List[Agent] = []
        self._spawn_agents()

        # Metrics tracking
        self.arrived_count = 0
        self.total_travel_time = 0

    def _generate_map(self) -> CaveMap:
        """Generate caves until one has a start marker."""
        cave_cfg = self.config.cave
        attempts = max(1, cave_cfg.regenerate_attempts)
        for attempt in range(attempts):
            grid = generate_cave(
                cave_cfg.width, cave_cfg.height,
                alive_chance=cave_cfg.alive_chance,
                death_limit=cave_cfg.death_limit,
                birth_limit=cave_cfg.birth_limit,
                step_count=cave_cfg.step_count,
                rng=self.rng
            )
            cave = CaveMap(grid)
            if cave.start is not None:
                self.regenerations = attempt
                return cave
        raise CaveGenerationError(
            f"No empty cell after {attempts} attempts "
            f"(alive_chance={cave_cfg.alive_chance})")

    def _pick_target_and_hazard(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Pick two distinct non-start empty cells, falling back to the start."""
        candidates = [c for c in self.cave.empty_cells() if c != self.cave.start]
        if not candidates:
            return self.cave.start, self.cave.start
        order = self.rng.permutation(len(candidates))
        target = candidates[order[0]]
        hazard = candidates[order[1]] if len(candidates) > 1 else target
        return target, hazard

    def _spawn_agents(self) -> None:
        """Create agents at the start cell, each with its own brain."""
        steering = self.config.steering
        behaviours = self.config.agents.behaviours
        spawn = CaveMap.cell_centre(*self.cave.start)
        target = CaveMap.cell_centre(*self.target)
        hazard = CaveMap.cell_centre(*self.hazard)

        for agent_id in range(1, self.config.agents.count + 1):
            brain = SteeringBrain(
                len(behaviours),
                learning_rate=steering.learning_rate,
                rng=self.rng,
                weight_scale=steering.weight_scale
            )
            agent = Agent(
                agent_id=agent_id,
                position=spawn,
                target=target,
                behaviours=behaviours,
                brain=brain,
                steering=steering,
                hazard=hazard
            )
            self.agents.append(agent)
            self.active_agents.append(agent)

    def step(self) -> SimulationState:
        """
        Execute one discrete time step.

        1. Gather forces for every active agent
        2. Combine them through the agent's brain and cap to max speed
        3. Move, unless the destination cell is a wall
        4. Train the brain on the remaining offset to the target
        5. Return current state snapshot
        """
        self.current_step += 1
        dt = self.config.time_step

        for agent in self.active_agents:
            forces = agent.compute_forces()
            velocity = agent.desired_velocity(forces)

            old_pos = agent.position
            new_pos = old_pos + velocity * dt
            moved = new_pos != old_pos and self.cave.is_position_walkable(new_pos)
            if not moved:
                new_pos = old_pos

            agent.update_state(new_pos, moved)
            agent.learn(forces)

            if agent.state == AgentState.ARRIVED:
                self.arrived_count += 1
                self.total_travel_time += self.current_step

        # Remove arrived agents from active list
        self.active_agents = [a for a in self.active_agents
                              if a.state != AgentState.ARRIVED]

        return self._create_state_snapshot()

    def _create_state_snapshot(self) -> SimulationState:
        """Create immutable snapshot of current simulation state."""
        agent_snapshots = [
            AgentSnapshot(
                agent_id=a.id,
                x=a.position.x,
                y=a.position.y,
                state=a.state.value,
                distance=a.distance_to_target(),
                weights=tuple(float(w) for w in a.brain.weights)
            )
            for a in self.agents
        ]

        distances = [s.distance for s in agent_snapshots]
        metrics = {
            'arrived': self.arrived_count,
            'total_agents': len(self.agents),
            'active_agents': len(self.active_agents),
            'mean_distance': float(np.mean(distances)) if distances else 0.0,
            'avg_travel_time': (self.total_travel_time / self.arrived_count
                                if self.arrived_count > 0 else 0)
        }

        return SimulationState(
            step=self.current_step,
            agents=agent_snapshots,
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if simulation should terminate."""
        return (self.current_step >= self.config.max_steps or
                len(self.active_agents) == 0)

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        return {
            'total_steps': self.current_step,
            'agents_arrived': self.arrived_count,
            'agents_total': len(self.agents),
            'agents_remaining': len(self.active_agents),
            'avg_travel_time': (self.total_travel_time / self.arrived_count
                                if self.arrived_count > 0 else 0),
            'regenerations': self.regenerations
        }
