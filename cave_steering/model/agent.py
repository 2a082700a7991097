"""Autonomous agent steered by a trainable brain."""

from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from .brain import SteeringBrain
from .steering import seek, flee
from .vector import Vector2

if TYPE_CHECKING:
    from ..config import SteeringConfig


class AgentState(Enum):
    """Possible states for an agent."""
    MOVING = "moving"
    WAITING = "waiting"
    ARRIVED = "arrived"


class Agent:
    """
    Individual steering entity.

    Each tick the agent gathers one force per configured behaviour (in
    configured order), lets its brain blend them, and afterwards trains
    the brain on the remaining offset to the target.
    """

    def __init__(self, agent_id: int,
                 position: Vector2,
                 target: Vector2,
                 behaviours: List[str],
                 brain: SteeringBrain,
                 steering: "SteeringConfig",
                 hazard: Optional[Vector2] = None):
        self.id = agent_id
        self.position = position
        self.target = target
        self.hazard = hazard if hazard is not None else target
        self.behaviours = list(behaviours)
        self.brain = brain
        self.steering = steering
        self.state = AgentState.MOVING
        self.steps_taken = 0

    def compute_forces(self) -> List[Vector2]:
        """One force per behaviour: seek pulls toward target, flee pushes off hazard."""
        forces = []
        for name in self.behaviours:
            if name == "seek":
                forces.append(seek(self.position, self.target,
                                   self.steering.max_speed,
                                   self.steering.arrive_distance))
            elif name == "flee":
                forces.append(flee(self.position, self.hazard,
                                   self.steering.max_speed,
                                   self.steering.depart_distance))
            else:
                raise ValueError(f"Unknown behaviour: {name}")
        return forces

    def desired_velocity(self, forces: List[Vector2]) -> Vector2:
        """Brain output capped at max speed."""
        return self.brain.combine(forces).clamped(self.steering.max_speed)

    def error(self) -> Vector2:
        return self.target - self.position

    def distance_to_target(self) -> float:
        return self.position.distance_to(self.target)

    def learn(self, forces: List[Vector2]) -> None:
        self.brain.train(forces, self.error())

    def update_state(self, new_position: Vector2, moved: bool) -> None:
        """Update agent state based on movement result."""
        self.position = new_position
        if self.distance_to_target() <= self.steering.goal_radius:
            self.state = AgentState.ARRIVED
        elif not moved:
            self.state = AgentState.WAITING
        else:
            self.state = AgentState.MOVING
            self.steps_taken += 1

    def __repr__(self) -> str:
        return (f"Agent(id={self.id}, pos={self.position.as_tuple()}, "
                f"state={self.state.value})")
