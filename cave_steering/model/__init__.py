"""Model package for the cave steering simulation."""

from .vector import Vector2
from .cave import (
    EMPTY, SOLID, START,
    generate_random, step, generate_cave, place_start,
    count_solid_neighbours, find_start, solid_fraction,
)
from .steering import seek, flee, BEHAVIOURS
from .brain import SteeringBrain
from .state import AgentSnapshot, SimulationState
from .grid import CaveMap
from .agent import Agent, AgentState
from .engine import SimulationEngine

__all__ = [
    'Vector2',
    'EMPTY',
    'SOLID',
    'START',
    'generate_random',
    'step',
    'generate_cave',
    'place_start',
    'count_solid_neighbours',
    'find_start',
    'solid_fraction',
    'seek',
    'flee',
    'BEHAVIOURS',
    'SteeringBrain',
    'AgentSnapshot',
    'SimulationState',
    'CaveMap',
    'Agent',
    'AgentState',
    'SimulationEngine',
]
