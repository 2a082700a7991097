"""Cellular-automaton cave generation and trainable steering for game agents."""

from .errors import (
    InvalidParameterError,
    InvalidDimensionError,
    ForceCountMismatchError,
    CaveGenerationError,
)
from .model import (
    Vector2,
    generate_random,
    step,
    generate_cave,
    place_start,
    seek,
    flee,
    SteeringBrain,
)

__version__ = "0.1.0"
__all__ = [
    'InvalidParameterError',
    'InvalidDimensionError',
    'ForceCountMismatchError',
    'CaveGenerationError',
    'Vector2',
    'generate_random',
    'step',
    'generate_cave',
    'place_start',
    'seek',
    'flee',
    'SteeringBrain',
]
