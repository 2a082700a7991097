"""Online-trainable linear combiner for steering forces."""

from typing import Optional, Sequence
import numpy as np

from ..errors import ForceCountMismatchError, InvalidParameterError
from .vector import Vector2


class SteeringBrain:
    """
    Blends a fixed number of force vectors into one direction.

    output = sum(weight[i] * force[i])

    After each move the weights follow a delta rule against the
    observed error vector:

        weight[i] += learning_rate * dot(error, force[i])

    so a zero error leaves the weights untouched.
    """

    def __init__(self, input_count: int,
                 learning_rate: float = 0.01,
                 initial_weights: Optional[Sequence[float]] = None,
                 rng: Optional[np.random.Generator] = None,
                 weight_scale: float = 0.1):
        if input_count <= 0:
            raise InvalidParameterError(
                f"input_count must be positive, got {input_count}")
        if learning_rate <= 0:
            raise InvalidParameterError(
                f"learning_rate must be positive, got {learning_rate}")

        self._input_count = input_count
        self._learning_rate = learning_rate

        if initial_weights is not None:
            if len(initial_weights) != input_count:
                raise ForceCountMismatchError(input_count, len(initial_weights))
            self._weights = np.array(initial_weights, dtype=np.float64)
        elif rng is not None:
            self._weights = rng.uniform(-weight_scale, weight_scale, input_count)
        else:
            self._weights = np.zeros(input_count, dtype=np.float64)

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def weights(self) -> np.ndarray:
        """Copy of the current weight vector."""
        return self._weights.copy()

    def _as_matrix(self, forces: Sequence[Vector2]) -> np.ndarray:
        if len(forces) != self._input_count:
            raise ForceCountMismatchError(self._input_count, len(forces))
        return np.array([f.as_tuple() for f in forces],
                        dtype=np.float64).reshape(self._input_count, 2)

    def combine(self, forces: Sequence[Vector2]) -> Vector2:
        """Weighted sum of forces. Not normalized or clamped."""
        matrix = self._as_matrix(forces)
        x, y = self._weights @ matrix
        return Vector2(float(x), float(y))

    def train(self, forces: Sequence[Vector2], error: Vector2) -> None:
        """Nudge each weight by how well its force lined up with the error."""
        matrix = self._as_matrix(forces)
        error_arr = np.array(error.as_tuple(), dtype=np.float64)
        self._weights += self._learning_rate * (matrix @ error_arr)

    def __repr__(self) -> str:
        return (f"SteeringBrain(inputs={self._input_count}, "
                f"weights={np.round(self._weights, 4).tolist()})")
