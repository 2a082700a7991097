"""Tests for cave_steering.model.brain module."""

from __future__ import annotations

import numpy as np
import pytest

from cave_steering.errors import ForceCountMismatchError, InvalidParameterError
from cave_steering.model.brain import SteeringBrain
from cave_steering.model.vector import Vector2

FORCES = [Vector2(1.0, 0.0), Vector2(0.0, 2.0)]


class TestConstruction:
    def test_defaults_to_zero_weights(self) -> None:
        brain = SteeringBrain(3)
        assert brain.input_count == 3
        assert np.array_equal(brain.weights, np.zeros(3))

    def test_random_weights_within_scale(self) -> None:
        brain = SteeringBrain(50, rng=np.random.default_rng(0), weight_scale=0.2)
        assert np.all(np.abs(brain.weights) <= 0.2)
        assert np.any(brain.weights != 0)

    def test_explicit_weights(self) -> None:
        brain = SteeringBrain(2, initial_weights=[0.5, -1.0])
        assert brain.weights.tolist() == [0.5, -1.0]

    def test_explicit_weights_wrong_length(self) -> None:
        with pytest.raises(ForceCountMismatchError):
            SteeringBrain(2, initial_weights=[1.0])

    @pytest.mark.parametrize("count", [0, -2])
    def test_invalid_input_count(self, count: int) -> None:
        with pytest.raises(InvalidParameterError):
            SteeringBrain(count)

    @pytest.mark.parametrize("rate", [0.0, -0.1])
    def test_learning_rate_must_be_positive(self, rate: float) -> None:
        with pytest.raises(InvalidParameterError):
            SteeringBrain(2, learning_rate=rate)

    def test_weights_property_is_a_copy(self) -> None:
        brain = SteeringBrain(2, initial_weights=[1.0, 1.0])
        brain.weights[0] = 99.0
        assert brain.weights[0] == 1.0


class TestCombine:
    def test_zero_weights_give_zero_vector(self) -> None:
        brain = SteeringBrain(2)
        assert brain.combine([Vector2(5.0, -3.0), Vector2(100.0, 7.0)]) == Vector2.zero()

    def test_weighted_sum(self) -> None:
        brain = SteeringBrain(2, initial_weights=[2.0, -1.0])
        out = brain.combine(FORCES)
        assert out.x == pytest.approx(2.0)
        assert out.y == pytest.approx(-2.0)

    def test_result_is_not_clamped(self) -> None:
        brain = SteeringBrain(1, initial_weights=[10.0])
        assert brain.combine([Vector2(3.0, 4.0)]).length() == pytest.approx(50.0)

    def test_does_not_change_weights(self) -> None:
        brain = SteeringBrain(2, initial_weights=[0.3, 0.7])
        brain.combine(FORCES)
        assert brain.weights.tolist() == [0.3, 0.7]

    @pytest.mark.parametrize("forces", [[], [Vector2(1.0, 0.0)], FORCES + [Vector2(1.0, 1.0)]])
    def test_count_mismatch(self, forces) -> None:
        brain = SteeringBrain(2)
        with pytest.raises(ForceCountMismatchError):
            brain.combine(forces)


class TestTrain:
    def test_zero_error_leaves_weights(self) -> None:
        brain = SteeringBrain(2, rng=np.random.default_rng(3))
        before = brain.weights
        brain.train(FORCES, Vector2.zero())
        assert np.array_equal(brain.weights, before)

    def test_delta_rule(self) -> None:
        brain = SteeringBrain(2, learning_rate=0.5)
        brain.train(FORCES, Vector2(2.0, 1.0))
        # dot((2, 1), (1, 0)) = 2, dot((2, 1), (0, 2)) = 2
        assert brain.weights.tolist() == pytest.approx([1.0, 1.0])

    def test_aligned_force_gains_weight(self) -> None:
        brain = SteeringBrain(2, learning_rate=0.1)
        toward = Vector2(1.0, 0.0)
        away = Vector2(-1.0, 0.0)
        brain.train([toward, away], Vector2(3.0, 0.0))
        assert brain.weights[0] > 0
        assert brain.weights[1] < 0

    def test_count_mismatch(self) -> None:
        brain = SteeringBrain(2, initial_weights=[1.0, 2.0])
        with pytest.raises(ForceCountMismatchError):
            brain.train([Vector2(1.0, 0.0)], Vector2(1.0, 1.0))
        assert brain.weights.tolist() == [1.0, 2.0]
