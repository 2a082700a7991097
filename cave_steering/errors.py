"""Exception types raised by the cave generator and steering brain."""


class InvalidParameterError(ValueError):
    """A generation or steering knob is outside its accepted range."""


class InvalidDimensionError(InvalidParameterError):
    """Grid width or height is not a positive integer."""


class ForceCountMismatchError(ValueError):
    """Number of forces differs from the brain's input count."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} forces, got {actual}")
        self.expected = expected
        self.actual = actual


class CaveGenerationError(RuntimeError):
    """No usable cave (one with a start marker) could be generated."""
