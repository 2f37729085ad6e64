"""Exception types raised by dspcore.

Both derive from ValueError so callers can catch precondition violations
uniformly.
"""


class LengthMismatchError(ValueError):
    """Two sequences that must be paired element-wise have different lengths."""

    def __init__(self, expected: int, actual: int, what: str = "sequence"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} length mismatch: expected {expected}, got {actual}")


class SampleRateMismatchError(ValueError):
    """Two signals or a signal and a filter have different sample rates."""

    def __init__(self, first: float, second: float):
        self.first = first
        self.second = second
        super().__init__(f"Sample rates do not match: {first} != {second}")
