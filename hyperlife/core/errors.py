"""Exceptions raised at the boundaries of the simulation engine."""


class DimensionMismatchError(ValueError):
    """A coordinate does not have the dimensionality of its simulation."""

    def __init__(self, expected: int, actual: int, context: str = "coordinate"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{context} has {actual} axes, expected {expected}")


class RuleParseError(ValueError):
    """A rulestring could not be parsed."""
