class InvalidParameterError(ValueError):
    """A distribution parameter makes the whole call meaningless (e.g. sd <= 0 for rnorm)."""


class ParameterShapeError(ValueError):
    """A sequence-valued parameter does not line up with the input values."""
