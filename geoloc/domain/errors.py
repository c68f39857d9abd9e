"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when an operation receives coordinates outside the valid ranges."""
