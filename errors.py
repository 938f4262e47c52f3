class InvalidInput(ValueError):
    """Raised when a computation receives values it cannot work with."""


def from_validation_error(exc: Exception) -> InvalidInput:
    """Wrap a pydantic ``ValidationError`` so callers catch a single type."""
    return InvalidInput(str(exc))
