"""Invariant checking used throughout the package."""


class InvariantError(Exception):
    """Raised when an internal invariant or precondition does not hold."""


def check(condition, message):
    """Raise :class:`InvariantError` with ``message`` unless ``condition`` is truthy."""
    if not condition:
        raise InvariantError(message)