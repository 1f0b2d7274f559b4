"""
Simian Errors

TigerStyle: Explicit error types. Nothing here is retried.
"""


class MonkeyError(Exception):
    """Base error for monkey testing."""

    pass


class ConfigurationError(MonkeyError, ValueError):
    """Invalid weight, interval, iteration count or geometry parameter.

    Raised at registration or call time, before any state changes.
    """

    pass


class ActuatorError(MonkeyError):
    """The actuator could not perform an event."""

    pass
