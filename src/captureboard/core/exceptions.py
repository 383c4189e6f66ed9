"""
Custom exceptions shared by all layers.

NOTE: gameplay calls on the rule engine never raise for noisy consumer input (invalid moves are dropped silently).
These exceptions are reserved for construction errors, malformed persisted state, bad requests and missing records.
"""


class GameError(Exception):
    """Top-level exception. Catch this one at the outer layers."""


class InvalidLayoutError(GameError):
    """A board layout string / cell list cannot be turned into a Board."""


class GameStateError(GameError):
    """Persisted or transported state does not describe a valid game."""


class InvalidRequestError(GameError):
    """Request data failed validation."""


class RepositoryError(GameError):
    """Record could not be found / stored."""
