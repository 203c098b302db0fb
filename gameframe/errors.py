"""Engine-wide error type and assertion helper."""

from __future__ import annotations


class EngineError(Exception):
    """Raised when the engine reaches a state it cannot continue from."""


def engine_assert(condition: object, message: str) -> None:
    """Raise EngineError with message unless condition is true."""
    if not condition:
        raise EngineError(message)