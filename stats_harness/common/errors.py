"""Exception types raised by the engine and the CSV reader."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for every failure the harness reports."""


class InvalidInputError(StatsError, ValueError):
    """Samples violate a precondition (empty, out of range, negative root)."""


class ParseError(StatsError, ValueError):
    """A CSV token could not be read as a finite number."""

    def __init__(self, position: int, token: str) -> None:
        super().__init__(f"token {position} is not a number: {token!r}")
        self.position = position
        self.token = token
