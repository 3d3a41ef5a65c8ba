"""Exception taxonomy for contract violations.

Expected business failures (NotFound, InvalidData, ...) are never raised: they
travel as failure Outcomes. The exceptions below signal programming errors at
the library seams and always fail fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from serviceresult.kinds import ResultKind


class ServiceResultError(Exception):
    """Base exception for all serviceresult contract violations."""


class ArgumentError(ServiceResultError, ValueError):
    """Missing or malformed input (None errors, empty message, None fault/report/outcome)."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument

    @classmethod
    def missing(cls, argument: str) -> ArgumentError:
        """Factory for the common `argument is None` case."""
        return cls(f"{argument} must not be None", argument=argument)


class StateMismatchError(ServiceResultError, RuntimeError):
    """Kind and constructor disagree, or a value is used in the wrong state.

    Raised when a success kind reaches a failure constructor (or vice versa),
    when a valid validation report is converted to a failure, and when the data
    of a failure outcome is unwrapped.
    """

    def __init__(self, message: str, *, kind: ResultKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class UnmappedKindError(ServiceResultError, LookupError):
    """A ResultKind reached the HTTP adapter without a table entry."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"No HTTP mapping registered for result kind {kind!r}")
        self.kind = kind
