"""Convert validation results into INVALID_DATA failure outcomes.

Validation rules run elsewhere; this module only translates their report.
Any object exposing ``is_valid`` and a sequence of issues with an optional
``message`` qualifies, as do FluentValidation-shaped reports using ``errors``
and ``error_message``. Pydantic ``ValidationError`` has its own converter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from serviceresult.foundation.errors import ArgumentError, StateMismatchError
from serviceresult.kinds import ResultKind
from serviceresult.outcome import Outcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pydantic import ValidationError

logger = logging.getLogger("serviceresult.validation")

T = TypeVar("T")

INVALID_VALIDATION_RESULT_MESSAGE = "Success validation result cannot be converted to error service result"


@runtime_checkable
class ValidationIssue(Protocol):
    """A single finding of a validation run."""

    @property
    def message(self) -> str | None: ...


@runtime_checkable
class ValidationReport(Protocol):
    """Result of a validation run."""

    @property
    def is_valid(self) -> bool: ...

    @property
    def issues(self) -> Sequence[ValidationIssue] | None: ...


def _issues_of(report: object) -> Iterable[object]:
    issues = getattr(report, "issues", None)
    if issues is None:
        issues = getattr(report, "errors", None)
    return issues or ()


def _message_of(issue: object) -> str | None:
    if issue is None:
        return None
    message = getattr(issue, "message", None)
    if message is None:
        message = getattr(issue, "error_message", None)
    return message


def to_failure_outcome(report: ValidationReport) -> Outcome[T]:
    """Turn a failed validation report into an INVALID_DATA outcome.

    Messages keep their original order; issues without a message are skipped.

    Raises:
        ArgumentError: report is None
        StateMismatchError: the report is valid, so there is nothing to convert
    """
    if report is None:
        raise ArgumentError.missing("report")
    if report.is_valid:
        raise StateMismatchError(INVALID_VALIDATION_RESULT_MESSAGE, kind=ResultKind.INVALID_DATA)

    messages = [message for message in map(_message_of, _issues_of(report)) if message is not None]
    logger.debug("Converted invalid report to failure outcome (%d messages)", len(messages))
    return Outcome.failure(messages, ResultKind.INVALID_DATA)


def _format_loc(loc: Iterable[str | int]) -> str:
    return ".".join(str(part) for part in loc)


def from_validation_error(exc: ValidationError) -> Outcome[T]:
    """Turn a pydantic ValidationError into an INVALID_DATA outcome.

    Each message is prefixed with the dotted field location when there is one:

        >>> from pydantic import BaseModel, ValidationError
        >>> class User(BaseModel):
        ...     name: str
        >>> try:
        ...     User()
        ... except ValidationError as exc:
        ...     from_validation_error(exc).errors
        ('name: Field required',)
    """
    if exc is None:
        raise ArgumentError.missing("exc")
    messages = []
    for error in exc.errors(include_url=False):
        loc = _format_loc(error.get("loc", ()))
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    logger.debug("Converted %s validation error to failure outcome (%d messages)", exc.title, len(messages))
    return Outcome.failure(messages, ResultKind.INVALID_DATA)
