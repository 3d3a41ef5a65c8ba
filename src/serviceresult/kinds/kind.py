"""Closed classification attached to every Outcome.

ResultKind is a rich enum: each member carries its canonical label, a numeric
value that is stable across versions, and whether it classifies a success.

Examples:
    >>> ResultKind.NOT_FOUND.label, ResultKind.NOT_FOUND.numeric_value
    ('NotFound', 1)
    >>> ResultKind.CREATED.is_success
    True
    >>> ResultKind(8) is ResultKind.OK
    True
    >>> ResultKind("InvalidData") is ResultKind.INVALID_DATA
    True
"""

from __future__ import annotations

from enum import Enum, unique

from serviceresult.foundation.errors import ArgumentError

_FAIL = False
_SUCCESS = True


@unique
class ResultKind(Enum):
    """Outcome classification codes.

    Members are declared in numeric order so iteration order is stable.
    Lookups by value (int) and by label (str) go through the constructor.
    """

    GENERIC_ERROR = ("GenericError", 0, _FAIL)
    """An error not covered by the other codes."""
    NOT_FOUND = ("NotFound", 1, _FAIL)
    """The requested resource does not exist."""
    INVALID_DATA = ("InvalidData", 2, _FAIL)
    """The request data failed validation."""
    MULTIPLICITY = ("Multiplicity", 3, _FAIL)
    """More than one resource matched where one was expected."""
    AUTHENTICATION_ERROR = ("AuthenticationError", 4, _FAIL)
    """The caller is not authenticated."""
    AUTHORIZATION_ERROR = ("AuthorizationError", 5, _FAIL)
    """The caller is authenticated but not allowed to act."""
    UNEXPECTED_ERROR = ("UnexpectedError", 6, _FAIL)
    """A captured exception. Prefer GENERIC_ERROR for anticipated failures."""
    CREATED = ("Created", 7, _SUCCESS)
    """The resource was created."""
    OK = ("Ok", 8, _SUCCESS)
    """The operation succeeded."""
    FOUND = ("Found", 9, _SUCCESS)
    """The requested resource was found."""

    label: str
    numeric_value: int
    is_success: bool

    def __new__(cls, label: str, numeric_value: int, is_success: bool) -> ResultKind:
        member = object.__new__(cls)
        member._value_ = numeric_value
        member.label = label
        member.numeric_value = numeric_value
        member.is_success = is_success
        return member

    @classmethod
    def _missing_(cls, value: object) -> ResultKind | None:
        # Label lookup: ResultKind("NotFound") and ResultKind("NOT_FOUND")
        if isinstance(value, str):
            return _BY_LABEL.get(value) or cls.__members__.get(value)
        return None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def parse(cls, label: str) -> ResultKind:
        """Resolve a label or member name, raising ArgumentError when unknown."""
        try:
            return cls(label)
        except ValueError:
            raise ArgumentError(f"Unknown result kind: {label!r}", argument="label") from None

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<ResultKind.{self.name}: {self.numeric_value}>"


_BY_LABEL: dict[str, ResultKind] = {kind.label: kind for kind in ResultKind}

if len(_BY_LABEL) != len(ResultKind):
    raise RuntimeError("ResultKind labels must be unique")
