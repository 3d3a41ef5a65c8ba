"""Outcome: the discriminated success/failure result of a service operation.

Service code returns an Outcome instead of raising for expected failures.
A success carries data and a success ResultKind; a failure carries an ordered
tuple of error messages, a failure ResultKind and, when built from an
exception, the captured fault.

Examples:
    >>> created = Outcome.success({"id": 5}, ResultKind.CREATED)
    >>> created.is_success, created.data
    (True, {'id': 5})

    >>> missing = Outcome.failure("user 7 not found", ResultKind.NOT_FOUND)
    >>> missing.errors
    ('user 7 not found',)
    >>> missing.error_summary()
    'user 7 not found;\\n'

    Railway-style composition:
    >>> Outcome.success(2, ResultKind.OK).map(lambda x: x * 10).unwrap()
    20

Notes:
    - Uses __slots__ and rejects attribute assignment after construction
    - Kind/constructor agreement is checked once, at construction
    - No implicit conversions: read ``data``/``fault`` or call ``unwrap()``
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, cast

from serviceresult.foundation.errors import ArgumentError, StateMismatchError
from serviceresult.kinds.kind import ResultKind
from serviceresult.void import VOID, Void

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")
U = TypeVar("U")

_SUCCESS_WITH_FAILURE_KIND = "Error code cannot be used for success result"
_FAILURE_WITH_SUCCESS_KIND = "Success code cannot be used for error result"
_NO_ERRORS: tuple[str, ...] = ()


def _require_kind(kind: object) -> ResultKind:
    if kind is None:
        raise ArgumentError.missing("kind")
    if not isinstance(kind, ResultKind):
        raise ArgumentError(f"kind must be a ResultKind, got {type(kind).__name__}", argument="kind")
    return kind


def _normalize_errors(errors: str | Iterable[str] | None) -> tuple[str, ...]:
    if errors is None:
        raise ArgumentError.missing("errors")
    if isinstance(errors, str):
        if not errors:
            raise ArgumentError("error message must not be empty", argument="errors")
        return (errors,)
    collected = tuple(errors)
    for item in collected:
        if not isinstance(item, str):
            raise ArgumentError(f"errors must contain strings, got {type(item).__name__}", argument="errors")
    return collected


def _fault_message(fault: BaseException) -> str:
    return str(fault) or type(fault).__name__


class Outcome(Generic[T]):
    """Immutable success-or-failure value tagged with a ResultKind.

    Build through the factory classmethods; the initializer performs no checks.

    Attributes (read-only):
        data: payload of a success, None on failure
        errors: ordered error messages of a failure, empty on success
        fault: exception captured by ``from_exception``, otherwise None
        kind: the ResultKind classification
    """

    __slots__ = ("_data", "_errors", "_fault", "_kind")
    __match_args__ = ("kind", "data", "errors")

    _data: T | None
    _errors: tuple[str, ...]
    _fault: BaseException | None
    _kind: ResultKind

    def __init__(
        self,
        data: T | None,
        errors: tuple[str, ...],
        fault: BaseException | None,
        kind: ResultKind,
    ) -> None:
        """Private constructor. Use success(), failure() or from_exception()."""
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_errors", errors)
        object.__setattr__(self, "_fault", fault)
        object.__setattr__(self, "_kind", kind)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Outcome is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Outcome is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Outcome[T]], tuple[T | None, tuple[str, ...], BaseException | None, ResultKind]]:
        """Rebuild through the initializer so copy and pickle bypass the setattr guard."""
        return (type(self), (self._data, self._errors, self._fault, self._kind))

    # ─── Construction ────────────────────────────────────────────────

    @classmethod
    def success(cls, data: T, kind: ResultKind = ResultKind.OK) -> Outcome[T]:
        """Successful outcome carrying ``data``.

        Raises:
            ArgumentError: kind is not a ResultKind
            StateMismatchError: kind is a failure kind
        """
        kind = _require_kind(kind)
        if not kind.is_success:
            raise StateMismatchError(_SUCCESS_WITH_FAILURE_KIND, kind=kind)
        return cls(data, _NO_ERRORS, None, kind)

    @classmethod
    def failure(cls, errors: str | Iterable[str], kind: ResultKind) -> Outcome[T]:
        """Failed outcome carrying error messages.

        ``errors`` is either a sequence of messages (kept in order) or a single
        non-empty message.

        Raises:
            ArgumentError: errors is None, an empty string, or holds non-strings
            StateMismatchError: kind is a success kind
        """
        kind = _require_kind(kind)
        if kind.is_success:
            raise StateMismatchError(_FAILURE_WITH_SUCCESS_KIND, kind=kind)
        return cls(None, _normalize_errors(errors), None, kind)

    @classmethod
    def from_exception(cls, fault: BaseException) -> Outcome[T]:
        """UNEXPECTED_ERROR outcome wrapping a caught exception.

        Intended for catch blocks at service boundaries:

            >>> try:
            ...     raise TimeoutError("db timed out")
            ... except TimeoutError as exc:
            ...     outcome = Outcome.from_exception(exc)
            >>> outcome.kind, outcome.errors
            (<ResultKind.UNEXPECTED_ERROR: 6>, ('db timed out',))
        """
        if fault is None:
            raise ArgumentError.missing("fault")
        if not isinstance(fault, BaseException):
            raise ArgumentError(f"fault must be an exception, got {type(fault).__name__}", argument="fault")
        return cls(None, (_fault_message(fault),), fault, ResultKind.UNEXPECTED_ERROR)

    @classmethod
    def void(cls) -> Outcome[Void]:
        """OK outcome for operations that return no value."""
        return cast("Outcome[Void]", cls(VOID, _NO_ERRORS, None, ResultKind.OK))

    # ─── Accessors ───────────────────────────────────────────────────

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def errors(self) -> tuple[str, ...]:
        return self._errors

    @property
    def fault(self) -> BaseException | None:
        return self._fault

    @property
    def kind(self) -> ResultKind:
        return self._kind

    @property
    def is_success(self) -> bool:
        return self._kind.is_success

    @property
    def is_failure(self) -> bool:
        return not self._kind.is_success

    def unwrap(self) -> T:
        """Return the data of a success.

        Raises:
            StateMismatchError: the outcome is a failure
        """
        if self._kind.is_success:
            return cast(T, self._data)
        raise StateMismatchError(
            f"Called unwrap() on {self._kind.label} outcome: {'; '.join(self._errors)}",
            kind=self._kind,
        )

    def data_or(self, default: T) -> T:
        """Data of a success, ``default`` for a failure."""
        return cast(T, self._data) if self._kind.is_success else default

    def unwrap_fault(self) -> BaseException:
        """Return the captured fault.

        Raises:
            StateMismatchError: no fault was captured
        """
        if self._fault is None:
            raise StateMismatchError(f"{self._kind.label} outcome carries no fault", kind=self._kind)
        return self._fault

    # ─── Rendering ───────────────────────────────────────────────────

    def error_summary(self) -> str:
        """Every error terminated by ``;`` and a newline. Empty when there are none."""
        return "".join(f"{error};\n" for error in self._errors)

    def describe(self) -> str:
        """Multi-line diagnostic text. Not a wire format."""
        lines = [f"IsSuccess: {self.is_success}({self._kind.label})"]
        if self._kind.is_success:
            lines.append(f"Data: {self._data}")
        else:
            lines.append(f"Errors: {self.error_summary().rstrip()}")
            if self._fault is not None:
                lines.append(f"Exception: {self._fault!r}")
        return "\n".join(lines) + "\n"

    __str__ = describe

    def __repr__(self) -> str:
        if self._kind.is_success:
            return f"Outcome.success({self._data!r}, {self._kind!r})"
        return f"Outcome.failure({list(self._errors)!r}, {self._kind!r})"

    # ─── Composition ─────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Outcome[U]:
        """Apply ``f`` to the data of a success, keeping its kind. Failures pass through."""
        if self._kind.is_success:
            return Outcome(f(cast(T, self._data)), _NO_ERRORS, None, self._kind)
        return cast("Outcome[U]", self)

    def flat_map(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain an operation that itself returns an Outcome. Failures short-circuit."""
        if self._kind.is_success:
            return f(cast(T, self._data))
        return cast("Outcome[U]", self)

    def and_then(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def inspect(self, f: Callable[[T], None]) -> Outcome[T]:
        """Call ``f`` with the data of a success for side effects, return self."""
        if self._kind.is_success:
            f(cast(T, self._data))
        return self

    def inspect_failure(self, f: Callable[[tuple[str, ...]], None]) -> Outcome[T]:
        """Call ``f`` with the errors of a failure for side effects, return self."""
        if not self._kind.is_success:
            f(self._errors)
        return self

    def match(self, *, success: Callable[[T], U], failure: Callable[[Outcome[T]], U]) -> U:
        """Exhaustive case analysis.

        ``success`` receives the data; ``failure`` receives the failed outcome
        itself so it can branch on kind, errors and fault.
        """
        if self._kind.is_success:
            return success(cast(T, self._data))
        return failure(self)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        """Structural equality; faults compare by identity."""
        if not isinstance(other, Outcome):
            return NotImplemented
        return (
            self._kind is other._kind
            and self._errors == other._errors
            and self._fault is other._fault
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._errors, id(self._fault), self._data))


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(outcomes: Sequence[Outcome[T]]) -> Outcome[list[T]]:
    """Turn outcomes into one outcome of a list.

    Fails fast with the first failure; otherwise OK with every data in order.

    Example:
        >>> ok = lambda x: Outcome.success(x, ResultKind.OK)
        >>> sequence([ok(1), ok(2)]).unwrap()
        [1, 2]
    """
    values: list[T] = []
    for outcome in outcomes:
        if outcome.is_failure:
            return cast("Outcome[list[T]]", outcome)
        values.append(cast(T, outcome.data))
    return Outcome.success(values, ResultKind.OK)


def collect(
    outcomes: Sequence[Outcome[T]],
    kind: ResultKind = ResultKind.GENERIC_ERROR,
) -> Outcome[list[T]]:
    """Like sequence, but accumulates the errors of every failure.

    The merged failure keeps the failures' kind when they all agree and
    falls back to ``kind`` otherwise.

    Example:
        >>> fail = lambda m: Outcome.failure(m, ResultKind.INVALID_DATA)
        >>> collect([fail("e1"), Outcome.success(2), fail("e2")]).errors
        ('e1', 'e2')
    """
    values: list[T] = []
    errors: list[str] = []
    kinds: set[ResultKind] = set()
    for outcome in outcomes:
        if outcome.is_success:
            values.append(cast(T, outcome.data))
        else:
            errors.extend(outcome.errors)
            kinds.add(outcome.kind)
    if not kinds:
        return Outcome.success(values, ResultKind.OK)
    merged_kind = kinds.pop() if len(kinds) == 1 else kind
    return Outcome.failure(errors, merged_kind)
