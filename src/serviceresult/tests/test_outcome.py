"""Tests for Outcome construction, accessors and composition.

Validates:
- Kind/constructor agreement at construction
- Error ordering and summary rendering
- Exception capture
- Immutability and explicit views
- Railway helpers and collection operations
"""

from __future__ import annotations

import copy
import pickle
from collections.abc import Callable
from dataclasses import dataclass

import pytest

from serviceresult import VOID, ArgumentError, Outcome, ResultKind, StateMismatchError, Void, collect, sequence
from serviceresult.kinds import failure_kinds, success_kinds


@dataclass(frozen=True)
class Item:
    name: str
    value: int


ITEM = Item(name="Name", value=500)
ERRORS = ["Error 1", "Error 2", "Error 3"]


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("kind", success_kinds())
def test_success_with_success_kind(kind: ResultKind) -> None:
    """Every success kind builds a success carrying the data."""
    result = Outcome.success(ITEM, kind)

    assert result.is_success
    assert not result.is_failure
    assert result.data == ITEM
    assert result.errors == ()
    assert result.fault is None
    assert result.kind is kind


@pytest.mark.parametrize("kind", failure_kinds())
def test_success_with_failure_kind_raises(kind: ResultKind) -> None:
    """Success rejects failure kinds."""
    with pytest.raises(StateMismatchError, match="Error code cannot be used for success result"):
        Outcome.success(ITEM, kind)


@pytest.mark.parametrize("kind", failure_kinds())
def test_failure_with_error_list(kind: ResultKind) -> None:
    """Errors keep insertion order; data and fault stay unset."""
    result: Outcome[Item] = Outcome.failure(ERRORS, kind)

    assert not result.is_success
    assert result.kind is kind
    assert result.errors == tuple(ERRORS)
    assert result.data is None
    assert result.fault is None


@pytest.mark.parametrize("kind", failure_kinds())
def test_failure_with_single_error(kind: ResultKind) -> None:
    """A single message becomes a one-element error tuple."""
    result: Outcome[Item] = Outcome.failure("error", kind)

    assert result.errors == ("error",)
    assert result.kind is kind


@pytest.mark.parametrize("kind", success_kinds())
def test_failure_with_success_kind_raises(kind: ResultKind) -> None:
    """Failure rejects success kinds."""
    with pytest.raises(StateMismatchError, match="Success code cannot be used for error result"):
        Outcome.failure("error", kind)
    with pytest.raises(StateMismatchError):
        Outcome.failure(ERRORS, kind)


def test_failure_argument_validation() -> None:
    """None, empty strings and non-string errors are rejected."""
    with pytest.raises(ArgumentError):
        Outcome.failure(None, ResultKind.NOT_FOUND)  # type: ignore[arg-type]
    with pytest.raises(ArgumentError):
        Outcome.failure("", ResultKind.NOT_FOUND)
    with pytest.raises(ArgumentError):
        Outcome.failure(["ok", 3], ResultKind.NOT_FOUND)  # type: ignore[list-item]


def test_failure_copies_errors() -> None:
    """Mutating the caller's list does not leak into the outcome."""
    errors = ["a"]
    result: Outcome[None] = Outcome.failure(errors, ResultKind.GENERIC_ERROR)
    errors.append("b")
    assert result.errors == ("a",)


def test_failure_with_empty_list_is_allowed() -> None:
    """An empty error list is valid and summarizes to nothing."""
    result: Outcome[None] = Outcome.failure([], ResultKind.GENERIC_ERROR)
    assert result.errors == ()
    assert result.error_summary() == ""


def test_kind_must_be_result_kind() -> None:
    """Strings and None are rejected as kinds."""
    with pytest.raises(ArgumentError):
        Outcome.success(ITEM, "Ok")  # type: ignore[arg-type]
    with pytest.raises(ArgumentError):
        Outcome.failure("x", None)  # type: ignore[arg-type]


def test_success_defaults_to_ok() -> None:
    """Success without a kind is OK."""
    assert Outcome.success(1).kind is ResultKind.OK


def test_void_outcome() -> None:
    """void() is an OK success carrying VOID."""
    result = Outcome.void()
    assert result.is_success
    assert result.kind is ResultKind.OK
    assert result.data is VOID
    assert Void() is VOID


# ═════════════════════════════════════════════════════════════════════════════
# Exception Capture
# ═════════════════════════════════════════════════════════════════════════════


def test_from_exception() -> None:
    """The fault message becomes the only error."""
    exc = Exception("Error")
    result: Outcome[Item] = Outcome.from_exception(exc)

    assert not result.is_success
    assert result.kind is ResultKind.UNEXPECTED_ERROR
    assert result.errors == ("Error",)
    assert result.data is None
    assert result.fault is exc
    assert result.unwrap_fault() is exc


def test_from_exception_without_message_uses_class_name() -> None:
    """Empty exception messages fall back to the class name."""
    assert Outcome.from_exception(KeyboardInterrupt()).errors == ("KeyboardInterrupt",)


def test_from_exception_rejects_none_and_non_exceptions() -> None:
    """Only exceptions can be captured."""
    with pytest.raises(ArgumentError):
        Outcome.from_exception(None)  # type: ignore[arg-type]
    with pytest.raises(ArgumentError):
        Outcome.from_exception("boom")  # type: ignore[arg-type]


def test_unwrap_fault_without_fault_raises() -> None:
    """unwrap_fault requires a captured fault."""
    with pytest.raises(StateMismatchError):
        Outcome.failure("x", ResultKind.NOT_FOUND).unwrap_fault()


# ═════════════════════════════════════════════════════════════════════════════
# Rendering
# ═════════════════════════════════════════════════════════════════════════════


def test_error_summary() -> None:
    """Each error ends with a semicolon and newline."""
    assert Outcome.success(1, ResultKind.OK).error_summary() == ""
    assert Outcome.failure(["a", "b"], ResultKind.INVALID_DATA).error_summary() == "a;\nb;\n"


def test_describe_success() -> None:
    """Success descriptions show kind and data."""
    text = Outcome.success(ITEM, ResultKind.FOUND).describe()
    assert text.startswith("IsSuccess: True(Found)\n")
    assert f"Data: {ITEM}" in text


def test_describe_failure_with_fault() -> None:
    """Failure descriptions include the fault repr."""
    exc = ValueError("broken")
    text = str(Outcome.from_exception(exc))
    assert text.startswith("IsSuccess: False(UnexpectedError)\n")
    assert "Errors: broken;" in text
    assert "Exception: ValueError('broken')" in text


def test_describe_failure_without_fault() -> None:
    """No Exception line without a fault."""
    text = Outcome.failure(["a", "b"], ResultKind.NOT_FOUND).describe()
    assert "Errors: a;\nb;" in text
    assert "Exception" not in text


def test_repr() -> None:
    """repr reads like the factory call."""
    assert repr(Outcome.success(1, ResultKind.OK)) == "Outcome.success(1, <ResultKind.OK: 8>)"
    assert repr(Outcome.failure("x", ResultKind.NOT_FOUND)) == "Outcome.failure(['x'], <ResultKind.NOT_FOUND: 1>)"


# ═════════════════════════════════════════════════════════════════════════════
# Immutability & Views
# ═════════════════════════════════════════════════════════════════════════════


def test_outcome_is_immutable() -> None:
    """Assignment and deletion raise AttributeError."""
    result = Outcome.success(ITEM, ResultKind.OK)
    with pytest.raises(AttributeError):
        result._data = None  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.kind = ResultKind.CREATED  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del result._kind


@pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy, lambda o: pickle.loads(pickle.dumps(o))])
def test_success_survives_copy_and_pickle(clone: Callable[[Outcome[Item]], Outcome[Item]]) -> None:
    """Copies rebuild through the initializer and stay equal and immutable."""
    original = Outcome.success(ITEM, ResultKind.CREATED)
    cloned = clone(original)

    assert cloned == original
    assert cloned.kind is ResultKind.CREATED
    with pytest.raises(AttributeError):
        cloned._data = None  # type: ignore[misc]


def test_void_and_failure_survive_pickle() -> None:
    """VOID keeps its identity; failures keep kind and ordered errors."""
    void = pickle.loads(pickle.dumps(Outcome.void()))
    assert void.data is VOID

    failed = pickle.loads(pickle.dumps(Outcome.failure(ERRORS, ResultKind.INVALID_DATA)))
    assert failed.kind is ResultKind.INVALID_DATA
    assert failed.errors == tuple(ERRORS)

    faulted = copy.deepcopy(Outcome.from_exception(ValueError("boom")))
    assert faulted.kind is ResultKind.UNEXPECTED_ERROR
    assert isinstance(faulted.fault, ValueError)
    assert faulted.errors == ("boom",)


def test_accessors_are_idempotent() -> None:
    """Repeated reads return the same values."""
    exc = RuntimeError("x")
    result: Outcome[Item] = Outcome.from_exception(exc)
    assert result.error_summary() == result.error_summary()
    assert result.fault is result.fault
    assert result.data is result.data
    assert result.errors is result.errors


def test_unwrap_and_data_or() -> None:
    """unwrap raises on failure; data_or falls back."""
    ok = Outcome.success(ITEM, ResultKind.OK)
    failed: Outcome[Item] = Outcome.failure("missing", ResultKind.NOT_FOUND)

    assert ok.unwrap() == ITEM
    assert ok.data_or(Item("other", 0)) == ITEM
    assert failed.data_or(Item("other", 0)) == Item("other", 0)
    with pytest.raises(StateMismatchError, match="NotFound"):
        failed.unwrap()


def test_equality_and_hash() -> None:
    """Equal outcomes hash equally."""
    assert Outcome.success(1, ResultKind.OK) == Outcome.success(1, ResultKind.OK)
    assert Outcome.success(1, ResultKind.OK) != Outcome.success(1, ResultKind.FOUND)
    assert Outcome.failure("a", ResultKind.NOT_FOUND) == Outcome.failure(["a"], ResultKind.NOT_FOUND)
    assert hash(Outcome.success(1, ResultKind.OK)) == hash(Outcome.success(1, ResultKind.OK))
    assert Outcome.success(1, ResultKind.OK) != 1


def test_pattern_matching() -> None:
    """Outcomes destructure by kind, data and errors."""
    match Outcome.failure("gone", ResultKind.NOT_FOUND):
        case Outcome(ResultKind.NOT_FOUND, None, errors):
            matched = errors
        case _:
            matched = None
    assert matched == ("gone",)


# ═════════════════════════════════════════════════════════════════════════════
# Composition
# ═════════════════════════════════════════════════════════════════════════════


def test_map_keeps_kind() -> None:
    """map transforms the data and keeps the success kind."""
    mapped = Outcome.success(5, ResultKind.CREATED).map(lambda x: x * 2)
    assert mapped.data == 10
    assert mapped.kind is ResultKind.CREATED


def test_map_and_flat_map_pass_failures_through() -> None:
    """Failures skip the mapped function."""
    failed: Outcome[int] = Outcome.failure("nope", ResultKind.INVALID_DATA)
    assert failed.map(lambda x: x * 2) is failed
    assert failed.flat_map(lambda x: Outcome.success(x)) is failed


def test_flat_map_chains() -> None:
    """flat_map and and_then chain dependent operations."""
    def positive(n: int) -> Outcome[int]:
        return Outcome.success(n) if n > 0 else Outcome.failure("must be positive", ResultKind.INVALID_DATA)

    assert Outcome.success(3).and_then(positive).unwrap() == 3
    assert Outcome.success(-1).flat_map(positive).errors == ("must be positive",)


def test_inspect_and_match() -> None:
    """inspect hooks run on their branch only; match picks one handler."""
    seen: list[object] = []
    Outcome.success(1).inspect(seen.append).inspect_failure(seen.append)
    Outcome.failure("e", ResultKind.NOT_FOUND).inspect(seen.append).inspect_failure(seen.append)
    assert seen == [1, ("e",)]

    label = Outcome.failure("e", ResultKind.MULTIPLICITY).match(
        success=lambda data: "ok",
        failure=lambda o: o.kind.label,
    )
    assert label == "Multiplicity"


def test_sequence() -> None:
    """sequence stops at the first failure."""
    assert sequence([Outcome.success(1), Outcome.success(2)]).unwrap() == [1, 2]

    first = Outcome.failure("e1", ResultKind.NOT_FOUND)
    assert sequence([Outcome.success(1), first, Outcome.failure("e2", ResultKind.NOT_FOUND)]) is first


def test_collect_accumulates_errors() -> None:
    """collect gathers every failure's errors in order."""
    outcomes = [
        Outcome.failure("e1", ResultKind.INVALID_DATA),
        Outcome.success(2),
        Outcome.failure(["e2", "e3"], ResultKind.INVALID_DATA),
    ]
    merged = collect(outcomes)
    assert merged.kind is ResultKind.INVALID_DATA
    assert merged.errors == ("e1", "e2", "e3")


def test_collect_mixed_kinds_falls_back() -> None:
    """Disagreeing failure kinds merge under the fallback kind."""
    outcomes = [Outcome.failure("a", ResultKind.INVALID_DATA), Outcome.failure("b", ResultKind.NOT_FOUND)]
    assert collect(outcomes).kind is ResultKind.GENERIC_ERROR
    assert collect(outcomes, ResultKind.MULTIPLICITY).kind is ResultKind.MULTIPLICITY
    assert collect([Outcome.success(1)]).unwrap() == [1]
