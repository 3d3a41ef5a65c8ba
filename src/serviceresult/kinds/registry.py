"""Read-only views and lookups over the ResultKind set.

Lookups return Outcomes rather than raising: an unknown label or value is an
expected condition (a NotFound failure), not a defect.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .kind import ResultKind

if TYPE_CHECKING:
    from serviceresult.outcome import Outcome

_ALL: tuple[ResultKind, ...] = tuple(sorted(ResultKind, key=lambda k: k.numeric_value))
_SUCCESS: tuple[ResultKind, ...] = tuple(k for k in _ALL if k.is_success)
_FAILURE: tuple[ResultKind, ...] = tuple(k for k in _ALL if not k.is_success)
_BY_VALUE: dict[int, ResultKind] = {k.numeric_value: k for k in _ALL}


def all_kinds() -> tuple[ResultKind, ...]:
    """Every defined kind, ordered by numeric value."""
    return _ALL


def success_kinds() -> tuple[ResultKind, ...]:
    return _SUCCESS


def failure_kinds() -> tuple[ResultKind, ...]:
    return _FAILURE


def find_kind(label: str) -> Outcome[ResultKind]:
    """Look up a kind by canonical label ("NotFound") or member name ("NOT_FOUND").

    Returns a FOUND success carrying the kind, or a NOT_FOUND failure.
    """
    from serviceresult.outcome import Outcome

    if isinstance(label, str):
        try:
            return Outcome.success(ResultKind(label), ResultKind.FOUND)
        except ValueError:
            pass
    return Outcome.failure(f"Unknown result kind: {label!r}", ResultKind.NOT_FOUND)


def kind_from_value(value: int) -> Outcome[ResultKind]:
    """Look up a kind by its numeric value."""
    from serviceresult.outcome import Outcome

    kind = _BY_VALUE.get(value) if isinstance(value, int) and not isinstance(value, bool) else None
    if kind is None:
        return Outcome.failure(f"Unknown result kind value: {value!r}", ResultKind.NOT_FOUND)
    return Outcome.success(kind, ResultKind.FOUND)
