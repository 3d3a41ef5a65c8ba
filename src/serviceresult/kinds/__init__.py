"""ResultKind enumeration and registry views."""

from .kind import ResultKind
from .registry import all_kinds, failure_kinds, find_kind, kind_from_value, success_kinds

__all__ = ["ResultKind", "all_kinds", "success_kinds", "failure_kinds", "find_kind", "kind_from_value"]
