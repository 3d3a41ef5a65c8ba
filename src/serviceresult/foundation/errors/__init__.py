"""Contract-violation exceptions for serviceresult.

- ServiceResultError: base class
- ArgumentError: None/invalid input at a constructor or adapter
- StateMismatchError: kind/constructor disagreement, wrong-state access
- UnmappedKindError: a kind with no HTTP mapping
"""

from .errors import ArgumentError, ServiceResultError, StateMismatchError, UnmappedKindError

__all__ = ["ServiceResultError", "ArgumentError", "StateMismatchError", "UnmappedKindError"]
