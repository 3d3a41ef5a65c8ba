"""serviceresult - Typed service outcomes with HTTP and validation adapters.

Service operations return an Outcome instead of raising for expected failures.
Each Outcome carries a ResultKind classification, and the adapters turn
Outcomes into HTTP response descriptors or build them from validation reports.

Quick Start:
    >>> from serviceresult import Outcome, ResultKind, to_http_response
    >>>
    >>> def get_user(user_id: int) -> Outcome[dict]:
    ...     if user_id != 1:
    ...         return Outcome.failure(f"user {user_id} not found", ResultKind.NOT_FOUND)
    ...     return Outcome.success({"id": 1}, ResultKind.FOUND)
    >>>
    >>> to_http_response(get_user(2)).status_code
    404
    >>> to_http_response(get_user(1)).body
    {'id': 1}

Catching Unexpected Errors:
    >>> try:
    ...     raise ConnectionError("db unreachable")
    ... except ConnectionError as exc:
    ...     outcome = Outcome.from_exception(exc)
    >>> outcome.kind is ResultKind.UNEXPECTED_ERROR
    True

Validation Reports:
    >>> from serviceresult.validation import Report, to_failure_outcome
    >>> to_failure_outcome(Report.of("name is required")).errors
    ('name is required',)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Errors
from .foundation.errors import ArgumentError, ServiceResultError, StateMismatchError, UnmappedKindError

# Config
from .foundation.config import ServiceResultSettings, clear_settings_cache, configure_logging, get_settings

# Kinds
from .kinds import ResultKind, all_kinds, failure_kinds, find_kind, kind_from_value, success_kinds

# Outcome
from .outcome import Outcome, collect, sequence
from .void import VOID, Void

# Adapters
from .http import ErrorBody, ResponseDescriptor, to_http_response
from .validation import from_validation_error, to_failure_outcome

logging.getLogger("serviceresult").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "ServiceResultError", "ArgumentError", "StateMismatchError", "UnmappedKindError",
    # Config
    "ServiceResultSettings", "get_settings", "clear_settings_cache", "configure_logging",
    # Kinds
    "ResultKind", "all_kinds", "success_kinds", "failure_kinds", "find_kind", "kind_from_value",
    # Outcome
    "Outcome", "Void", "VOID", "sequence", "collect",
    # Adapters
    "ResponseDescriptor", "ErrorBody", "to_http_response", "to_failure_outcome", "from_validation_error",
]
