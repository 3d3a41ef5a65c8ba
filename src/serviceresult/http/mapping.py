"""Map Outcomes onto HTTP response descriptors.

Dispatch is by ResultKind identity through a table that must cover every
kind; the module refuses to import otherwise.

| kind                 | status | body                 |
|----------------------|--------|----------------------|
| INVALID_DATA         | 400    | errors               |
| MULTIPLICITY         | 409    | errors               |
| GENERIC_ERROR        | 500    | errors               |
| NOT_FOUND            | 404    | errors               |
| AUTHENTICATION_ERROR | 401    | -                    |
| UNEXPECTED_ERROR     | 500    | errors               |
| AUTHORIZATION_ERROR  | 403    | -                    |
| OK                   | 200    | data (204 when void) |
| CREATED              | 201    | data + Location      |
| FOUND                | 200    | data                 |

Example:
    >>> to_http_response(Outcome.failure("bad", ResultKind.INVALID_DATA)).status_code
    400
    >>> r = to_http_response(Outcome.success({"id": 5}, ResultKind.CREATED), "/items/5")
    >>> r.status_code, r.headers
    (201, {'Location': '/items/5'})
"""

from __future__ import annotations

import logging
import traceback
from http import HTTPStatus
from typing import Any, Callable, TypeVar

from serviceresult.foundation.config import ErrorDetailLevel, HttpSettings, get_settings
from serviceresult.foundation.errors import ArgumentError, UnmappedKindError
from serviceresult.kinds import ResultKind
from serviceresult.outcome import Outcome
from serviceresult.void import Void

from .response import ErrorBody, ResponseDescriptor

logger = logging.getLogger("serviceresult.http")

T = TypeVar("T")

_Handler = Callable[[Outcome[Any], str | None, HttpSettings], ResponseDescriptor]


# ─────────────────────────────────────────────────────────────────────────────
# Body Rendering
# ─────────────────────────────────────────────────────────────────────────────


def _fault_details(fault: BaseException) -> str:
    return "".join(traceback.format_exception(fault)).rstrip()


def _payload(outcome: Outcome[Any]) -> Any:
    # Void data never reaches the serving layer
    return None if isinstance(outcome.data, Void) else outcome.data


def _error_body(outcome: Outcome[Any], settings: HttpSettings) -> Any:
    match settings.error_detail_level:
        case ErrorDetailLevel.GENERIC:
            return [settings.default_error_message]
        case ErrorDetailLevel.DETAILED:
            body = ErrorBody(messages=outcome.errors)
            if settings.include_exception_details and outcome.fault is not None:
                body = body.with_details(_fault_details(outcome.fault))
            return body.model_dump()
        case _:
            return list(outcome.errors)


# ─────────────────────────────────────────────────────────────────────────────
# Handlers
# ─────────────────────────────────────────────────────────────────────────────


def _with_errors(status: HTTPStatus) -> _Handler:
    def handler(outcome: Outcome[Any], location: str | None, settings: HttpSettings) -> ResponseDescriptor:
        return ResponseDescriptor(status_code=int(status), body=_error_body(outcome, settings))
    return handler


def _empty(status: HTTPStatus) -> _Handler:
    def handler(outcome: Outcome[Any], location: str | None, settings: HttpSettings) -> ResponseDescriptor:
        return ResponseDescriptor(status_code=int(status))
    return handler


def _with_data(status: HTTPStatus) -> _Handler:
    def handler(outcome: Outcome[Any], location: str | None, settings: HttpSettings) -> ResponseDescriptor:
        return ResponseDescriptor(status_code=int(status), body=_payload(outcome))
    return handler


def _ok(outcome: Outcome[Any], location: str | None, settings: HttpSettings) -> ResponseDescriptor:
    body = _payload(outcome)
    if body is None and settings.no_content_for_void:
        return ResponseDescriptor(status_code=int(HTTPStatus.NO_CONTENT))
    return ResponseDescriptor(status_code=int(HTTPStatus.OK), body=body)


def _created(outcome: Outcome[Any], location: str | None, settings: HttpSettings) -> ResponseDescriptor:
    uri = location or settings.default_location
    headers = {"Location": uri} if uri else {}
    return ResponseDescriptor(status_code=int(HTTPStatus.CREATED), body=_payload(outcome), headers=headers)


_HANDLERS: dict[ResultKind, _Handler] = {
    ResultKind.INVALID_DATA: _with_errors(HTTPStatus.BAD_REQUEST),
    ResultKind.MULTIPLICITY: _with_errors(HTTPStatus.CONFLICT),
    ResultKind.GENERIC_ERROR: _with_errors(HTTPStatus.INTERNAL_SERVER_ERROR),
    ResultKind.NOT_FOUND: _with_errors(HTTPStatus.NOT_FOUND),
    ResultKind.AUTHENTICATION_ERROR: _empty(HTTPStatus.UNAUTHORIZED),
    ResultKind.UNEXPECTED_ERROR: _with_errors(HTTPStatus.INTERNAL_SERVER_ERROR),
    ResultKind.AUTHORIZATION_ERROR: _empty(HTTPStatus.FORBIDDEN),
    ResultKind.OK: _ok,
    ResultKind.CREATED: _created,
    ResultKind.FOUND: _with_data(HTTPStatus.OK),
}

_UNMAPPED = [kind for kind in ResultKind if kind not in _HANDLERS]
if _UNMAPPED:
    raise UnmappedKindError(_UNMAPPED[0])


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────


def is_mapped(kind: ResultKind) -> bool:
    """Whether ``kind`` has an HTTP mapping."""
    return kind in _HANDLERS


def to_http_response(
    outcome: Outcome[T],
    location: str | None = None,
    *,
    settings: HttpSettings | None = None,
) -> ResponseDescriptor:
    """Build the response descriptor for ``outcome``.

    Args:
        outcome: the outcome to translate
        location: Location header for CREATED outcomes (ignored otherwise)
        settings: HTTP settings, defaults to the global configuration

    Raises:
        ArgumentError: outcome is None or not an Outcome
        UnmappedKindError: the outcome's kind has no table entry
    """
    if outcome is None:
        raise ArgumentError.missing("outcome")
    if not isinstance(outcome, Outcome):
        raise ArgumentError(f"outcome must be an Outcome, got {type(outcome).__name__}", argument="outcome")

    handler = _HANDLERS.get(outcome.kind)
    if handler is None:
        raise UnmappedKindError(outcome.kind)

    response = handler(outcome, location, settings or get_settings().http)
    if outcome.fault is not None:
        logger.warning(
            "%s outcome mapped to HTTP %d: %s",
            outcome.kind.label, response.status_code, "; ".join(outcome.errors),
            exc_info=outcome.fault,
        )
    else:
        logger.debug("%s outcome mapped to HTTP %d", outcome.kind.label, response.status_code)
    return response
