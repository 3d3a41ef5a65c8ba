"""Protocol-level response values produced by the HTTP mapping.

Serialization and transport belong to the serving framework; these models only
describe status, body and headers.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ResponseDescriptor(BaseModel):
    """Status code, optional body and headers of an HTTP response.

    Only the fields are frozen: ``headers`` is validated into a fresh dict owned
    by the descriptor, so the caller's mapping is never aliased, but the dict
    itself is not read-only. Use ``with_header`` to derive a modified copy.

    Example:
        >>> ResponseDescriptor(status_code=201, body={"id": 5}, headers={"Location": "/items/5"})
        ResponseDescriptor(status_code=201, body={'id': 5}, headers={'Location': '/items/5'})
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        json_schema_extra={"title": "Response Descriptor"},
    )

    status_code: Annotated[int, Field(ge=100, le=599)]
    body: Any | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    @computed_field(repr=False)
    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def location(self) -> str | None:
        return self.headers.get("Location")

    def with_header(self, name: str, value: str) -> ResponseDescriptor:
        """Return a copy with ``name`` set, leaving this descriptor untouched."""
        return self.model_copy(update={"headers": {**self.headers, name: value}})


class ErrorBody(BaseModel):
    """Error payload used at the detailed error level."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    messages: tuple[str, ...]
    details: str | None = Field(default=None, repr=False)

    def with_details(self, details: str) -> ErrorBody:
        """Return a copy carrying ``details``."""
        return self.model_copy(update={"details": details})
