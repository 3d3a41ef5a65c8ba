"""Concrete validation report models satisfying the adapter protocols."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Issue(BaseModel):
    """One validation finding. ``message`` may be absent."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str | None = None
    field: str | None = Field(default=None, repr=False)


class Report(BaseModel):
    """Outcome of a validation run. Valid when it holds no issues unless stated otherwise."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={"examples": [{"issues": [{"message": "name is required", "field": "name"}]}]},
    )

    issues: tuple[Issue, ...] = ()
    valid: bool | None = Field(default=None, repr=False)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.issues if self.valid is None else self.valid

    @classmethod
    def of(cls, *messages: str | None) -> Self:
        """Shorthand for a report with one issue per message."""
        return cls(issues=tuple(Issue(message=m) for m in messages))
