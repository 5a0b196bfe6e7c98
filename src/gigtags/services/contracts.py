"""Typed payload contracts for facet operations.

These models validate payload shapes before they leave the service
layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class FacetSplitData(BaseModel):
    """Payload contract for ``FacetService.split``.

    ``date`` is an ISO date string, or None when the suffix is date-like
    but not a calendar date.
    """

    facet: str
    prefix: str
    date_suffix: str
    date: str | None


class FacetInspectData(BaseModel):
    """Payload contract for ``FacetService.inspect``."""

    facet: str
    valid: bool
    empty: bool
    has_date_like_suffix: bool
    has_invalid_date_like_suffix: bool
    prefix: str | None = None
    date_suffix: str | None = None
    date: str | None = None


class FacetBuildData(BaseModel):
    """Payload contract for ``FacetService.build``."""

    facet: str
    prefix: str
    date: str
    valid: bool
