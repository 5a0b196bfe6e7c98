"""Domain exceptions for facets."""

from __future__ import annotations


class FacetError(Exception):
    """Base class for facet domain errors."""


class FacetFormatError(FacetError, ValueError):
    """A date could not be written into the fixed ``~YYYYMMDD`` suffix template."""
