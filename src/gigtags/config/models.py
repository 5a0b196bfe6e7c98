"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gigtags.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class FacetsConfig(BaseModel):
    """[facets] section."""

    model_config = {"frozen": True}

    # Treat a whitespace-detached date suffix (or a prefix that would
    # produce one) as an error instead of a warning.
    strict: bool = False

