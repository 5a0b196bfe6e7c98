"""gigtags: facets with optional ``~YYYYMMDD`` date suffixes."""

from gigtags.domain.errors import FacetError, FacetFormatError
from gigtags.domain.facet import (
    CompactFacet,
    Facet,
    build_from_prefix_and_date,
    has_date_like_suffix,
    has_invalid_date_like_suffix,
    is_empty,
    is_valid,
    try_split_into_prefix_and_date_like_suffix,
    try_split_into_prefix_and_date_suffix,
)

__version__ = "0.1.0"

__all__ = [
    "CompactFacet",
    "Facet",
    "FacetError",
    "FacetFormatError",
    "build_from_prefix_and_date",
    "has_date_like_suffix",
    "has_invalid_date_like_suffix",
    "is_empty",
    "is_valid",
    "try_split_into_prefix_and_date_like_suffix",
    "try_split_into_prefix_and_date_suffix",
]
