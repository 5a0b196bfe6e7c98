"""Facets: tag-like labels with an optional ``~YYYYMMDD`` date suffix.

A facet is valid if it has no leading or trailing whitespace and does not
start with ``/``.  The empty facet is valid.

Suffix detection and splitting deliberately disagree on whitespace:
:func:`has_date_like_suffix` rejects a ``~`` separator that is preceded by
whitespace, while :func:`try_split_into_prefix_and_date_like_suffix` only
slices off the trailing 9 characters and never looks at the prefix.

Examples:
    >>> has_date_like_suffix("a~20220625")
    True
    >>> has_date_like_suffix("a ~20220625")
    False
    >>> try_split_into_prefix_and_date_suffix("a ~20220625")
    ('a ', datetime.date(2022, 6, 25))

INVARIANT: All query functions are pure and require a valid facet.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Self

from gigtags.domain.errors import FacetFormatError

# ~yyyyMMdd
DATE_LIKE_SUFFIX_LEN = 1 + 8

DATE_SUFFIX_SEPARATOR = "~"

# Whitespace is the Unicode White_Space property. Neither str.strip() nor
# the regex \s may be used: both also match the separators U+001C..U+001F.
WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_WHITE_SPACE_CLASS = re.escape(WHITE_SPACE)

# The '~' separator must not be preceded by whitespace, i.e. the facet
# either equals the date-like suffix or the separator follows a
# non-whitespace character.
DATE_LIKE_SUFFIX_RE = re.compile(rf"(?:^|[^{_WHITE_SPACE_CLASS}])~[0-9]{{8}}\Z")

INVALID_DATE_LIKE_SUFFIX_RE = re.compile(rf"[{_WHITE_SPACE_CLASS}]+~[0-9]{{8}}\Z")

DATE_SUFFIX_RE = re.compile(r"~(?P<year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})")


def is_valid(facet: str) -> bool:
    """Check if the given facet is valid.

    An empty facet is valid.
    """
    return facet.strip(WHITE_SPACE) == facet and not facet.startswith("/")


def is_empty(facet: str) -> bool:
    """Check if the given facet is empty."""
    assert is_valid(facet)
    return not facet


def has_date_like_suffix(facet: str) -> bool:
    """Check for a date-like suffix in the facet."""
    assert is_valid(facet)
    return DATE_LIKE_SUFFIX_RE.search(facet) is not None


def has_invalid_date_like_suffix(facet: str) -> bool:
    """Check for a date-like suffix that is preceded by whitespace."""
    assert is_valid(facet)
    return INVALID_DATE_LIKE_SUFFIX_RE.search(facet) is not None


def try_split_into_prefix_and_date_like_suffix(facet: str) -> tuple[str, str] | None:
    """Split a facet into a prefix and the date-like suffix.

    Only the length is checked: the trailing 9 characters become the
    suffix without verifying their shape.  Returns None if the facet is
    too short or the trailing characters are not ASCII.
    """
    assert is_valid(facet)
    if len(facet) < DATE_LIKE_SUFFIX_LEN:
        return None
    prefix_len = len(facet) - DATE_LIKE_SUFFIX_LEN
    date_suffix = facet[prefix_len:]
    if not date_suffix.isascii():
        return None
    return facet[:prefix_len], date_suffix


def try_split_into_prefix_and_date_suffix(facet: str) -> tuple[str, date | None] | None:
    """Split a facet into a prefix and the parsed date suffix.

    The split succeeds even if the suffix is not a calendar date, in
    which case the date component is None.
    """
    assert is_valid(facet)
    split = try_split_into_prefix_and_date_like_suffix(facet)
    if split is None:
        return None
    prefix, date_suffix = split
    return prefix, parse_date_suffix(date_suffix)


def parse_date_suffix(date_suffix: str) -> date | None:
    """Parse ``~YYYYMMDD`` into a date, or None if it is not a real date."""
    m = DATE_SUFFIX_RE.fullmatch(date_suffix)
    if m is None:
        return None
    try:
        # Year 0000 is not representable by datetime.date and parses to None.
        return date(int(m.group("year")), int(m.group("month")), int(m.group("day")))
    except ValueError:
        return None


def format_date_suffix(value: date) -> str:
    """Render *value* as ``~YYYYMMDD``.

    Raises:
        FacetFormatError: If the year does not fit into 4 digits.
    """
    if not 0 <= value.year <= 9999:
        msg = f"Year {value.year} does not fit into the date suffix format"
        raise FacetFormatError(msg)
    return f"{DATE_SUFFIX_SEPARATOR}{value.year:04d}{value.month:02d}{value.day:02d}"


class Facet(ABC):
    """Common operations for facets backed by a string representation."""

    @abstractmethod
    def __str__(self) -> str: ...

    @classmethod
    @abstractmethod
    def from_str(cls, facet: str) -> Self:
        """Create a facet from a string."""

    @classmethod
    def from_prefix_with_date_suffix(cls, prefix: str, value: date) -> Self:
        """Concatenate a prefix and a date suffix to a facet.

        The prefix must not end with trailing whitespace, otherwise the
        resulting facet has an invalid date-like suffix.

        Raises:
            FacetFormatError: If formatting of *value* fails.
        """
        suffix = format_date_suffix(value)
        return cls.from_str(f"{prefix}{suffix}")

    @classmethod
    def from_prefix_args_with_date_suffix(
        cls, template: str, /, *args: Any, date: date, **kwargs: Any
    ) -> Self:
        """Like :meth:`from_prefix_with_date_suffix` with a ``str.format`` prefix template.

        The template and the suffix are rendered in a single pass.

        Raises:
            FacetFormatError: If formatting of *date* fails.
        """
        suffix = format_date_suffix(date)
        return cls.from_str((template + suffix).format(*args, **kwargs))

    def is_valid(self) -> bool:
        return is_valid(str(self))

    def is_empty(self) -> bool:
        return is_empty(str(self))

    def has_date_like_suffix(self) -> bool:
        return has_date_like_suffix(str(self))

    def has_invalid_date_like_suffix(self) -> bool:
        return has_invalid_date_like_suffix(str(self))

    def try_split_into_prefix_and_date_like_suffix(self) -> tuple[str, str] | None:
        return try_split_into_prefix_and_date_like_suffix(str(self))

    def try_split_into_prefix_and_date_suffix(self) -> tuple[str, date | None] | None:
        return try_split_into_prefix_and_date_suffix(str(self))


@dataclass(frozen=True, order=True)
class CompactFacet(Facet):
    """Facet stored as an immutable string."""

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def from_str(cls, facet: str) -> Self:
        return cls(facet)


def build_from_prefix_and_date(prefix: str, value: date) -> CompactFacet:
    """Build a :class:`CompactFacet` from a prefix and a date suffix."""
    return CompactFacet.from_prefix_with_date_suffix(prefix, value)
