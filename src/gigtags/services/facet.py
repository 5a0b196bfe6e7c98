"""FacetService: inspect, split, and build facets.

Wraps the pure functions of :mod:`gigtags.domain.facet` and turns their
boolean/optional outcomes into :class:`ServiceResult` payloads.  The
suffix queries are only ever invoked on valid facets.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gigtags.config.models import FacetsConfig
from gigtags.domain.errors import FacetFormatError
from gigtags.domain.facet import (
    WHITE_SPACE,
    build_from_prefix_and_date,
    has_date_like_suffix,
    has_invalid_date_like_suffix,
    is_empty,
    is_valid,
    try_split_into_prefix_and_date_like_suffix,
    try_split_into_prefix_and_date_suffix,
)
from gigtags.services.contracts import (
    FacetBuildData,
    FacetInspectData,
    FacetSplitData,
    dump_validated,
)
from gigtags.services.result import ServiceResult

if TYPE_CHECKING:
    from datetime import date

logger = logging.getLogger(__name__)


def invalid_reason(text: str) -> str:
    """Describe why *text* is not a valid facet."""
    if text.strip(WHITE_SPACE) != text:
        return "leading or trailing whitespace"
    return "starts with '/'"


class FacetService:
    """Facet operations driven by the ``[facets]`` config section.

    In strict mode, a date-like suffix detached from its prefix by
    whitespace is reported as an error instead of a warning.
    """

    def __init__(self, config: FacetsConfig | None = None) -> None:
        self._config = config or FacetsConfig()

    def _invalid_facet(self, op: str, text: str) -> ServiceResult:
        reason = invalid_reason(text)
        logger.debug("Rejected facet %r: %s", text, reason)
        return ServiceResult.failure(
            op,
            "INVALID_FACET",
            f"Invalid facet {text!r}: {reason}",
            detail={"facet": text, "reason": reason},
        )

    def inspect(self, text: str) -> ServiceResult:
        """Report validity and date suffix information for *text*."""
        op = "inspect_facet"
        if not is_valid(text):
            return self._invalid_facet(op, text)

        warnings: list[str] = []
        date_like = has_date_like_suffix(text)
        invalid_date_like = has_invalid_date_like_suffix(text)

        if invalid_date_like:
            msg = "Date suffix is separated from its prefix by whitespace"
            if self._config.strict:
                return ServiceResult.failure(
                    op, "INVALID_DATE_SUFFIX", msg, detail={"facet": text}
                )
            warnings.append(msg)

        prefix: str | None = None
        date_suffix: str | None = None
        parsed: date | None = None
        if date_like or invalid_date_like:
            split = try_split_into_prefix_and_date_like_suffix(text)
            assert split is not None
            prefix, date_suffix = split
            dated = try_split_into_prefix_and_date_suffix(text)
            assert dated is not None
            parsed = dated[1]
            if parsed is None:
                warnings.append(f"Date suffix {date_suffix!r} is not a valid calendar date")

        logger.debug(
            "Inspected facet %r: date_like=%s invalid_date_like=%s",
            text,
            date_like,
            invalid_date_like,
        )
        data = dump_validated(
            FacetInspectData,
            {
                "facet": text,
                "valid": True,
                "empty": is_empty(text),
                "has_date_like_suffix": date_like,
                "has_invalid_date_like_suffix": invalid_date_like,
                "prefix": prefix,
                "date_suffix": date_suffix,
                "date": parsed.isoformat() if parsed else None,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def split(self, text: str) -> ServiceResult:
        """Split *text* into prefix and date suffix.

        Mirrors the domain splitter: the trailing 9 characters are split
        off whether or not they look like a date.
        """
        op = "split_facet"
        if not is_valid(text):
            return self._invalid_facet(op, text)

        split = try_split_into_prefix_and_date_like_suffix(text)
        if split is None:
            return ServiceResult.failure(
                op,
                "NO_DATE_SUFFIX",
                f"Facet {text!r} is too short or does not end in ASCII characters",
                detail={"facet": text},
            )
        prefix, date_suffix = split
        dated = try_split_into_prefix_and_date_suffix(text)
        assert dated is not None
        parsed = dated[1]

        warnings: list[str] = []
        if parsed is None:
            warnings.append(f"Suffix {date_suffix!r} is not a valid date")
        if has_invalid_date_like_suffix(text):
            warnings.append("Date suffix is separated from its prefix by whitespace")

        logger.debug("Split facet %r into %r + %r", text, prefix, date_suffix)
        data = dump_validated(
            FacetSplitData,
            {
                "facet": text,
                "prefix": prefix,
                "date_suffix": date_suffix,
                "date": parsed.isoformat() if parsed else None,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def build(self, prefix: str, value: date) -> ServiceResult:
        """Concatenate *prefix* and the date suffix of *value* into a facet."""
        op = "build_facet"
        warnings: list[str] = []

        if prefix.rstrip(WHITE_SPACE) != prefix:
            msg = "Prefix ends with whitespace; the date suffix will not be recognized"
            if self._config.strict:
                return ServiceResult.failure(
                    op, "INVALID_PREFIX", msg, detail={"prefix": prefix}
                )
            warnings.append(msg)

        try:
            facet = build_from_prefix_and_date(prefix, value)
        except FacetFormatError as exc:
            logger.debug("Formatting date suffix failed for %r", value, exc_info=True)
            return ServiceResult.failure(
                op,
                "FORMAT_ERROR",
                str(exc),
                detail={"prefix": prefix, "date": str(value)},
                warnings=warnings,
            )

        valid = facet.is_valid()
        if not valid:
            warnings.append(f"Resulting facet is invalid: {invalid_reason(str(facet))}")

        logger.debug("Built facet %r", str(facet))
        data = dump_validated(
            FacetBuildData,
            {
                "facet": str(facet),
                "prefix": prefix,
                "date": value.isoformat(),
                "valid": valid,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
