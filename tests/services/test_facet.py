"""Tests for FacetService."""

from __future__ import annotations

from datetime import date

import pytest

from gigtags.config.models import FacetsConfig
from gigtags.services.facet import FacetService, invalid_reason
from tests.conftest import GIG_DATE


@pytest.fixture
def service() -> FacetService:
    return FacetService()


@pytest.fixture
def strict_service() -> FacetService:
    return FacetService(FacetsConfig(strict=True))


class TestInvalidReason:
    def test_whitespace(self) -> None:
        assert invalid_reason(" a") == "leading or trailing whitespace"

    def test_unicode_whitespace(self) -> None:
        assert invalid_reason("a\u3000") == "leading or trailing whitespace"

    def test_slash(self) -> None:
        assert invalid_reason("/a") == "starts with '/'"


class TestInspect:
    def test_plain_facet(self, service: FacetService) -> None:
        result = service.inspect("genre")
        assert result.ok
        assert result.op == "inspect_facet"
        assert result.data["valid"] is True
        assert result.data["empty"] is False
        assert result.data["has_date_like_suffix"] is False
        assert result.data["prefix"] is None
        assert result.data["date"] is None
        assert result.warnings == []

    def test_ascii_separator_is_not_whitespace(self, service: FacetService) -> None:
        result = service.inspect("gig\x1f")
        assert result.ok
        assert result.data["valid"] is True

    def test_empty_facet(self, service: FacetService) -> None:
        result = service.inspect("")
        assert result.ok
        assert result.data["empty"] is True

    def test_dated_facet(self, service: FacetService) -> None:
        result = service.inspect("release~20220625")
        assert result.ok
        assert result.data["has_date_like_suffix"] is True
        assert result.data["has_invalid_date_like_suffix"] is False
        assert result.data["prefix"] == "release"
        assert result.data["date_suffix"] == "~20220625"
        assert result.data["date"] == "2022-06-25"
        assert result.warnings == []

    def test_not_a_calendar_date(self, service: FacetService) -> None:
        result = service.inspect("abc~99999999")
        assert result.ok
        assert result.data["has_date_like_suffix"] is True
        assert result.data["date"] is None
        assert len(result.warnings) == 1
        assert "calendar date" in result.warnings[0]

    def test_detached_suffix_warns(self, service: FacetService) -> None:
        result = service.inspect("abc ~20220625")
        assert result.ok
        assert result.data["has_date_like_suffix"] is False
        assert result.data["has_invalid_date_like_suffix"] is True
        assert result.data["prefix"] == "abc "
        assert result.data["date"] == "2022-06-25"
        assert any("whitespace" in w for w in result.warnings)

    def test_detached_suffix_strict(self, strict_service: FacetService) -> None:
        result = strict_service.inspect("abc ~20220625")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATE_SUFFIX"

    def test_strict_accepts_attached_suffix(self, strict_service: FacetService) -> None:
        assert strict_service.inspect("abc~20220625").ok

    @pytest.mark.parametrize("text", [" a", "a ", "/a"])
    def test_invalid_facet(self, service: FacetService, text: str) -> None:
        result = service.inspect(text)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FACET"
        assert result.error.detail["facet"] == text


class TestSplit:
    def test_split(self, service: FacetService) -> None:
        result = service.split("a \tb c\n ~20220625")
        assert result.ok
        assert result.op == "split_facet"
        assert result.data["prefix"] == "a \tb c\n "
        assert result.data["date_suffix"] == "~20220625"
        assert result.data["date"] == "2022-06-25"
        assert any("whitespace" in w for w in result.warnings)

    def test_invalid_date(self, service: FacetService) -> None:
        result = service.split("abc ~19700230")
        assert result.ok
        assert result.data["prefix"] == "abc "
        assert result.data["date"] is None
        assert any("not a valid date" in w for w in result.warnings)

    def test_too_short(self, service: FacetService) -> None:
        result = service.split("~2022")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_DATE_SUFFIX"

    def test_invalid_facet(self, service: FacetService) -> None:
        result = service.split("/a~20220625")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FACET"


class TestBuild:
    def test_build(self, service: FacetService) -> None:
        result = service.build("tag", GIG_DATE)
        assert result.ok
        assert result.op == "build_facet"
        assert result.data == {
            "facet": "tag~20220625",
            "prefix": "tag",
            "date": "2022-06-25",
            "valid": True,
        }
        assert result.warnings == []

    def test_round_trip_with_split(self, service: FacetService) -> None:
        built = service.build("tag", date(1999, 12, 31))
        split = service.split(built.data["facet"])
        assert split.data["prefix"] == "tag"
        assert split.data["date"] == "1999-12-31"

    def test_trailing_whitespace_warns(self, service: FacetService) -> None:
        result = service.build("tag ", GIG_DATE)
        assert result.ok
        assert result.data["facet"] == "tag ~20220625"
        assert len(result.warnings) == 1

    def test_trailing_whitespace_strict(self, strict_service: FacetService) -> None:
        result = strict_service.build("tag ", GIG_DATE)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PREFIX"

    def test_invalid_result_warns(self, service: FacetService) -> None:
        result = service.build("/tag", GIG_DATE)
        assert result.ok
        assert result.data["valid"] is False
        assert any("invalid" in w for w in result.warnings)

    def test_format_error(self, service: FacetService) -> None:
        class FarFuture:
            year = 10000
            month = 1
            day = 1

        result = service.build("tag", FarFuture())  # type: ignore[arg-type]
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FORMAT_ERROR"
