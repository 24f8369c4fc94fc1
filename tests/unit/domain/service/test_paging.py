"""Unit tests for paging helpers."""

import pytest

from forum.domain.error import ValidationError
from forum.domain.service.paging import check_page, page_errors, parse_sort_order
from forum.domain.value import SortOrder


class TestPageErrors:
    """Tests for page_errors and check_page."""

    def test_valid_page(self):
        """Valid requests produce no errors."""
        assert page_errors(1, 100, 100) == []
        check_page(3, 1, 100)

    def test_both_rules_reported(self):
        """Page and page size are checked independently."""
        with pytest.raises(ValidationError) as exc_info:
            check_page(0, 0, 100)

        assert exc_info.value.errors == [
            "Page must be greater than 0",
            "Page size must be between 1 and 100",
        ]


class TestParseSortOrder:
    """Tests for parse_sort_order."""

    @pytest.mark.parametrize(
        "value,expected",
        [("ASC", SortOrder.ASC), (" desc ", SortOrder.DESC), (SortOrder.ASC, SortOrder.ASC)],
    )
    def test_plain_values(self, value, expected):
        """asc/desc parse in any case."""
        assert parse_sort_order(value) == expected

    def test_aliases_only_when_allowed(self):
        """oldest/newest are accepted only for chronological listings."""
        assert parse_sort_order("newest", allow_aliases=True) == SortOrder.DESC
        assert parse_sort_order("Oldest", allow_aliases=True) == SortOrder.ASC
        with pytest.raises(ValidationError, match="Use 'asc' or 'desc'"):
            parse_sort_order("newest")
