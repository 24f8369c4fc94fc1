"""Unit tests for the Page model."""

import pytest
from pydantic import ValidationError

from forum.domain.model import Page


class TestPage:
    """Tests for computed paging fields."""

    def test_middle_page(self):
        """A middle page has both neighbours."""
        page = Page[int](items=[11, 12], page=2, page_size=10, total_count=25)

        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous

    def test_empty_listing(self):
        """An empty listing has zero pages."""
        page = Page[int](items=[], page=1, page_size=10, total_count=0)

        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_previous

    def test_page_past_the_end(self):
        """A page past the end keeps the real total."""
        page = Page[int](items=[], page=4, page_size=10, total_count=25)

        assert page.total_pages == 3
        assert not page.has_next

    def test_offset(self):
        """Offset skips the earlier pages."""
        assert Page.offset(1, 10) == 0
        assert Page.offset(3, 25) == 50

    def test_page_must_be_positive(self):
        """Page numbers start at 1."""
        with pytest.raises(ValidationError):
            Page[int](items=[], page=0, page_size=10, total_count=0)

    def test_computed_fields_are_serialized(self):
        """Computed fields appear in the dumped model."""
        dumped = Page[int](items=[1], page=1, page_size=1, total_count=2).model_dump()

        assert dumped["total_pages"] == 2
        assert dumped["has_next"] is True
