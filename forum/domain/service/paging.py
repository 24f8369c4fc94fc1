"""Paging and sort-parameter checks shared by listing services."""

from forum.domain.error import ValidationError
from forum.domain.value import SortOrder

# Chronological listings also accept "oldest"/"newest"
CHRONOLOGICAL_ALIASES = {
    "asc": SortOrder.ASC,
    "oldest": SortOrder.ASC,
    "desc": SortOrder.DESC,
    "newest": SortOrder.DESC,
}


def page_errors(page: int, page_size: int, max_page_size: int) -> list[str]:
    """List the rules a page request breaks."""
    errors: list[str] = []
    if page < 1:
        errors.append("Page must be greater than 0")
    if page_size < 1 or page_size > max_page_size:
        errors.append(f"Page size must be between 1 and {max_page_size}")
    return errors


def check_page(page: int, page_size: int, max_page_size: int) -> None:
    """Raise if the page request is out of range.

    Raises:
        ValidationError: If page < 1 or page_size is outside 1..max_page_size
    """
    errors = page_errors(page, page_size, max_page_size)
    if errors:
        raise ValidationError.from_errors(errors)


def parse_sort_order(value: str | SortOrder, allow_aliases: bool = False) -> SortOrder:
    """Parse a sort direction, ignoring case.

    Args:
        value: "asc" or "desc" (plus "oldest"/"newest" when aliases are allowed)
        allow_aliases: Whether to accept the chronological aliases

    Raises:
        ValidationError: If the value names no direction
    """
    if isinstance(value, SortOrder):
        return value
    key = value.strip().lower()
    if allow_aliases and key in CHRONOLOGICAL_ALIASES:
        return CHRONOLOGICAL_ALIASES[key]
    try:
        return SortOrder(key)
    except ValueError:
        allowed = (
            "'asc', 'desc', 'oldest' or 'newest'" if allow_aliases else "'asc' or 'desc'"
        )
        raise ValidationError(f"Invalid sort order '{value}'. Use {allowed}")
