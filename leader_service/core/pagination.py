"""Pagination — pure skip/limit arithmetic for 1-based pages.

Invariants:
    - PAGE_SIZE is fixed at 10
    - Pages below 1 are treated as page 1 (offset never negative)
    - Offset + limit always fits a signed 64-bit integer, so any page number
      reaches the database as a valid OFFSET and simply yields no rows
"""

PAGE_SIZE = 10
MAX_OFFSET = 2**63 - 1 - PAGE_SIZE


def page_offset(page: int) -> int:
    """Number of records to skip before the given 1-based page."""
    return min((max(page, 1) - 1) * PAGE_SIZE, MAX_OFFSET)


def page_limit() -> int:
    return PAGE_SIZE
