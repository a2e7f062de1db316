"""
Translate ``/allPosts`` query parameters into a Mongo filter, sort and window.

The count endpoint deliberately uses only the title search, never the
category or volunteer bounds, so pagination totals are computed over the
search alone.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Optional

from pymongo import ASCENDING, DESCENDING

DEFAULT_SORT_FIELD = "deadline"

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse; anything without one is treated as absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


@dataclass
class PostQuery:
    filter: dict = field(default_factory=dict)
    sort: list[tuple[str, int]] = field(default_factory=list)
    skip: int = 0
    limit: int = 0


def title_filter(search: Optional[str]) -> dict:
    return {"title": {"$regex": search or "", "$options": "i"}}


def build_filter(
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_volunteers: Any = None,
    max_volunteers: Any = None,
) -> dict:
    query = title_filter(search)

    if category:
        query["category"] = {"$regex": category, "$options": "i"}

    low = parse_int(min_volunteers)
    high = parse_int(max_volunteers)
    if low is not None or high is not None:
        bounds = {}
        if low is not None:
            bounds["$gte"] = low
        if high is not None:
            bounds["$lte"] = high
        query["numberOfVolunteer"] = bounds

    return query


def build_sort(sort_field: Optional[str] = None, sort_order: Optional[str] = None) -> list[tuple[str, int]]:
    direction = DESCENDING if sort_order == "desc" else ASCENDING
    return [(sort_field or DEFAULT_SORT_FIELD, direction)]


def build_window(page: Any = None, size: Any = None) -> tuple[int, int]:
    """Return ``(skip, limit)``; a missing size means no limit at all."""
    page_size = parse_int(size)
    if page_size is None or page_size <= 0:
        return 0, 0
    page_no = parse_int(page)
    if page_no is None:
        page_no = 1
    # pymongo refuses negative skips
    return max((page_no - 1) * page_size, 0), page_size


def build_post_query(
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_volunteers: Any = None,
    max_volunteers: Any = None,
    sort_field: Optional[str] = None,
    sort_order: Optional[str] = None,
    page: Any = None,
    size: Any = None,
) -> PostQuery:
    skip, limit = build_window(page, size)
    return PostQuery(
        filter=build_filter(search, category, min_volunteers, max_volunteers),
        sort=build_sort(sort_field, sort_order),
        skip=skip,
        limit=limit,
    )


def build_count_filter(search: Optional[str] = None) -> dict:
    return title_filter(search)


def build_preview_query(limit: int = 6) -> PostQuery:
    return PostQuery(filter={}, sort=[(DEFAULT_SORT_FIELD, ASCENDING)], skip=0, limit=limit)
