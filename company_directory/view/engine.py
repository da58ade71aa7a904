"""
Derived view pipeline: filter, sort, paginate.

``compute_view`` is a pure function of the cached records and the
current view state.  It never touches the network and never mutates
its inputs, so it can run on every keystroke.

Records are the JSON objects returned by the API (plain dicts).
"""

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, List, Mapping, Sequence

from .state import ALL, FilterSpec, Pagination, SortSpec

Record = Mapping[str, Any]

SEARCH_FIELDS = ("name", "ceo", "location", "industry")


@dataclass(frozen=True)
class ViewResult:
    page_items: List[Dict[str, Any]]
    total_count: int
    total_pages: int

    @property
    def needs_pagination(self) -> bool:
        return self.total_pages > 1


def _text(record: Record, key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def matches(record: Record, filters: FilterSpec) -> bool:
    if filters.search:
        needle = filters.search.lower()
        if not any(needle in _text(record, key).lower() for key in SEARCH_FIELDS):
            return False
    if filters.industry != ALL and record.get("industry") != filters.industry:
        return False
    if filters.location != ALL and record.get("location") != filters.location:
        return False
    return True


def filter_records(records: Sequence[Record], filters: FilterSpec) -> List[Record]:
    return [record for record in records if matches(record, filters)]


def compare_values(a: Any, b: Any) -> int:
    """Three‑way comparison used for sorting.

    Strings compare case‑insensitively and numbers numerically.  A
    missing value sorts before any present one; values of unrelated
    types fall back to comparing their text.
    """
    if a is None or b is None:
        return (a is not None) - (b is not None)
    if isinstance(a, str):
        a = a.lower()
    if isinstance(b, str):
        b = b.lower()
    if isinstance(a, str) != isinstance(b, str):
        a, b = str(a), str(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_records(records: Sequence[Record], sort: SortSpec) -> List[Record]:
    """Stable sort by ``sort.field``.

    Descending order negates the comparator instead of reversing the
    result, so records with equal values keep their input order in both
    directions.
    """
    sign = -1 if sort.descending else 1

    def compare(left: Record, right: Record) -> int:
        return sign * compare_values(left.get(sort.field), right.get(sort.field))

    return sorted(records, key=cmp_to_key(compare))


def paginate(records: Sequence[Record], pagination: Pagination) -> ViewResult:
    total_count = len(records)
    total_pages = math.ceil(total_count / pagination.page_size)
    start = pagination.start
    # Slicing past the end yields an empty page; current_page is not clamped here.
    page_items = [dict(record) for record in records[start:start + pagination.page_size]]
    return ViewResult(page_items=page_items, total_count=total_count, total_pages=total_pages)


def compute_view(
    records: Sequence[Record],
    filters: FilterSpec,
    sort: SortSpec,
    pagination: Pagination,
) -> ViewResult:
    """Return the page of records to display and the totals for the pager."""
    return paginate(sort_records(filter_records(records, filters), sort), pagination)
