"""
View state values for the client.

Filters, sort order and the current page are held in one frozen
``ViewState`` value.  Every user action produces a new value through
the ``with_*`` methods, which also apply the page reset rules: any
filter or sort change brings the user back to page 1.
"""

from dataclasses import dataclass, field, replace

ALL = "All"

ASC = "asc"
DESC = "desc"

STRING_FIELDS = ("name", "ceo", "industry", "location")
NUMERIC_FIELDS = ("employees", "founded")
SORT_FIELDS = STRING_FIELDS + NUMERIC_FIELDS

FILTER_FIELDS = ("search", "industry", "location")

DEFAULT_PAGE_SIZE = 8

INDUSTRY_OPTIONS = (ALL, "Technology", "Healthcare", "Food & Beverage", "Consulting", "Finance")
LOCATION_OPTIONS = (ALL, "San Francisco", "New York City", "Chicago", "London", "Singapore")


@dataclass(frozen=True)
class FilterSpec:
    """Which records are shown.  ``"All"`` means no constraint."""

    search: str = ""
    industry: str = ALL
    location: str = ALL

    @property
    def is_neutral(self) -> bool:
        return not self.search and self.industry == ALL and self.location == ALL


@dataclass(frozen=True)
class SortSpec:
    field: str = "name"
    direction: str = ASC

    def __post_init__(self) -> None:
        if self.field not in SORT_FIELDS:
            raise ValueError(f"Cannot sort by {self.field!r}; expected one of {', '.join(SORT_FIELDS)}")
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Sort direction must be {ASC!r} or {DESC!r}, got {self.direction!r}")

    @property
    def descending(self) -> bool:
        return self.direction == DESC


@dataclass(frozen=True)
class Pagination:
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.current_page < 1:
            raise ValueError(f"current_page must be positive, got {self.current_page}")

    @property
    def start(self) -> int:
        return (self.current_page - 1) * self.page_size


@dataclass(frozen=True)
class ViewState:
    """Filters, sort order and page currently selected by the user."""

    filters: FilterSpec = field(default_factory=FilterSpec)
    sort: SortSpec = field(default_factory=SortSpec)
    pagination: Pagination = field(default_factory=Pagination)

    def with_filter(self, name: str, value: str) -> "ViewState":
        """Set one filter field and go back to the first page."""
        if name not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter {name!r}; expected one of {', '.join(FILTER_FIELDS)}")
        return replace(
            self,
            filters=replace(self.filters, **{name: value}),
            pagination=replace(self.pagination, current_page=1),
        )

    def with_sort(self, sort_field: str, direction: str = ASC) -> "ViewState":
        return replace(
            self,
            sort=SortSpec(field=sort_field, direction=direction),
            pagination=replace(self.pagination, current_page=1),
        )

    def with_sort_toggle(self, sort_field: str) -> "ViewState":
        """Sort by ``sort_field``.

        Clicking the active ascending field flips it to descending;
        anything else sorts ascending.
        """
        if self.sort.field == sort_field and self.sort.direction == ASC:
            direction = DESC
        else:
            direction = ASC
        return self.with_sort(sort_field, direction)

    def with_page(self, page: int, total_pages: int) -> "ViewState":
        """Move to ``page``, clamped to the pages that exist."""
        page = max(1, min(page, max(total_pages, 1)))
        return replace(self, pagination=replace(self.pagination, current_page=page))
