"""
Teams component - Data models.

Views, sort orders, pages and the input/output shapes of the entry points.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Largest integer SQLite can bind
MAX_STORE_INTEGER = 2**63 - 1

# --- Errors ---


@dataclass(frozen=True)
class TeamError:
    """Team operation error."""

    code: str
    message: str
    field: str | None = None


class InvalidSortFieldError(ValueError):
    """Raised when a sort token names a field that cannot be sorted on."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid field name for sorting: {field}")


# --- Views ---


@dataclass(frozen=True)
class PlayerView:
    """Externally visible player."""

    id: int | None = None
    name: str | None = None
    position: str | None = None


@dataclass(frozen=True)
class TeamView:
    """
    Externally visible team.

    players may be None on input. Views produced by the component always
    carry a tuple, empty when the team has no roster.
    """

    name: str
    acronym: str
    id: int | None = None
    budget: float | None = None
    players: tuple[PlayerView, ...] | None = None


# --- Sorting ---


class SortDirection(str, Enum):
    """Sort direction, valued as the SQL keyword."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortOrder:
    """A single (field, direction) sort criterion."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


# --- Pagination ---


@dataclass(frozen=True)
class PageRequest:
    """Page index, page size and ordering handed to the store."""

    page: int
    size: int
    orders: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the totals reported by the store."""

    content: tuple[T, ...]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.number == 0

    @property
    def last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with fn applied to each element, totals unchanged."""
        return Page(
            content=tuple(fn(item) for item in self.content),
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )


# --- Input Models ---


@dataclass(frozen=True)
class GetTeamInput:
    """Input for getting a team."""

    team_id: int


@dataclass(frozen=True)
class ListTeamsInput:
    """Input for listing a page of teams."""

    page: int = 0
    size: int = 10
    sort_by: Sequence[str] | None = None


@dataclass(frozen=True)
class CreateTeamInput:
    """Input for creating a team."""

    team: TeamView


# --- Output Models ---


@dataclass(frozen=True)
class TeamOperationOutput:
    """Output from a single-team operation."""

    team: TeamView | None
    errors: tuple[TeamError, ...] = field(default_factory=tuple)
    success: bool = True


@dataclass(frozen=True)
class TeamListOutput:
    """Output from list operation."""

    page: Page[TeamView] | None
    errors: tuple[TeamError, ...] = field(default_factory=tuple)
    success: bool = True
