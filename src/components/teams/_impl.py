"""
TeamService - Team lookup, paginated listing and creation.

Functional Core - orchestration over the repository port.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ._mapping import to_entity, to_view
from ._sorting import parse_sort_tokens
from .models import (
    MAX_STORE_INTEGER,
    InvalidSortFieldError,
    Page,
    PageRequest,
    TeamError,
    TeamView,
)
from .ports import TeamRepoPort

logger = logging.getLogger(__name__)


# --- Validation Functions ---


def validate_page_request(page: int, size: int) -> list[TeamError]:
    """Validate page index and page size."""
    errors: list[TeamError] = []

    if page < 0:
        errors.append(
            TeamError(
                code="invalid_page_request",
                message="Page index must not be less than zero",
                field="page",
            )
        )

    if size < 1:
        errors.append(
            TeamError(
                code="invalid_page_request",
                message="Page size must not be less than one",
                field="size",
            )
        )

    if size > MAX_STORE_INTEGER:
        errors.append(
            TeamError(
                code="invalid_page_request",
                message="Page size is too large",
                field="size",
            )
        )
    elif page > 0 and size > 0 and page * size > MAX_STORE_INTEGER:
        errors.append(
            TeamError(
                code="invalid_page_request",
                message="Page offset is too large",
                field="page",
            )
        )

    return errors


# --- Team Service ---


class TeamService:
    """
    Team service.

    Stateless; every call goes straight through to the repository.
    """

    def __init__(self, repo: TeamRepoPort) -> None:
        """Initialize service."""
        self._repo = repo

    def get_by_id(self, team_id: int) -> TeamView | None:
        """Get team by ID."""
        logger.info("Fetching team with id %s...", team_id)
        team = self._repo.get_by_id(team_id)
        if team is None:
            logger.error("Team with id %s not found", team_id)
            return None

        logger.info("Team with id %s found: %s", team_id, team.name)
        return to_view(team)

    def list_page(
        self,
        page: int,
        size: int,
        sort_by: Sequence[str] | None = None,
    ) -> tuple[Page[TeamView] | None, list[TeamError]]:
        """
        Get one page of teams, optionally sorted.

        Returns:
            Tuple of (page, errors). Page is None if the page request or a
            sort token is invalid.
        """
        logger.info("Fetching teams with page %s, size %s, sortBy: %s...", page, size, sort_by)

        errors = validate_page_request(page, size)
        if errors:
            return None, errors

        try:
            orders = parse_sort_tokens(sort_by)
        except InvalidSortFieldError as e:
            return None, [TeamError(code="invalid_sort_field", message=str(e), field=e.field)]

        if not orders:
            logger.info("No sorting criteria provided, fetching teams without sorting.")

        result = self._repo.find_page(PageRequest(page=page, size=size, orders=orders))
        logger.info("Fetched %s teams", result.total_elements)
        return result.map(to_view), []

    def create(self, team: TeamView) -> TeamView:
        """Create a team. The store assigns the team and player ids."""
        logger.info("Adding new team: %s", team.name)
        saved = self._repo.add(to_entity(team))
        logger.info("Team added with id: %s", saved.id)
        return to_view(saved)
