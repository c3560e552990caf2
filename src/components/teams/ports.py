"""
Teams component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Team

from .models import Page, PageRequest


class TeamRepoPort(Protocol):
    """Repository interface for teams and their rosters."""

    def add(self, team: Team) -> Team:
        """Insert team and roster, returning it with assigned ids."""
        ...

    def get_by_id(self, team_id: int) -> Team | None:
        """Get team by ID, roster included."""
        ...

    def find_page(self, request: PageRequest) -> Page[Team]:
        """Get one ordered page of teams with the overall total."""
        ...

    def delete_all(self) -> None:
        """Delete every team and player."""
        ...

    def count(self) -> int:
        """Count stored teams."""
        ...
