"""
Teams component - Football team management.

Handles team lookup, listing and creation.

Shell Layer - converts service results into explicit outputs.
"""

from __future__ import annotations

from ._impl import TeamService
from .models import (
    CreateTeamInput,
    GetTeamInput,
    ListTeamsInput,
    TeamError,
    TeamListOutput,
    TeamOperationOutput,
)

# --- Shell Layer Functions ---


def run_get(
    input_data: GetTeamInput,
    service: TeamService,
) -> TeamOperationOutput:
    """Get a team by ID."""
    team = service.get_by_id(input_data.team_id)

    if team is None:
        return TeamOperationOutput(
            team=None,
            errors=(
                TeamError(
                    code="team_not_found",
                    message=f"Team with id {input_data.team_id} not found",
                ),
            ),
            success=False,
        )

    return TeamOperationOutput(team=team)


def run_list(
    input_data: ListTeamsInput,
    service: TeamService,
) -> TeamListOutput:
    """List one page of teams."""
    page, errors = service.list_page(
        page=input_data.page,
        size=input_data.size,
        sort_by=input_data.sort_by,
    )

    return TeamListOutput(
        page=page,
        errors=tuple(errors),
        success=page is not None,
    )


def run_create(
    input_data: CreateTeamInput,
    service: TeamService,
) -> TeamOperationOutput:
    """Create a new team."""
    team = service.create(input_data.team)
    return TeamOperationOutput(team=team)
