"""Routes for fetching, listing and creating teams."""

import logging

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.deps import get_rules, get_team_service
from src.api.errors import not_found_response
from src.api.schemas import (
    NotFoundResponse,
    PlayerModel,
    TeamCreateRequest,
    TeamPageResponse,
    TeamResponse,
    ValidationErrorResponse,
)
from src.components.teams import (
    MAX_STORE_INTEGER,
    CreateTeamInput,
    GetTeamInput,
    ListTeamsInput,
    Page,
    PlayerView,
    TeamService,
    TeamView,
    run_create,
    run_get,
    run_list,
)
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Conversions ---


def _to_response(team: TeamView) -> TeamResponse:
    return TeamResponse(
        id=team.id,
        name=team.name,
        acronym=team.acronym,
        budget=team.budget,
        players=[
            PlayerModel(id=p.id, name=p.name, position=p.position)
            for p in team.players or ()
        ],
    )


def _to_page_response(page: Page[TeamView]) -> TeamPageResponse:
    return TeamPageResponse(
        content=[_to_response(team) for team in page.content],
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        number=page.number,
        size=page.size,
        number_of_elements=page.number_of_elements,
        first=page.first,
        last=page.last,
        empty=page.empty,
    )


def _to_view(data: TeamCreateRequest) -> TeamView:
    # Request validation guarantees both are set
    assert data.name is not None
    assert data.acronym is not None
    return TeamView(
        id=data.id,
        name=data.name,
        acronym=data.acronym,
        budget=data.budget,
        players=(
            tuple(PlayerView(id=p.id, name=p.name, position=p.position) for p in data.players)
            if data.players is not None
            else None
        ),
    )


# --- Routes ---


@router.get(
    "/{team_id}",
    response_model=TeamResponse,
    responses={404: {"model": NotFoundResponse}},
)
def get_team(
    team_id: int = Path(ge=-MAX_STORE_INTEGER - 1, le=MAX_STORE_INTEGER),
    service: TeamService = Depends(get_team_service),
) -> TeamResponse | JSONResponse:
    """Get a team by ID."""
    logger.info("Received request to fetch team with id: %s", team_id)
    result = run_get(GetTeamInput(team_id=team_id), service)

    if not result.success:
        return not_found_response(result.errors[0].message)

    team = result.team
    assert team is not None  # Success guarantees team is not None
    logger.info("Returning team: %s", team.name)
    return _to_response(team)


@router.get(
    "",
    response_model=TeamPageResponse,
    responses={400: {"content": {"text/plain": {}}}},
)
def list_teams(
    page: int | None = Query(default=None),
    size: int | None = Query(default=None),
    sort_by: list[str] | None = Query(default=None, alias="sortBy"),
    rules: Rules = Depends(get_rules),
    service: TeamService = Depends(get_team_service),
) -> TeamPageResponse | PlainTextResponse:
    """
    List teams one page at a time.

    sortBy is repeatable; prefix a field with "-" to sort it descending.
    """
    input_data = ListTeamsInput(
        page=rules.pagination.default_page if page is None else page,
        size=rules.pagination.default_size if size is None else size,
        sort_by=sort_by,
    )
    logger.info(
        "Received request to fetch teams with page: %s, size: %s, sortBy: %s",
        input_data.page,
        input_data.size,
        sort_by,
    )

    result = run_list(input_data, service)

    if not result.success:
        message = result.errors[0].message
        logger.error("Invalid list request: %s", message)
        return PlainTextResponse(message, status_code=400)

    assert result.page is not None
    logger.info("Returning %s teams", result.page.total_elements)
    return _to_page_response(result.page)


@router.post(
    "",
    response_model=TeamResponse,
    status_code=201,
    responses={400: {"model": ValidationErrorResponse}},
)
def create_team(
    data: TeamCreateRequest,
    service: TeamService = Depends(get_team_service),
) -> TeamResponse:
    """Create a new team."""
    logger.info("Received request to add new team: %s", data.name)
    result = run_create(CreateTeamInput(team=_to_view(data)), service)

    team = result.team
    assert team is not None
    logger.info("Added team with id: %s", team.id)
    return _to_response(team)
