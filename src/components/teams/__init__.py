"""
Teams component - Football teams and their rosters.
"""

from ._impl import TeamService, validate_page_request
from ._mapping import player_to_entity, player_to_view, to_entity, to_view
from ._sorting import (
    SORTABLE_FIELDS,
    VALID_SORT_FIELDS,
    parse_sort_token,
    parse_sort_tokens,
)
from .component import (
    run_create,
    run_get,
    run_list,
)
from .models import (
    MAX_STORE_INTEGER,
    CreateTeamInput,
    GetTeamInput,
    InvalidSortFieldError,
    ListTeamsInput,
    Page,
    PageRequest,
    PlayerView,
    SortDirection,
    SortOrder,
    TeamError,
    TeamListOutput,
    TeamOperationOutput,
    TeamView,
)
from .ports import TeamRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_get",
    "run_list",
    # Input models
    "CreateTeamInput",
    "GetTeamInput",
    "ListTeamsInput",
    # Output models
    "TeamOperationOutput",
    "TeamListOutput",
    "TeamError",
    # Views and paging
    "TeamView",
    "PlayerView",
    "Page",
    "PageRequest",
    "MAX_STORE_INTEGER",
    # Sorting
    "SortDirection",
    "SortOrder",
    "InvalidSortFieldError",
    "SORTABLE_FIELDS",
    "VALID_SORT_FIELDS",
    "parse_sort_token",
    "parse_sort_tokens",
    # Mapping
    "to_view",
    "to_entity",
    "player_to_view",
    "player_to_entity",
    # Ports
    "TeamRepoPort",
    # Service
    "TeamService",
    "validate_page_request",
]
