"""
Conversions between persisted team entities and team views.

Functional Core - pure data mapping, no I/O.
"""

from __future__ import annotations

import logging

from src.domain.entities import Player, Team

from .models import PlayerView, TeamView

logger = logging.getLogger(__name__)


def player_to_view(player: Player) -> PlayerView:
    return PlayerView(id=player.id, name=player.name, position=player.position)


def player_to_entity(view: PlayerView) -> Player:
    return Player(id=view.id, name=view.name, position=view.position)


def to_view(team: Team) -> TeamView:
    """Map a team entity to its view. A missing roster becomes an empty tuple."""
    players = tuple(player_to_view(p) for p in team.players) if team.players is not None else ()
    view = TeamView(
        id=team.id,
        name=team.name,
        acronym=team.acronym,
        budget=team.budget,
        players=players,
    )
    logger.debug("Converted Team entity to TeamView: %s", view.name)
    return view


def to_entity(view: TeamView) -> Team:
    """
    Map a team view to an entity.

    The id is passed through as-is; the store decides what to do with it.
    Budget is only set when present so a missing budget stays missing.
    """
    team = Team(id=view.id, name=view.name, acronym=view.acronym)

    if view.budget is not None:
        team.budget = view.budget

    team.players = (
        [player_to_entity(p) for p in view.players] if view.players is not None else []
    )

    logger.debug("Converted TeamView to Team entity: %s", team.name)
    return team
