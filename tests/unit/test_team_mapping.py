"""
Team mapping tests.

Entity <-> view conversion, including missing rosters and budgets.
"""

from __future__ import annotations

from src.components.teams import (
    PlayerView,
    TeamView,
    player_to_entity,
    player_to_view,
    to_entity,
    to_view,
)
from src.domain.entities import Player, Team


class TestToView:
    def test_copies_all_fields(self) -> None:
        team = Team(
            id=7,
            name="OGC Nice",
            acronym="OGCN",
            budget=10000000.0,
            players=[Player(id=1, name="Dante", position="Defender")],
        )

        view = to_view(team)

        assert view == TeamView(
            id=7,
            name="OGC Nice",
            acronym="OGCN",
            budget=10000000.0,
            players=(PlayerView(id=1, name="Dante", position="Defender"),),
        )

    def test_null_roster_becomes_empty(self) -> None:
        view = to_view(Team(id=1, name="OGC Nice", acronym="OGCN", budget=1.0, players=None))

        assert view.players == ()

    def test_keeps_roster_order(self) -> None:
        team = Team(
            name="OL",
            acronym="OL",
            players=[Player(name="B"), Player(name="A"), Player(name="C")],
        )

        assert [p.name for p in to_view(team).players or ()] == ["B", "A", "C"]


class TestToEntity:
    def test_copies_all_fields(self) -> None:
        view = TeamView(
            id=3,
            name="Paris Saint-Germain",
            acronym="PSG",
            budget=20000000.0,
            players=(PlayerView(id=None, name="Marquinhos", position="Defender"),),
        )

        team = to_entity(view)

        assert team.id == 3
        assert team.name == "Paris Saint-Germain"
        assert team.acronym == "PSG"
        assert team.budget == 20000000.0
        assert team.players == [Player(name="Marquinhos", position="Defender")]

    def test_null_roster_becomes_empty_list(self) -> None:
        team = to_entity(TeamView(name="OGC Nice", acronym="OGCN", budget=1.0, players=None))

        assert team.players == []

    def test_missing_budget_stays_unset(self) -> None:
        team = to_entity(TeamView(name="OGC Nice", acronym="OGCN"))

        assert team.budget is None

    def test_zero_budget_is_kept(self) -> None:
        team = to_entity(TeamView(name="OGC Nice", acronym="OGCN", budget=0.0))

        assert team.budget == 0.0


class TestRoundTrip:
    def test_view_entity_view_preserves_fields(self) -> None:
        view = TeamView(
            name="Olympique Lyon",
            acronym="OL",
            budget=15000000.0,
            players=(
                PlayerView(id=10, name="Lacazette", position="Forward"),
                PlayerView(id=11, name="Tolisso", position="Midfielder"),
            ),
        )

        back = to_view(to_entity(view))

        assert back.name == view.name
        assert back.acronym == view.acronym
        assert back.budget == view.budget
        assert back.players == view.players

    def test_player_round_trip(self) -> None:
        player = PlayerView(id=5, name="Dante", position="Defender")

        assert player_to_view(player_to_entity(player)) == player
