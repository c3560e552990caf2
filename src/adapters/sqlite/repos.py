import sqlite3
from typing import Any

from src.components.teams import Page, PageRequest, SortOrder
from src.domain.entities import Player, Team

# Sortable team fields mapped to their columns.
_SORT_COLUMNS: dict[str, str] = {
    "name": "name",
    "acronym": "acronym",
    "budget": "budget",
}


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _order_by(orders: tuple[SortOrder, ...]) -> str:
    # id last, so pages stay stable when sort keys tie
    terms = [f"{_SORT_COLUMNS[o.field]} {o.direction.value}" for o in orders]
    terms.append("id ASC")
    return ", ".join(terms)


class SQLiteTeamRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def add(self, team: Team) -> Team:
        conn = self._get_conn()
        try:
            # 1. Insert team; incoming ids are ignored
            cursor = conn.execute(
                "INSERT INTO teams (name, acronym, budget) VALUES (?, ?, ?)",
                (team.name, team.acronym, team.budget),
            )
            team_id = cursor.lastrowid

            # 2. Insert roster in order
            players = []
            for i, player in enumerate(team.players or []):
                cursor = conn.execute(
                    """
                    INSERT INTO players (team_id, name, position, roster_index)
                    VALUES (?, ?, ?, ?)
                """,
                    (team_id, player.name, player.position, i),
                )
                players.append(
                    Player(id=cursor.lastrowid, name=player.name, position=player.position)
                )

            conn.commit()
            return Team(
                id=team_id,
                name=team.name,
                acronym=team.acronym,
                budget=team.budget,
                players=players,
            )
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, team_id: int) -> Team | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM teams WHERE id = ?", (team_id,)).fetchone()
            if not row:
                return None

            rosters = self._load_rosters(conn, [row["id"]])
            return self._row_to_team(row, rosters.get(row["id"], []))
        finally:
            conn.close()

    def find_page(self, request: PageRequest) -> Page[Team]:
        conn = self._get_conn()
        try:
            total = conn.execute("SELECT COUNT(*) AS total FROM teams").fetchone()["total"]
            rows = conn.execute(
                f"SELECT * FROM teams ORDER BY {_order_by(request.orders)} LIMIT ? OFFSET ?",
                (request.size, request.offset),
            ).fetchall()

            rosters = self._load_rosters(conn, [row["id"] for row in rows])
            teams = tuple(self._row_to_team(row, rosters.get(row["id"], [])) for row in rows)

            return Page(
                content=teams,
                number=request.page,
                size=request.size,
                total_elements=total,
            )
        finally:
            conn.close()

    def delete_all(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM players")
            conn.execute("DELETE FROM teams")
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT COUNT(*) AS total FROM teams").fetchone()
            return int(row["total"])
        finally:
            conn.close()

    def _load_rosters(
        self, conn: sqlite3.Connection, team_ids: list[int]
    ) -> dict[int, list[Player]]:
        if not team_ids:
            return {}

        placeholders = ", ".join("?" for _ in team_ids)
        rows = conn.execute(
            f"SELECT * FROM players WHERE team_id IN ({placeholders}) "
            "ORDER BY team_id ASC, roster_index ASC",
            team_ids,
        ).fetchall()

        rosters: dict[int, list[Player]] = {}
        for row in rows:
            rosters.setdefault(row["team_id"], []).append(
                Player(id=row["id"], name=row["name"], position=row["position"])
            )
        return rosters

    def _row_to_team(self, row: dict[str, Any], players: list[Player]) -> Team:
        return Team(
            id=row["id"],
            name=row["name"],
            acronym=row["acronym"],
            budget=row["budget"],
            players=players,
        )
