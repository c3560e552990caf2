import argparse
import logging
import sys
from pathlib import Path

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteTeamRepo
from src.app_shell.config import configure_logging
from src.components.teams import (
    CreateTeamInput,
    ListTeamsInput,
    TeamService,
    TeamView,
    run_create,
    run_list,
)
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

DB_PATH = "data/teams.db"
MIGRATIONS_DIR = "migrations"
RULES_PATH = "rules.yaml"

SAMPLE_TEAMS = (
    TeamView(name="OGC Nice", acronym="OGCN", budget=10000000.0),
    TeamView(name="Paris Saint-Germain", acronym="PSG", budget=20000000.0),
    TeamView(name="Olympique Lyon", acronym="OL", budget=15000000.0),
)


def get_service(db_path: str) -> TeamService:
    return TeamService(repo=SQLiteTeamRepo(db_path))


def handle_migrate(args: argparse.Namespace) -> int:
    applied = SQLiteMigrator(args.db, args.migrations).run_migrations()
    print(f"Applied {len(applied)} migration(s).")
    return 0


def handle_seed(args: argparse.Namespace) -> int:
    service = get_service(args.db)
    for team in SAMPLE_TEAMS:
        result = run_create(CreateTeamInput(team=team), service)
        assert result.team is not None
        print(f"Created team {result.team.id}: {result.team.name}")
    return 0


def handle_clear(args: argparse.Namespace) -> int:
    SQLiteTeamRepo(args.db).delete_all()
    print("Deleted all teams.")
    return 0


def handle_list(args: argparse.Namespace) -> int:
    result = run_list(
        ListTeamsInput(page=args.page, size=args.size, sort_by=args.sort),
        get_service(args.db),
    )
    if not result.success:
        for err in result.errors:
            logger.error(err.message)
        return 1

    page = result.page
    assert page is not None
    for team in page.content:
        print(f"{team.id}\t{team.name}\t{team.acronym}\t{team.budget}")
    print(
        f"Page {page.number + 1} of {page.total_pages} "
        f"({page.total_elements} teams)"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Football Teams CLI")
    parser.add_argument("--db", default=DB_PATH, help="SQLite database path")
    parser.add_argument("--rules", default=RULES_PATH, help="Rules file path")
    parser.add_argument(
        "--migrations", default=MIGRATIONS_DIR, help="Directory of .sql migrations"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending migrations")
    subparsers.add_parser("seed", help="Insert the sample teams")
    subparsers.add_parser("clear", help="Delete every team and player")

    list_parser = subparsers.add_parser("list", help="Print a page of teams")
    list_parser.add_argument("--page", type=int, default=0)
    list_parser.add_argument("--size", type=int, default=10)
    list_parser.add_argument(
        "--sort",
        action="append",
        default=None,
        help="Sort token, repeatable; write descending ones as --sort=-budget",
    )

    return parser


HANDLERS = {
    "migrate": handle_migrate,
    "seed": handle_seed,
    "clear": handle_clear,
    "list": handle_list,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    rules_path = Path(args.rules)
    if rules_path.exists():
        configure_logging(load_rules(rules_path).logging)
    else:
        logging.basicConfig(level=logging.INFO)
        logger.warning("Rules file %s not found, using default logging.", rules_path)

    return HANDLERS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
