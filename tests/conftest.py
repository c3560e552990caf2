import os
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteTeamRepo
from src.components.teams import TeamService, TeamView

PROJECT_ROOT = Path(__file__).parent.parent
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"
RULES_PATH = PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def db_path(test_data_dir):
    """
    Path to a freshly migrated SQLite database.
    """
    path = os.path.join(test_data_dir, "teams.db")
    SQLiteMigrator(path, MIGRATIONS_DIR).run_migrations()
    return path


@pytest.fixture
def team_repo(db_path):
    return SQLiteTeamRepo(db_path)


@pytest.fixture
def team_service(team_repo):
    return TeamService(repo=team_repo)


@pytest.fixture
def sample_teams():
    return [
        TeamView(name="OGC Nice", acronym="OGCN", budget=10000000.0),
        TeamView(name="Paris Saint-Germain", acronym="PSG", budget=20000000.0),
        TeamView(name="Olympique Lyon", acronym="OL", budget=15000000.0),
    ]
