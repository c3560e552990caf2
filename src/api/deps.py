import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.sqlite.repos import SQLiteTeamRepo

# Components are stateless, so they are built per request around their repos.
from src.components.teams import TeamService
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("TEAMS_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "teams.db")
        self.rules_path = Path(os.environ.get("TEAMS_RULES_PATH", str(self.base_dir / "rules.yaml")))
        self.migrations_dir = self.base_dir / "migrations"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Repos ---
def get_team_repo(settings: Settings = Depends(get_settings)) -> SQLiteTeamRepo:
    return SQLiteTeamRepo(settings.db_path)


# --- Component Services ---
def get_team_service(
    repo: SQLiteTeamRepo = Depends(get_team_repo),
) -> TeamService:
    """Get team component service."""
    return TeamService(repo=repo)
