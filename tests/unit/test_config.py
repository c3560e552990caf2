"""
Startup configuration checks.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from src.app_shell.config import configure_logging, validate_ops_rules
from src.rules.models import LoggingRules, OpsRules, ProjectRules, Rules


def make_rules(**ops: object) -> Rules:
    return Rules(
        project=ProjectRules(slug="football-teams", rules_version="1.0"),
        ops=OpsRules(**ops),  # type: ignore[arg-type]
    )


def test_creates_data_dir(tmp_path: Path) -> None:
    data_dir = tmp_path / "data" / "nested"

    validate_ops_rules(make_rules(), data_dir)

    assert data_dir.is_dir()


def test_missing_required_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEAMS_TEST_SECRET", raising=False)

    with pytest.raises(RuntimeError, match="TEAMS_TEST_SECRET"):
        validate_ops_rules(make_rules(required_env=["TEAMS_TEST_SECRET"]), tmp_path)


def test_present_required_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAMS_TEST_SECRET", "x")

    validate_ops_rules(make_rules(required_env=["TEAMS_TEST_SECRET"]), tmp_path)


def test_data_dir_not_required(tmp_path: Path) -> None:
    data_dir = tmp_path / "unused"

    validate_ops_rules(make_rules(data_dir_required=False), data_dir)

    assert not data_dir.exists()


def test_configure_logging_sets_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(LoggingRules(level="WARNING"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
