"""Tests for the seed_database command-line script."""

import json

import pytest

from dashboard_api.config import Settings
from dashboard_api.models.seed import ErrorKind, SeedCounts, SeedResult
from scripts import seed_database


@pytest.fixture
def env_settings(monkeypatch):
    base = Settings(_env_file=None, MONGODB_URI="mongodb://env-host:27017")
    monkeypatch.setattr(seed_database, "get_settings", lambda: base)
    return base


def test_cli_overrides_environment(env_settings) -> None:
    args = seed_database.build_parser().parse_args(
        ["--uri", "mongodb://cli-host:27017", "--bcrypt-rounds", "6"]
    )
    settings = seed_database.resolve_settings(args)
    assert settings.MONGODB_URI == "mongodb://cli-host:27017"
    assert settings.BCRYPT_ROUNDS == 6


def test_no_flags_keeps_environment(env_settings) -> None:
    args = seed_database.build_parser().parse_args([])
    assert seed_database.resolve_settings(args) is env_settings


def test_main_exit_codes(env_settings, monkeypatch, capsys) -> None:
    async def succeed(settings):
        return SeedResult(success=True, counts=SeedCounts(users=1), message="Database seeded successfully")

    async def fail(settings):
        return SeedResult(
            success=False,
            error_kind=ErrorKind.CONNECTIVITY,
            message="MongoDB connection error: timed out",
            suggestion="start mongod",
        )

    monkeypatch.setattr(seed_database, "run", succeed)
    assert seed_database.main([]) == 0
    assert json.loads(capsys.readouterr().out)["counts"]["users"] == 1

    monkeypatch.setattr(seed_database, "run", fail)
    assert seed_database.main([]) == 1
    body = json.loads(capsys.readouterr().out)
    assert body["success"] is False
    assert body["suggestion"] == "start mongod"


def test_out_of_range_rounds_is_usage_error(env_settings, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        seed_database.main(["--bcrypt-rounds", "3"])

    assert excinfo.value.code == 2
    assert "invalid BCRYPT_ROUNDS" in capsys.readouterr().err
