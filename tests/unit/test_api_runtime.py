"""Tests for the API runtime state, settings and launcher."""

from __future__ import annotations

import asyncio
import sys

import pytest
from sqlalchemy import inspect

from pokebattle import cli
from pokebattle.api.runtime import ApiState
from pokebattle.config import Settings, get_settings
from pokebattle.database import create_db_engine, get_table_names
from pokebattle.services import NotFoundError, PokemonDraft


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("POKEBATTLE_DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("POKEBATTLE_SEED_CATALOG", "false")

    settings = Settings()

    assert settings.database_url == "sqlite:///elsewhere.db"
    assert settings.seed_catalog is False
    assert settings.log_level == "INFO"


def test_state_without_seeding_leaves_database_empty():
    state = ApiState(settings=Settings(database_url="sqlite://", seed_catalog=False))

    assert get_table_names(state.engine) == []
    state.prepare_database()
    assert "weaknesses" in get_table_names(state.engine)
    assert [t["name"] for t in state.roster.list_types()] == ["Fire", "Grass", "Water"]


def test_shutdown_keeps_borrowed_engine_open():
    settings = Settings(database_url="sqlite://")
    engine = create_db_engine(settings)
    state = ApiState(settings=settings, engine=engine)

    asyncio.run(state.shutdown())

    assert state.database_healthy() is True
    assert "teams" in inspect(engine).get_table_names()
    engine.dispose()


def test_battle_runner_reports_missing_teams():
    state = ApiState(settings=Settings(database_url="sqlite://"))

    with pytest.raises(NotFoundError, match="Team 1 not found"):
        state.battles.run_sync("a", "b")


def test_battle_runner_runs_off_the_event_loop():
    state = ApiState(settings=Settings(database_url="sqlite://"))
    fire = next(t["id"] for t in state.roster.list_types() if t["name"] == "Fire")
    teams = []
    for name, power in (("A", 60), ("B", 30)):
        mon = state.roster.create_pokemon(
            PokemonDraft(name=name, power=power, life=50, type_id=fire)
        )
        teams.append(state.roster.create_team(name, [mon["id"]] * 6))

    battle = asyncio.run(state.battles.run(teams[0]["id"], teams[1]["id"]))

    assert battle["winner"] == "Team 1"
    assert battle["team1"]["name"] == "A"


def test_cli_init_db_creates_schema(monkeypatch, tmp_path):
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("POKEBATTLE_DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setattr(sys, "argv", ["pokebattle", "--init-db"])
    get_settings.cache_clear()
    try:
        cli.main()
    finally:
        get_settings.cache_clear()

    engine = create_db_engine(Settings(database_url=f"sqlite:///{db_path}"))
    try:
        assert {"pokemon", "teams", "weaknesses"} <= set(get_table_names(engine))
    finally:
        engine.dispose()


def test_cli_starts_uvicorn(monkeypatch):
    calls = {}
    monkeypatch.setattr(sys, "argv", ["pokebattle", "--port", "9001"])
    monkeypatch.setattr(
        cli.uvicorn, "run", lambda target, **kwargs: calls.update(kwargs, target=target)
    )

    cli.main()

    assert calls["target"] == "pokebattle.api.app:app"
    assert calls["port"] == 9001
    assert calls["reload"] is False
