"""Pytest configuration and shared database fixtures.

This adds the `src/` directory to `sys.path` so tests can import the
`pokebattle` package without requiring an editable install in CI, and
provides an in-memory SQLite database seeded with the type catalog.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pokebattle.config import Settings  # noqa: E402
from pokebattle.database import create_db_engine, create_session_factory, init_db  # noqa: E402
from pokebattle.models import Pokemon, PokemonType, Team, seed_all_catalog_data  # noqa: E402
from pokebattle.repository.sql_store import TeamRepository, TypeRepository  # noqa: E402


def memory_settings(**overrides) -> Settings:
    return Settings(database_url="sqlite://", **overrides)


@pytest.fixture
def engine():
    """Fresh in-memory database with all tables created."""
    engine = create_db_engine(memory_settings(seed_catalog=False))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session on the in-memory database with the type catalog seeded."""
    factory = create_session_factory(engine)
    session = factory()
    seed_all_catalog_data(session)
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def types(session) -> dict[str, PokemonType]:
    return {t.name: t for t in TypeRepository(session).list_types()}


@pytest.fixture
def make_pokemon(session, types) -> Callable[..., Pokemon]:
    """Insert a creature; defaults to a 50/50 Fire type."""

    counter = iter(range(1, 10_000))

    def _make(
        name: str | None = None,
        *,
        type_name: str = "Fire",
        power: int = 50,
        life: int = 50,
        image: str | None = None,
    ) -> Pokemon:
        pokemon = Pokemon(
            name=name or f"Mon {next(counter)}",
            type_id=types[type_name].id,
            power=power,
            life=life,
            image=image,
        )
        session.add(pokemon)
        session.flush()
        return pokemon

    return _make


@pytest.fixture
def make_team(session, make_pokemon) -> Callable[..., Team]:
    """Insert a team of six creatures built from ``make_pokemon`` keyword sets."""

    def _make(name: str = "Team", members: list[dict] | None = None) -> Team:
        specs = members if members is not None else [{} for _ in range(6)]
        pokemon = [make_pokemon(**spec) for spec in specs]
        team = TeamRepository(session).insert(name, [p.id for p in pokemon])
        session.commit()
        return team

    return _make
