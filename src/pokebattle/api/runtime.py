"""Runtime primitives backing the Pokébattle HTTP API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from pokebattle import factory
from pokebattle.config import Settings, get_settings
from pokebattle.database import (
    check_database_health,
    create_db_engine,
    create_session_factory,
    init_db,
    session_scope,
)
from pokebattle.domain import models as dm
from pokebattle.models import seed_all_catalog_data
from pokebattle.services.battle_service import BattleService
from pokebattle.services.pokemon_service import PokemonDraft

logger = logging.getLogger(__name__)


class RosterApi:
    """Session-per-call access to types, creatures and teams.

    Every method opens its own transaction and returns plain dictionaries,
    so nothing handed back to the HTTP layer is bound to a session.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def list_types(self) -> list[dict[str, object]]:
        with session_scope(self._session_factory) as session:
            service = factory.create_pokemon_service(session)
            return [service.to_type_dict(t) for t in service.list_types()]

    def list_pokemon(self) -> list[dict[str, object]]:
        with session_scope(self._session_factory) as session:
            service = factory.create_pokemon_service(session)
            return [service.to_pokemon_dict(p) for p in service.list_pokemon()]

    def get_pokemon(self, pokemon_id: str) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_pokemon_service(session)
            return service.to_pokemon_dict(service.get_pokemon(pokemon_id))

    def create_pokemon(self, draft: PokemonDraft) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_pokemon_service(session)
            return service.to_pokemon_dict(service.create_pokemon(draft))

    def update_pokemon(self, pokemon_id: str, draft: PokemonDraft) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_pokemon_service(session)
            return service.to_pokemon_dict(service.update_pokemon(pokemon_id, draft))

    def list_teams(self) -> list[dict[str, object]]:
        with session_scope(self._session_factory) as session:
            service = factory.create_team_service(session)
            return [service.to_team_dict(team) for team in service.list_teams()]

    def create_team(self, name: str, pokemon_ids: Sequence[str]) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_team_service(session)
            return service.to_team_dict(service.create_team(name, pokemon_ids))

    def update_team(
        self, team_id: str, name: str, pokemon_ids: Sequence[str]
    ) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_team_service(session)
            return service.to_team_dict(service.update_team(team_id, name, pokemon_ids))

    def delete_team(self, team_id: str) -> str:
        with session_scope(self._session_factory) as session:
            return factory.create_team_service(session).delete_team(team_id)


class BattleRunner:
    """Runs battles off the event loop, one session per battle."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    async def run(self, team1_id: str, team2_id: str) -> dict[str, object]:
        return await asyncio.to_thread(self.run_sync, team1_id, team2_id)

    def run_sync(self, team1_id: str, team2_id: str) -> dict[str, object]:
        with session_scope(self._session_factory) as session:
            service = factory.create_battle_service(session)
            log = service.run_battle(dm.TeamID(team1_id), dm.TeamID(team2_id))
        return BattleService.to_battle_dict(log)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None, engine: Engine | None = None) -> None:
        self.settings = settings or get_settings()
        self._owns_engine = engine is None
        self.engine = engine or create_db_engine(self.settings)
        self.session_factory = create_session_factory(self.engine)
        self.roster = RosterApi(self.session_factory)
        self.battles = BattleRunner(self.session_factory)
        if self.settings.seed_catalog:
            self.prepare_database()

    def prepare_database(self) -> None:
        """Create missing tables and seed the type catalog."""

        init_db(self.engine)
        with session_scope(self.session_factory) as session:
            seed_all_catalog_data(session)
        logger.info("database ready at %s", self.engine.url.render_as_string(hide_password=True))

    def database_healthy(self) -> bool:
        return check_database_health(self.engine)

    async def shutdown(self) -> None:
        if self._owns_engine:
            self.engine.dispose()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
