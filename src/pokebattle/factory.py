"""Service Factory for Pokébattle.

This module provides factory functions for creating service instances with
proper dependency wiring. Use these functions in production code to ensure
all service dependencies are correctly initialized.

For testing, inject protocol-based fakes instead of using these factories.

Example:
    # Production usage
    from pokebattle.factory import create_battle_service
    battles = create_battle_service(session)

    # Testing usage
    from pokebattle.domain.effectiveness import StaticEffectivenessChart
    from pokebattle.services.battle_service import BattleService

    class FakeRoster:
        def load_team(self, team_id):
            return teams[team_id]

    battles = BattleService(FakeRoster(), StaticEffectivenessChart({}))
"""

from sqlalchemy.orm import Session

from pokebattle.interfaces.battle import IBattleService
from pokebattle.repository.battle_sources import SqlEffectivenessResolver, SqlRosterSource
from pokebattle.services.battle_service import BattleService
from pokebattle.services.pokemon_service import PokemonService
from pokebattle.services.team_service import TeamService


def create_pokemon_service(session: Session) -> PokemonService:
    """Create a PokemonService bound to ``session``."""
    return PokemonService(session)


def create_team_service(session: Session) -> TeamService:
    """Create a TeamService bound to ``session``."""
    return TeamService(session)


def create_battle_service(session: Session) -> IBattleService:
    """Create a BattleService with database-backed collaborators.

    Args:
        session: Database session

    Returns:
        BattleService reading rosters and the weakness chart from ``session``
    """
    return BattleService(SqlRosterSource(session), SqlEffectivenessResolver(session))
