"""Service layer for Pokébattle.

Services depend on Protocol interfaces where they talk to the engine's
collaborators, and on a SQLAlchemy session where they manage records:

- PokemonService: type catalog, creature listing and editing
- TeamService: six-slot team creation, editing, deletion and ranking
- BattleService: request validation, roster loading, battle simulation

Production Usage:
    from pokebattle.factory import create_battle_service
    battles = create_battle_service(session)
    log = battles.run_battle(team1_id, team2_id)

Testing Usage:
    from pokebattle.services.battle_service import BattleService

    class FakeRoster:
        def load_team(self, team_id):
            return teams[team_id]

    service = BattleService(FakeRoster(), StaticEffectivenessChart({}))
"""

from pokebattle.services.battle_service import BattleService
from pokebattle.services.errors import InvalidRequestError, NotFoundError, PokebattleError
from pokebattle.services.pokemon_service import PokemonDraft, PokemonService
from pokebattle.services.team_service import TeamService

__all__ = [
    "BattleService",
    "InvalidRequestError",
    "NotFoundError",
    "PokebattleError",
    "PokemonDraft",
    "PokemonService",
    "TeamService",
]
