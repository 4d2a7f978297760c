"""Database adapters feeding the battle engine.

These implement :class:`~pokebattle.interfaces.IRosterSource` and
:class:`~pokebattle.interfaces.IEffectivenessResolver` on top of the
SQLAlchemy repositories.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pokebattle.domain import models as dm
from pokebattle.domain.effectiveness import FactorFound, FactorMissing, FactorResult
from pokebattle.models import Pokemon
from pokebattle.repository.sql_store import TeamRepository, WeaknessRepository
from pokebattle.services.errors import NotFoundError


def to_combatant(pokemon: Pokemon) -> dm.Combatant:
    """Snapshot a stored creature as a battle combatant."""

    return dm.Combatant(
        id=dm.PokemonID(pokemon.id),
        name=pokemon.name,
        type_id=dm.TypeID(pokemon.type_id),
        type_name=pokemon.type.name,
        power=pokemon.power,
        life=pokemon.life,
        image=pokemon.image,
    )


class SqlRosterSource:
    """Load stored teams as ordered battle rosters."""

    def __init__(self, session: Session) -> None:
        self._teams = TeamRepository(session)

    def load_team(self, team_id: dm.TeamID) -> dm.BattleTeam:
        team = self._teams.get(team_id)
        if team is None:
            raise NotFoundError(f"Team {team_id} not found")
        if not team.members:
            raise NotFoundError(f"Team {team_id} has no Pokemon")
        return dm.BattleTeam.from_sequence(
            team.id, team.name, [to_combatant(member.pokemon) for member in team.members]
        )


class SqlEffectivenessResolver:
    """Resolve type factors from the ``weaknesses`` table.

    Storage errors are reported as :class:`FactorMissing` so a flaky lookup
    never aborts a battle.
    """

    def __init__(self, session: Session) -> None:
        self._weaknesses = WeaknessRepository(session)

    def factor(self, attacker: dm.TypeID, defender: dm.TypeID) -> FactorResult:
        try:
            value = self._weaknesses.type_factor(attacker, defender)
        except SQLAlchemyError as exc:
            return FactorMissing(f"lookup failed: {exc.__class__.__name__}")
        if value is None:
            return FactorMissing(f"no weakness entry for {attacker} -> {defender}")
        return FactorFound(value)
