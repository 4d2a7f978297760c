"""Battle Service for Pokébattle.

This module validates battle requests, loads both rosters through an
:class:`~pokebattle.interfaces.IRosterSource` and hands them to the pure
engine in :mod:`pokebattle.domain.battle`.  It is also where effectiveness
fallbacks get logged, since the engine itself performs no I/O.
"""

from __future__ import annotations

import logging

from pokebattle.domain import models as dm
from pokebattle.domain.battle import simulate
from pokebattle.interfaces.effectiveness import IEffectivenessResolver
from pokebattle.interfaces.roster import IRosterSource
from pokebattle.services.errors import InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)


class BattleService:
    """Service for running battles between stored teams."""

    def __init__(self, roster: IRosterSource, resolver: IEffectivenessResolver) -> None:
        self.roster = roster
        self.resolver = resolver

    def run_battle(self, team1_id: dm.TeamID, team2_id: dm.TeamID) -> dm.BattleLog:
        """Validate the matchup and simulate it.

        Args:
            team1_id: Identifier of the first team
            team2_id: Identifier of the second team

        Returns:
            The completed battle log

        Raises:
            InvalidRequestError: If an identifier is blank or both are equal
            NotFoundError: If a team is missing or has no members
        """
        if not team1_id or not team2_id:
            raise InvalidRequestError("Missing required fields: team1_id, team2_id")
        if team1_id == team2_id:
            raise InvalidRequestError("Teams cannot battle themselves")

        team1 = self._load(team1_id, "Team 1")
        team2 = self._load(team2_id, "Team 2")

        log = simulate(team1, team2, self.resolver, on_factor_fallback=self._log_fallback)
        logger.info(
            "battle %s vs %s finished after %d rounds: %s",
            team1_id,
            team2_id,
            len(log.rounds),
            log.winner,
        )
        return log

    def _load(self, team_id: dm.TeamID, label: str) -> dm.BattleTeam:
        try:
            return self.roster.load_team(team_id)
        except NotFoundError as exc:
            raise NotFoundError(f"{label} not found or has no Pokemon") from exc

    @staticmethod
    def _log_fallback(attacker: dm.TypeID, defender: dm.TypeID, reason: str) -> None:
        logger.warning(
            "type factor %s -> %s unavailable (%s); using neutral effectiveness",
            attacker,
            defender,
            reason,
        )

    @staticmethod
    def to_combatant_dict(combatant: dm.Combatant) -> dict[str, object]:
        return {
            "id": combatant.id,
            "name": combatant.name,
            "type": combatant.type_name,
            "type_name": combatant.type_name,
            "image": combatant.image,
            "power": combatant.power,
            "life": combatant.life,
        }

    @staticmethod
    def to_team_summary_dict(summary: dm.TeamSummary) -> dict[str, object]:
        return {
            "id": summary.id,
            "name": summary.name,
            "pokemon_ids": list(summary.pokemon_ids),
            "total_power": summary.total_power,
        }

    @staticmethod
    def to_battle_dict(log: dm.BattleLog) -> dict[str, object]:
        """Return the JSON-compatible battle log."""

        combatant = BattleService.to_combatant_dict
        return {
            "team1": BattleService.to_team_summary_dict(log.team1),
            "team2": BattleService.to_team_summary_dict(log.team2),
            "rounds": [
                {
                    "round": r.number,
                    "pokemon1": combatant(r.pokemon1),
                    "pokemon2": combatant(r.pokemon2),
                    "life1_before": r.life1_before,
                    "life2_before": r.life2_before,
                    "life1_after": r.life1_after,
                    "life2_after": r.life2_after,
                    "damage1": r.damage1,
                    "damage2": r.damage2,
                    "type_factor1": r.type_factor1,
                    "type_factor2": r.type_factor2,
                }
                for r in log.rounds
            ],
            "winner": str(log.winner),
            "team1_remaining": [combatant(c) for c in log.team1_remaining],
            "team2_remaining": [combatant(c) for c in log.team2_remaining],
        }
