"""Battle Service Protocol Interface.

This module defines the protocol (interface) for battle-related services
in the Pokébattle system.
"""

from typing import Protocol

from pokebattle.domain.models import BattleLog, TeamID


class IBattleService(Protocol):
    """Protocol defining the interface for running battles between stored teams."""

    def run_battle(self, team1_id: TeamID, team2_id: TeamID) -> BattleLog:
        """Validate the request, load both rosters and simulate the battle.

        Args:
            team1_id: Identifier of the first team
            team2_id: Identifier of the second team

        Returns:
            BattleLog for the completed battle

        Raises:
            InvalidRequestError: If the identifiers are blank or identical
            NotFoundError: If either team cannot be resolved to combatants
        """
        ...
