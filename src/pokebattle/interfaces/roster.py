"""Roster Source Protocol Interface.

This module defines the protocol for turning a stored team into the ordered
combatants the battle engine consumes.
"""

from typing import Protocol

from pokebattle.domain.models import BattleTeam, TeamID


class IRosterSource(Protocol):
    """Protocol for loading battle-ready teams."""

    def load_team(self, team_id: TeamID) -> BattleTeam:
        """Load a team with its members in engagement order.

        Args:
            team_id: Identifier of the stored team

        Returns:
            BattleTeam with one combatant per team slot

        Raises:
            NotFoundError: If the team does not exist or has no members
        """
        ...
