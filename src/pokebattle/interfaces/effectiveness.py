"""Effectiveness Resolver Protocol Interface.

This module defines the protocol (interface) for type-effectiveness lookups
consumed by the battle engine.
"""

from typing import Protocol

from pokebattle.domain.effectiveness import FactorResult
from pokebattle.domain.models import TypeID


class IEffectivenessResolver(Protocol):
    """Protocol defining how the engine asks for damage multipliers.

    Implementations should return :class:`FactorMissing` rather than raise
    when a pairing is unknown.  The engine tolerates exceptions as well, but
    treats them the same way: the factor falls back to neutral.
    """

    def factor(self, attacker: TypeID, defender: TypeID) -> FactorResult:
        """Look up the multiplier for ``attacker`` hitting ``defender``.

        Args:
            attacker: Type identifier of the attacking combatant
            defender: Type identifier of the defending combatant

        Returns:
            FactorFound with the multiplier, or FactorMissing with a reason
        """
        ...
