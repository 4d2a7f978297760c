"""Protocol-based interfaces for Pokébattle services.

This module exports all service protocol interfaces, providing a clear contract
for service implementations and enabling dependency injection and testing.
"""

from pokebattle.interfaces.battle import IBattleService
from pokebattle.interfaces.effectiveness import IEffectivenessResolver
from pokebattle.interfaces.roster import IRosterSource

__all__ = [
    "IBattleService",
    "IEffectivenessResolver",
    "IRosterSource",
]
