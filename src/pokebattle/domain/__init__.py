"""Pure battle domain for the Pokébattle service.

This package holds everything the battle engine needs and nothing it does
not.  It exposes:

* Immutable dataclasses for combatants, rounds and battle logs (see :mod:`models`).
* The effectiveness result types and the per-battle factor cache.
* The :func:`battle.simulate` engine itself.

Nothing here touches the database or logs; the service layer feeds it
in-memory rosters and a resolver and receives a :class:`models.BattleLog`.
"""

from . import battle, effectiveness, enums, models

__all__ = [
    "battle",
    "effectiveness",
    "enums",
    "models",
]
