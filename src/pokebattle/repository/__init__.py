"""Persistence layer for Pokébattle records."""

from pokebattle.repository.battle_sources import (
    SqlEffectivenessResolver,
    SqlRosterSource,
    to_combatant,
)
from pokebattle.repository.sql_store import (
    PokemonRepository,
    TeamRepository,
    TypeRepository,
    WeaknessRepository,
)

__all__ = [
    "PokemonRepository",
    "SqlEffectivenessResolver",
    "SqlRosterSource",
    "TeamRepository",
    "TypeRepository",
    "WeaknessRepository",
    "to_combatant",
]
