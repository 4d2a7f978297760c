"""Dataclasses describing the in-memory battle domain.

The ORM layer stores creatures, teams and the weakness chart.  The types
below are the battle engine's view of that data: immutable snapshots that
are built once per battle and never written back to storage.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NewType

from .enums import Winner

# --- Strongly typed identifiers -------------------------------------------------

PokemonID = NewType("PokemonID", str)
TeamID = NewType("TeamID", str)
TypeID = NewType("TypeID", str)


# --- Core dataclasses -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Combatant:
    """Static attributes of a creature entering a battle.

    ``life`` is the starting (and maximum) life.  The engine tracks current
    life separately so a combatant can be shared between battles.
    """

    id: PokemonID
    name: str
    type_id: TypeID
    type_name: str
    power: int
    life: int
    image: str | None = None

    def __post_init__(self) -> None:
        if self.life <= 0:
            raise ValueError(f"combatant {self.id!r} must have positive life, got {self.life}")
        if self.power < 0:
            raise ValueError(f"combatant {self.id!r} must have non-negative power, got {self.power}")


@dataclass(frozen=True, slots=True)
class BattleTeam:
    """An ordered roster as it enters a battle."""

    id: str
    name: str
    combatants: tuple[Combatant, ...]

    @classmethod
    def from_sequence(
        cls, team_id: str, name: str, combatants: Sequence[Combatant]
    ) -> BattleTeam:
        return cls(id=team_id, name=name, combatants=tuple(combatants))

    @property
    def total_power(self) -> int:
        return sum(combatant.power for combatant in self.combatants)

    def summary(self) -> TeamSummary:
        return TeamSummary(
            id=self.id,
            name=self.name,
            pokemon_ids=tuple(combatant.id for combatant in self.combatants),
            total_power=self.total_power,
        )


@dataclass(frozen=True, slots=True)
class TeamSummary:
    """Aggregate view of a team reported alongside the battle log."""

    id: str
    name: str
    pokemon_ids: tuple[PokemonID, ...]
    total_power: int


@dataclass(frozen=True, slots=True)
class Round:
    """One engagement between the active combatants of both teams."""

    number: int
    pokemon1: Combatant
    pokemon2: Combatant
    life1_before: int
    life2_before: int
    life1_after: int
    life2_after: int
    damage1: int
    damage2: int
    type_factor1: float
    type_factor2: float


@dataclass(frozen=True, slots=True)
class BattleLog:
    """Complete, replayable record of a simulated battle."""

    team1: TeamSummary
    team2: TeamSummary
    rounds: tuple[Round, ...]
    winner: Winner
    team1_remaining: tuple[Combatant, ...]
    team2_remaining: tuple[Combatant, ...]
