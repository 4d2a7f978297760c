"""Battle simulation rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from pokebattle.domain.effectiveness import FactorCache, FallbackHook
from pokebattle.domain.enums import Winner
from pokebattle.domain.models import BattleLog, BattleTeam, Combatant, Round

if TYPE_CHECKING:
    from pokebattle.interfaces.effectiveness import IEffectivenessResolver

# Charged rounds per battle before it is called
MAX_ROUNDS = 100

DEFAULT_TEAM_1 = ("team1", "Team 1")
DEFAULT_TEAM_2 = ("team2", "Team 2")


@dataclass(slots=True)
class SideState:
    """Mutable per-battle state of one side."""

    team: BattleTeam
    life: list[int] = field(init=False)
    cursor: int = 0

    def __post_init__(self) -> None:
        self.life = [combatant.life for combatant in self.team.combatants]

    @property
    def in_bounds(self) -> bool:
        return self.cursor < len(self.team.combatants)

    @property
    def active(self) -> Combatant:
        return self.team.combatants[self.cursor]

    @property
    def active_life(self) -> int:
        return self.life[self.cursor]

    def has_survivor(self) -> bool:
        return any(life > 0 for life in self.life)

    def remaining(self) -> tuple[Combatant, ...]:
        return tuple(
            combatant
            for combatant, life in zip(self.team.combatants, self.life, strict=True)
            if life > 0
        )


def simulate(
    team_a: BattleTeam | Sequence[Combatant],
    team_b: BattleTeam | Sequence[Combatant],
    resolver: IEffectivenessResolver,
    *,
    on_factor_fallback: FallbackHook | None = None,
) -> BattleLog:
    """Run a battle between two ordered teams and return its full log.

    Each iteration pits the first living combatant of each team against the
    other.  Both deal damage simultaneously, so a round can knock out both
    sides.  The loop stops when a team runs out of combatants or after
    :data:`MAX_ROUNDS` charged rounds; the winner is decided afterwards from
    the survivors alone.
    """

    side_a = SideState(_normalize_team(team_a, DEFAULT_TEAM_1))
    side_b = SideState(_normalize_team(team_b, DEFAULT_TEAM_2))
    factors = FactorCache(resolver, on_fallback=on_factor_fallback)
    rounds: list[Round] = []

    while side_a.in_bounds and side_b.in_bounds and len(rounds) < MAX_ROUNDS:
        # Skipping a fallen combatant does not charge a round
        if side_a.active_life <= 0:
            side_a.cursor += 1
            continue
        if side_b.active_life <= 0:
            side_b.cursor += 1
            continue

        rounds.append(_fight_round(len(rounds) + 1, side_a, side_b, factors))

        if side_a.active_life <= 0:
            side_a.cursor += 1
        if side_b.active_life <= 0:
            side_b.cursor += 1

    return BattleLog(
        team1=side_a.team.summary(),
        team2=side_b.team.summary(),
        rounds=tuple(rounds),
        winner=determine_winner(side_a.has_survivor(), side_b.has_survivor()),
        team1_remaining=side_a.remaining(),
        team2_remaining=side_b.remaining(),
    )


def determine_winner(team1_alive: bool, team2_alive: bool) -> Winner:
    """Exactly one team with survivors wins; anything else is a draw."""

    if team1_alive and not team2_alive:
        return Winner.TEAM_1
    if team2_alive and not team1_alive:
        return Winner.TEAM_2
    return Winner.DRAW


def compute_damage(power: int, factor: float) -> int:
    """Scale ``power`` by ``factor`` and round half away from zero."""

    scaled = Decimal(str(power)) * Decimal(str(factor))
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _normalize_team(team: BattleTeam | Sequence[Combatant], default: tuple[str, str]) -> BattleTeam:
    if not isinstance(team, BattleTeam):
        team_id, name = default
        team = BattleTeam.from_sequence(team_id, name, team)
    if not team.combatants:
        raise ValueError(f"team {team.name!r} has no combatants")
    return team


def _fight_round(number: int, side_a: SideState, side_b: SideState, factors: FactorCache) -> Round:
    attacker_a = side_a.active
    attacker_b = side_b.active

    factor_a = factors.lookup(attacker_a.type_id, attacker_b.type_id)
    factor_b = factors.lookup(attacker_b.type_id, attacker_a.type_id)
    damage_a = compute_damage(attacker_a.power, factor_a)
    damage_b = compute_damage(attacker_b.power, factor_b)

    life_a_before = side_a.active_life
    life_b_before = side_b.active_life
    life_a_after = max(0, life_a_before - damage_b)
    life_b_after = max(0, life_b_before - damage_a)
    side_a.life[side_a.cursor] = life_a_after
    side_b.life[side_b.cursor] = life_b_after

    return Round(
        number=number,
        pokemon1=attacker_a,
        pokemon2=attacker_b,
        life1_before=life_a_before,
        life2_before=life_b_before,
        life1_after=life_a_after,
        life2_after=life_b_after,
        damage1=damage_a,
        damage2=damage_b,
        type_factor1=factor_a,
        type_factor2=factor_b,
    )
