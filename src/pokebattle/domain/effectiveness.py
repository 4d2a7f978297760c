"""Type-effectiveness lookups as consumed by the battle engine.

Resolvers return an explicit result instead of a bare number so that a
legitimate ``0.0`` factor is never confused with "no data".  The engine only
ever sees plain floats: :class:`FactorCache` turns every failure into the
neutral factor and reports it through an optional callback.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import TypeID

if TYPE_CHECKING:
    from pokebattle.interfaces.effectiveness import IEffectivenessResolver

NEUTRAL_FACTOR = 1.0

FallbackHook = Callable[[TypeID, TypeID, str], None]


@dataclass(frozen=True, slots=True)
class FactorFound:
    """Successful lookup."""

    factor: float


@dataclass(frozen=True, slots=True)
class FactorMissing:
    """Lookup that produced no usable factor."""

    reason: str


FactorResult = FactorFound | FactorMissing


class StaticEffectivenessChart:
    """Resolver backed by an in-memory ``(attacker, defender) -> factor`` mapping."""

    def __init__(self, chart: Mapping[tuple[TypeID, TypeID], float]) -> None:
        self._chart = dict(chart)

    def factor(self, attacker: TypeID, defender: TypeID) -> FactorResult:
        value = self._chart.get((attacker, defender))
        if value is None:
            return FactorMissing(f"no chart entry for {attacker!r} -> {defender!r}")
        return FactorFound(value)


def checked(result: object) -> FactorResult:
    """Reject results that cannot be used as a damage multiplier."""

    if isinstance(result, FactorMissing):
        return result
    if not isinstance(result, FactorFound):
        return FactorMissing(f"resolver returned {type(result).__name__}")
    value = result.factor
    if isinstance(value, bool) or not isinstance(value, int | float):
        return FactorMissing(f"non-numeric factor {value!r}")
    if not math.isfinite(value) or value < 0:
        return FactorMissing(f"invalid factor {value!r}")
    return FactorFound(float(value))


class FactorCache:
    """Per-battle memo of effectiveness lookups.

    Found factors are cached by ``(attacker, defender)`` pair.  Failures are
    not cached, so a transient error only affects the round that hit it.
    """

    def __init__(
        self,
        resolver: IEffectivenessResolver,
        *,
        on_fallback: FallbackHook | None = None,
    ) -> None:
        self._resolver = resolver
        self._on_fallback = on_fallback
        self._found: dict[tuple[TypeID, TypeID], float] = {}

    def lookup(self, attacker: TypeID, defender: TypeID) -> float:
        key = (attacker, defender)
        cached = self._found.get(key)
        if cached is not None:
            return cached

        try:
            result = checked(self._resolver.factor(attacker, defender))
        except Exception as exc:  # noqa: BLE001 - any resolver failure is neutral
            result = FactorMissing(f"{type(exc).__name__}: {exc}")

        if isinstance(result, FactorFound):
            self._found[key] = result.factor
            return result.factor

        if self._on_fallback is not None:
            self._on_fallback(attacker, defender, result.reason)
        return NEUTRAL_FACTOR
