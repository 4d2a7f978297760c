"""Enumerations shared by the battle domain."""

from __future__ import annotations

from enum import StrEnum


class Winner(StrEnum):
    """Outcome labels reported in a battle log."""

    TEAM_1 = "Team 1"
    TEAM_2 = "Team 2"
    DRAW = "Draw"
