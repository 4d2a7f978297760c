"""SQLAlchemy models for the Pokébattle system.

This module exports all database models and provides access to the
declarative base and seed data functions.
"""

# Base classes
from .base import Base, TimestampMixin, new_id, utc_now

# Creature models
from .pokemon import MAX_STAT, MIN_STAT, Pokemon, PokemonType

# Seed data functions
from .seed_data import seed_all_catalog_data, seed_types, seed_weaknesses

# Team models
from .team import TEAM_SIZE, Team, TeamMember

# Effectiveness chart
from .weakness import Weakness

__all__ = [
    "MAX_STAT",
    "MIN_STAT",
    "TEAM_SIZE",
    "Base",
    "Pokemon",
    "PokemonType",
    "Team",
    "TeamMember",
    "TimestampMixin",
    "Weakness",
    "new_id",
    "seed_all_catalog_data",
    "seed_types",
    "seed_weaknesses",
    "utc_now",
]
