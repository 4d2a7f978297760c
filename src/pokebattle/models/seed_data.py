"""Seed data initialization for catalog tables.

This module provides functions to initialize the catalog tables
(pokemon_types and weaknesses) with the base type triangle.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from .pokemon import PokemonType
from .weakness import Weakness

BASE_TYPES = ("Fire", "Water", "Grass")

# (attacker, defender) -> factor; every other pairing of base types is neutral
TYPE_CHART: dict[tuple[str, str], float] = {
    ("Fire", "Grass"): 2.0,
    ("Fire", "Water"): 0.5,
    ("Water", "Fire"): 2.0,
    ("Water", "Grass"): 0.5,
    ("Grass", "Water"): 2.0,
    ("Grass", "Fire"): 0.5,
}


def seed_types(session: Session) -> dict[str, PokemonType]:
    """Ensure every base type exists and return all types keyed by name.

    Args:
        session: SQLAlchemy session to use for database operations
    """
    existing = {t.name: t for t in session.execute(select(PokemonType)).scalars()}
    for name in BASE_TYPES:
        if name not in existing:
            type_ = PokemonType(name=name)
            session.add(type_)
            existing[name] = type_
    session.flush()
    return existing


def seed_weaknesses(session: Session, types: dict[str, PokemonType]) -> None:
    """Fill in every missing base-type pairing of the effectiveness chart.

    Args:
        session: SQLAlchemy session to use for database operations
        types: Base types keyed by name, as returned by :func:`seed_types`
    """
    present = {
        (row.attacker_type_id, row.defender_type_id)
        for row in session.execute(select(Weakness)).scalars()
    }
    for attacker in BASE_TYPES:
        for defender in BASE_TYPES:
            key = (types[attacker].id, types[defender].id)
            if key in present:
                continue
            session.add(
                Weakness(
                    attacker_type_id=key[0],
                    defender_type_id=key[1],
                    factor=TYPE_CHART.get((attacker, defender), 1.0),
                )
            )
    session.flush()


def seed_all_catalog_data(session: Session) -> None:
    """Seed all catalog tables.

    Safe to call repeatedly; existing rows are left untouched.
    """
    types = seed_types(session)
    seed_weaknesses(session, types)
