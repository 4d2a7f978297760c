"""Creature models for the Pokébattle system.

This module contains models for:
- PokemonTypes (catalog of elemental types)
- Pokemon (creatures available for team building)
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from .team import TeamMember

MIN_STAT = 10
MAX_STAT = 100


class PokemonType(Base):
    """Elemental type catalog entry.

    Attributes:
        id: Primary key (UUID text)
        name: Unique display name (e.g. "Fire")
    """

    __tablename__ = "pokemon_types"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    pokemon: Mapped[list["Pokemon"]] = relationship("Pokemon", back_populates="type")

    def __repr__(self) -> str:
        return f"<PokemonType(id={self.id!r}, name='{self.name}')>"


class Pokemon(Base, TimestampMixin):
    """A creature that can be placed on teams.

    Attributes:
        id: Primary key (UUID text)
        name: Display name
        type_id: Foreign key to the creature's type
        image: Optional image URL
        power: Attack strength, 10-100
        life: Starting life, 10-100
    """

    __tablename__ = "pokemon"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("pokemon_types.id"), nullable=False
    )
    image: Mapped[str | None] = mapped_column(String, nullable=True)
    power: Mapped[int] = mapped_column(Integer, nullable=False)
    life: Mapped[int] = mapped_column(Integer, nullable=False)

    type: Mapped["PokemonType"] = relationship("PokemonType", back_populates="pokemon")
    memberships: Mapped[list["TeamMember"]] = relationship(
        "TeamMember", back_populates="pokemon"
    )

    __table_args__ = (
        CheckConstraint(f"power BETWEEN {MIN_STAT} AND {MAX_STAT}", name="ck_pokemon_power"),
        CheckConstraint(f"life BETWEEN {MIN_STAT} AND {MAX_STAT}", name="ck_pokemon_life"),
        Index("idx_pokemon_type", "type_id"),
    )

    def __repr__(self) -> str:
        return f"<Pokemon(id={self.id!r}, name='{self.name}', power={self.power}, life={self.life})>"
