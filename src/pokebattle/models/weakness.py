"""Type-effectiveness chart model.

Each row gives the damage multiplier applied when a creature of
``attacker_type_id`` hits one of ``defender_type_id``.
"""

from sqlalchemy import CheckConstraint, Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, new_id
from .pokemon import PokemonType


class Weakness(Base):
    """Represents one attacker/defender pairing in the effectiveness chart.

    Attributes:
        id: Primary key (UUID text)
        attacker_type_id: Foreign key to the attacking type
        defender_type_id: Foreign key to the defending type
        factor: Non-negative damage multiplier
    """

    __tablename__ = "weaknesses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    attacker_type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("pokemon_types.id", ondelete="CASCADE"), nullable=False
    )
    defender_type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("pokemon_types.id", ondelete="CASCADE"), nullable=False
    )
    factor: Mapped[float] = mapped_column(Float, nullable=False)

    attacker_type: Mapped["PokemonType"] = relationship(
        "PokemonType", foreign_keys=[attacker_type_id]
    )
    defender_type: Mapped["PokemonType"] = relationship(
        "PokemonType", foreign_keys=[defender_type_id]
    )

    __table_args__ = (
        UniqueConstraint("attacker_type_id", "defender_type_id", name="uq_weaknesses_pair"),
        CheckConstraint("factor >= 0", name="ck_weaknesses_factor"),
    )

    def __repr__(self) -> str:
        return (
            f"<Weakness(attacker={self.attacker_type_id!r}, "
            f"defender={self.defender_type_id!r}, factor={self.factor})>"
        )
