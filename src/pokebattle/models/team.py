"""Team models for the Pokébattle system.

A team is an ordered line-up of exactly six creature slots.  Slots are rows
in ``team_members`` keyed by position, so the same creature may fill more
than one slot.
"""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, new_id
from .pokemon import Pokemon

TEAM_SIZE = 6


class Team(Base, TimestampMixin):
    """Represents a named team.

    Attributes:
        id: Primary key (UUID text)
        name: Display name
        members: Slots ordered by position
    """

    __tablename__ = "teams"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    members: Mapped[list["TeamMember"]] = relationship(
        "TeamMember",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="TeamMember.position",
    )

    @property
    def pokemon_ids(self) -> list[str]:
        return [member.pokemon_id for member in self.members]

    @property
    def total_power(self) -> int:
        return sum(member.pokemon.power for member in self.members)

    def __repr__(self) -> str:
        return f"<Team(id={self.id!r}, name='{self.name}', members={len(self.members)})>"


class TeamMember(Base):
    """One slot of a team.

    Attributes:
        team_id: Foreign key to the owning team
        position: Engagement order, 0-based
        pokemon_id: Foreign key to the creature in this slot
    """

    __tablename__ = "team_members"

    team_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    pokemon_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("pokemon.id"), nullable=False
    )

    team: Mapped["Team"] = relationship("Team", back_populates="members")
    pokemon: Mapped["Pokemon"] = relationship("Pokemon", back_populates="memberships")

    __table_args__ = (
        CheckConstraint(
            f"position >= 0 AND position < {TEAM_SIZE}", name="ck_team_members_position"
        ),
        Index("idx_team_members_pokemon", "pokemon_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<TeamMember(team_id={self.team_id!r}, position={self.position}, "
            f"pokemon_id={self.pokemon_id!r})>"
        )
