"""SQLAlchemy-backed repositories for Pokébattle records."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pokebattle.models import Pokemon, PokemonType, Team, TeamMember, Weakness


class TypeRepository:
    """Read access to the type catalog."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_types(self) -> list[PokemonType]:
        """Return every type ordered by name."""

        return list(self.session.scalars(select(PokemonType).order_by(PokemonType.name)))

    def get(self, type_id: str) -> PokemonType | None:
        return self.session.get(PokemonType, type_id)

    def ids_by_name(self) -> dict[str, str]:
        """Map type names to identifiers."""

        return {type_.name: type_.id for type_ in self.list_types()}


class PokemonRepository:
    """Persist and query creatures together with their type."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_with_types(self) -> list[Pokemon]:
        """Return every creature with its type loaded, ordered by name."""

        stmt = (
            select(Pokemon)
            .options(selectinload(Pokemon.type))
            .order_by(Pokemon.name, Pokemon.id)
        )
        return list(self.session.scalars(stmt))

    def get(self, pokemon_id: str) -> Pokemon | None:
        stmt = select(Pokemon).options(selectinload(Pokemon.type)).where(Pokemon.id == pokemon_id)
        return self.session.scalars(stmt).one_or_none()

    def get_many(self, pokemon_ids: Sequence[str]) -> dict[str, Pokemon]:
        """Load the distinct creatures referenced by ``pokemon_ids``."""

        if not pokemon_ids:
            return {}
        stmt = (
            select(Pokemon)
            .options(selectinload(Pokemon.type))
            .where(Pokemon.id.in_(set(pokemon_ids)))
        )
        return {pokemon.id: pokemon for pokemon in self.session.scalars(stmt)}

    def add(self, pokemon: Pokemon) -> Pokemon:
        self.session.add(pokemon)
        self.session.flush()
        return pokemon


class TeamRepository:
    """Persist teams and their ordered member slots."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _with_members(self):
        return select(Team).options(
            selectinload(Team.members).selectinload(TeamMember.pokemon).selectinload(Pokemon.type)
        )

    def get(self, team_id: str) -> Team | None:
        """Return a team with members, creatures and types loaded."""

        return self.session.scalars(self._with_members().where(Team.id == team_id)).one_or_none()

    def list_by_power(self) -> list[Team]:
        """Return all teams, strongest first; ties keep creation order."""

        teams = list(self.session.scalars(self._with_members().order_by(Team.created_at, Team.id)))
        return sorted(teams, key=lambda team: team.total_power, reverse=True)

    def insert(self, name: str, pokemon_ids: Sequence[str]) -> Team:
        """Create a team whose slots follow ``pokemon_ids`` order."""

        team = Team(name=name)
        self._assign_members(team, pokemon_ids)
        self.session.add(team)
        self.session.flush()
        return team

    def replace(self, team: Team, name: str, pokemon_ids: Sequence[str]) -> Team:
        """Rename ``team`` and replace all of its slots."""

        team.name = name
        team.members.clear()
        # Old slots must be gone before new ones reuse their primary keys
        self.session.flush()
        self._assign_members(team, pokemon_ids)
        self.session.flush()
        return team

    def delete(self, team: Team) -> None:
        self.session.delete(team)
        self.session.flush()

    @staticmethod
    def _assign_members(team: Team, pokemon_ids: Sequence[str]) -> None:
        team.members.extend(
            TeamMember(position=position, pokemon_id=pokemon_id)
            for position, pokemon_id in enumerate(pokemon_ids)
        )


class WeaknessRepository:
    """Lookups against the effectiveness chart."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def type_factor(self, attacker_type_id: str, defender_type_id: str) -> float | None:
        """Return the stored multiplier, or ``None`` when the pairing is absent."""

        stmt = select(Weakness.factor).where(
            Weakness.attacker_type_id == attacker_type_id,
            Weakness.defender_type_id == defender_type_id,
        )
        return self.session.scalars(stmt).first()
