"""Team management service for Pokébattle."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from pokebattle.models import TEAM_SIZE, Team
from pokebattle.repository.sql_store import PokemonRepository, TeamRepository
from pokebattle.services.errors import InvalidRequestError, NotFoundError
from pokebattle.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)

MAX_TEAM_NAME_LENGTH = 100


class TeamService:
    """Build, edit and rank teams of exactly :data:`TEAM_SIZE` creatures."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._teams = TeamRepository(session)
        self._pokemon = PokemonRepository(session)

    def list_teams(self) -> list[Team]:
        """Return every team ordered by total power, strongest first."""

        return self._teams.list_by_power()

    def get_team(self, team_id: str) -> Team:
        team = self._teams.get(team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def create_team(self, name: str, pokemon_ids: Sequence[str]) -> Team:
        clean_name = self._validate(name, pokemon_ids)
        team = self._teams.insert(clean_name, list(pokemon_ids))
        logger.info("created team %s (%s)", team.id, clean_name)
        return team

    def update_team(self, team_id: str, name: str, pokemon_ids: Sequence[str]) -> Team:
        team = self.get_team(team_id)
        clean_name = self._validate(name, pokemon_ids)
        self._teams.replace(team, clean_name, list(pokemon_ids))
        return team

    def delete_team(self, team_id: str) -> str:
        team = self.get_team(team_id)
        self._teams.delete(team)
        logger.info("deleted team %s", team_id)
        return team_id

    def _validate(self, name: str, pokemon_ids: Sequence[str]) -> str:
        clean_name = (name or "").strip()
        if not clean_name:
            raise InvalidRequestError("Team name cannot be empty")
        if len(clean_name) > MAX_TEAM_NAME_LENGTH:
            raise InvalidRequestError(
                f"Team name cannot be longer than {MAX_TEAM_NAME_LENGTH} characters"
            )
        if len(pokemon_ids) != TEAM_SIZE:
            raise InvalidRequestError(f"Team must contain exactly {TEAM_SIZE} Pokemon")
        if not all(isinstance(pid, str) and pid for pid in pokemon_ids):
            raise InvalidRequestError("All Pokemon IDs must be valid")

        found = self._pokemon.get_many(pokemon_ids)
        if any(pid not in found for pid in pokemon_ids):
            raise InvalidRequestError("One or more Pokemon not found")
        return clean_name

    @staticmethod
    def to_team_dict(team: Team) -> dict[str, object]:
        """Return the team with its members in slot order."""

        return {
            "id": team.id,
            "name": team.name,
            "pokemon_ids": team.pokemon_ids,
            "total_power": team.total_power,
            "created_at": team.created_at,
            "pokemon": [PokemonService.to_pokemon_dict(member.pokemon) for member in team.members],
        }
