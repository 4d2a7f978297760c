from datetime import datetime

from pydantic import BaseModel, Field

from pokebattle.models import TEAM_SIZE

from .pokemon import PokemonRead


class TeamWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Team name")
    pokemon_ids: list[str] = Field(
        ...,
        min_length=TEAM_SIZE,
        max_length=TEAM_SIZE,
        description="Creature ids in engagement order",
    )


class TeamRead(BaseModel):
    id: str
    name: str
    pokemon_ids: list[str]
    total_power: int
    created_at: datetime | None = None
    pokemon: list[PokemonRead] = Field(default_factory=list)


class TeamResponse(BaseModel):
    team: TeamRead


class TeamListResponse(BaseModel):
    teams: list[TeamRead]


class TeamDeletedResponse(BaseModel):
    message: str
    deleted_id: str
