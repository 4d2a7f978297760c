from pydantic import BaseModel, Field

from pokebattle.domain.enums import Winner

from .pokemon import PokemonRead


class BattleRequest(BaseModel):
    team1_id: str = Field(..., min_length=1, description="First team")
    team2_id: str = Field(..., min_length=1, description="Second team")


class TeamSummaryRead(BaseModel):
    id: str
    name: str
    pokemon_ids: list[str]
    total_power: int


class RoundRead(BaseModel):
    round: int = Field(..., ge=1, description="1-based round number")
    pokemon1: PokemonRead
    pokemon2: PokemonRead
    life1_before: int
    life2_before: int
    life1_after: int
    life2_after: int
    damage1: int = Field(..., description="Damage dealt by pokemon1")
    damage2: int = Field(..., description="Damage dealt by pokemon2")
    type_factor1: float = Field(..., description="Multiplier applied to pokemon1's attack")
    type_factor2: float = Field(..., description="Multiplier applied to pokemon2's attack")


class BattleLogRead(BaseModel):
    team1: TeamSummaryRead
    team2: TeamSummaryRead
    rounds: list[RoundRead]
    winner: Winner
    team1_remaining: list[PokemonRead]
    team2_remaining: list[PokemonRead]


class BattleResponse(BaseModel):
    battle: BattleLogRead
