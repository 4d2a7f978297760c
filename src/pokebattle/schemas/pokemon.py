from pydantic import BaseModel, Field

from pokebattle.models import MAX_STAT, MIN_STAT


class PokemonTypeRead(BaseModel):
    id: str = Field(..., description="Primary key")
    name: str = Field(..., description="Type name, e.g. Fire")


class PokemonWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    power: int = Field(..., ge=MIN_STAT, le=MAX_STAT, description="Attack strength")
    life: int = Field(..., ge=MIN_STAT, le=MAX_STAT, description="Starting life")
    image: str | None = Field(None, description="Image URL")


class PokemonCreate(PokemonWrite):
    type_id: str = Field(..., min_length=1, description="Foreign key to the creature's type")


class PokemonUpdate(PokemonWrite):
    type_id: str | None = Field(None, description="New type; unchanged when omitted")


class PokemonRead(BaseModel):
    id: str
    name: str
    type: str = Field(..., description="Type name")
    type_name: str = Field(..., description="Type name (legacy alias of type)")
    image: str | None
    power: int
    life: int


class PokemonListResponse(BaseModel):
    pokemon: list[PokemonRead]
