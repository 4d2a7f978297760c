"""Creature and type catalog service for Pokébattle."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from pokebattle.models import MAX_STAT, MIN_STAT, Pokemon, PokemonType
from pokebattle.repository.sql_store import PokemonRepository, TypeRepository
from pokebattle.services.errors import InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "Unknown"


@dataclass(slots=True)
class PokemonDraft:
    """API-facing initializer for new or edited creatures."""

    name: str
    power: int
    life: int
    type_id: str | None = None
    image: str | None = None


class PokemonService:
    """Create, edit and list creatures."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._pokemon = PokemonRepository(session)
        self._types = TypeRepository(session)

    def list_types(self) -> list[PokemonType]:
        return self._types.list_types()

    def list_pokemon(self) -> list[Pokemon]:
        return self._pokemon.list_with_types()

    def get_pokemon(self, pokemon_id: str) -> Pokemon:
        pokemon = self._pokemon.get(pokemon_id)
        if pokemon is None:
            raise NotFoundError("Pokemon not found")
        return pokemon

    def create_pokemon(self, draft: PokemonDraft) -> Pokemon:
        name = self._validate(draft)
        if not draft.type_id:
            raise InvalidRequestError("Pokemon type must be selected")
        type_ = self._require_type(draft.type_id)

        pokemon = Pokemon(
            name=name,
            type_id=type_.id,
            power=draft.power,
            life=draft.life,
            image=draft.image or None,
        )
        pokemon.type = type_
        self._pokemon.add(pokemon)
        logger.info("created pokemon %s (%s)", pokemon.id, pokemon.name)
        return pokemon

    def update_pokemon(self, pokemon_id: str, draft: PokemonDraft) -> Pokemon:
        """Apply ``draft`` to an existing creature.

        The type only changes when the draft names one; the image is always
        replaced, so an empty value clears it.
        """

        name = self._validate(draft)
        type_ = self._require_type(draft.type_id) if draft.type_id else None
        pokemon = self.get_pokemon(pokemon_id)

        pokemon.name = name
        pokemon.power = draft.power
        pokemon.life = draft.life
        pokemon.image = draft.image or None
        if type_ is not None:
            pokemon.type_id = type_.id
            pokemon.type = type_
        self.session.flush()
        return pokemon

    def _require_type(self, type_id: str) -> PokemonType:
        type_ = self._types.get(type_id)
        if type_ is None:
            raise InvalidRequestError("Invalid type ID provided")
        return type_

    @staticmethod
    def _validate(draft: PokemonDraft) -> str:
        name = (draft.name or "").strip()
        if not name:
            raise InvalidRequestError("Pokemon name is required and cannot be empty")
        if not (MIN_STAT <= draft.power <= MAX_STAT and MIN_STAT <= draft.life <= MAX_STAT):
            raise InvalidRequestError(f"Power and life must be between {MIN_STAT} and {MAX_STAT}")
        return name

    @staticmethod
    def to_type_dict(type_: PokemonType) -> dict[str, object]:
        return {"id": type_.id, "name": type_.name}

    @staticmethod
    def to_pokemon_dict(pokemon: Pokemon) -> dict[str, object]:
        """Return the JSON-friendly shape shared by every creature listing."""

        type_name = pokemon.type.name if pokemon.type is not None else UNKNOWN_TYPE
        return {
            "id": pokemon.id,
            "name": pokemon.name,
            "type": type_name,
            "type_name": type_name,
            "image": pokemon.image,
            "power": pokemon.power,
            "life": pokemon.life,
        }
