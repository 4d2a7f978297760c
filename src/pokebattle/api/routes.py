"""HTTP routes for the Pokébattle API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from pokebattle import __version__
from pokebattle.api.runtime import ApiState
from pokebattle.schemas import (
    BattleRequest,
    BattleResponse,
    PokemonCreate,
    PokemonListResponse,
    PokemonRead,
    PokemonTypeRead,
    PokemonUpdate,
    TeamDeletedResponse,
    TeamListResponse,
    TeamResponse,
    TeamWrite,
)
from pokebattle.services.errors import InvalidRequestError, NotFoundError
from pokebattle.services.pokemon_service import PokemonDraft

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    connected = state.database_healthy()
    return {
        "status": "ok" if connected else "degraded",
        "database": "connected" if connected else "unavailable",
        "version": __version__,
    }


@router.get("/types", response_model=list[PokemonTypeRead])
async def list_types(state: ApiStateDep) -> list[PokemonTypeRead]:
    return [PokemonTypeRead.model_validate(t) for t in state.roster.list_types()]


@router.get("/pokemon", response_model=PokemonListResponse)
async def list_pokemon(state: ApiStateDep) -> PokemonListResponse:
    return PokemonListResponse.model_validate({"pokemon": state.roster.list_pokemon()})


@router.post("/pokemon", response_model=PokemonRead, status_code=status.HTTP_201_CREATED)
async def create_pokemon(request: PokemonCreate, state: ApiStateDep) -> PokemonRead:
    draft = PokemonDraft(
        name=request.name,
        power=request.power,
        life=request.life,
        type_id=request.type_id,
        image=request.image,
    )
    try:
        pokemon = state.roster.create_pokemon(draft)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PokemonRead.model_validate(pokemon)


@router.get("/pokemon/{pokemon_id}", response_model=PokemonRead)
async def get_pokemon(pokemon_id: str, state: ApiStateDep) -> PokemonRead:
    try:
        pokemon = state.roster.get_pokemon(pokemon_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PokemonRead.model_validate(pokemon)


@router.put("/pokemon/{pokemon_id}", response_model=PokemonRead)
async def update_pokemon(
    pokemon_id: str, request: PokemonUpdate, state: ApiStateDep
) -> PokemonRead:
    draft = PokemonDraft(
        name=request.name,
        power=request.power,
        life=request.life,
        type_id=request.type_id,
        image=request.image,
    )
    try:
        pokemon = state.roster.update_pokemon(pokemon_id, draft)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PokemonRead.model_validate(pokemon)


@router.get("/teams", response_model=TeamListResponse)
async def list_teams(state: ApiStateDep) -> TeamListResponse:
    return TeamListResponse.model_validate({"teams": state.roster.list_teams()})


@router.post("/teams", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(request: TeamWrite, state: ApiStateDep) -> TeamResponse:
    try:
        team = state.roster.create_team(request.name, request.pokemon_ids)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return TeamResponse.model_validate({"team": team})


@router.put("/teams/{team_id}", response_model=TeamResponse)
async def update_team(team_id: str, request: TeamWrite, state: ApiStateDep) -> TeamResponse:
    try:
        team = state.roster.update_team(team_id, request.name, request.pokemon_ids)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return TeamResponse.model_validate({"team": team})


@router.delete("/teams/{team_id}", response_model=TeamDeletedResponse)
async def delete_team(team_id: str, state: ApiStateDep) -> TeamDeletedResponse:
    try:
        deleted_id = state.roster.delete_team(team_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return TeamDeletedResponse(message="Team deleted successfully", deleted_id=deleted_id)


@router.post("/battle", response_model=BattleResponse)
async def run_battle(request: BattleRequest, state: ApiStateDep) -> BattleResponse:
    try:
        battle = await state.battles.run(request.team1_id, request.team2_id)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return BattleResponse.model_validate({"battle": battle})
