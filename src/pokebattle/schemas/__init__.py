from .battle import BattleLogRead, BattleRequest, BattleResponse, RoundRead, TeamSummaryRead
from .pokemon import (
    PokemonCreate,
    PokemonListResponse,
    PokemonRead,
    PokemonTypeRead,
    PokemonUpdate,
)
from .team import TeamDeletedResponse, TeamListResponse, TeamRead, TeamResponse, TeamWrite

__all__ = [
    "BattleLogRead",
    "BattleRequest",
    "BattleResponse",
    "PokemonCreate",
    "PokemonListResponse",
    "PokemonRead",
    "PokemonTypeRead",
    "PokemonUpdate",
    "RoundRead",
    "TeamDeletedResponse",
    "TeamListResponse",
    "TeamRead",
    "TeamResponse",
    "TeamSummaryRead",
    "TeamWrite",
]
