"""Service-layer exceptions."""


class PokebattleError(Exception):
    """Base class for errors raised by the service layer."""


class InvalidRequestError(PokebattleError, ValueError):
    """Raised when a request is well-formed but cannot be honoured."""


class NotFoundError(PokebattleError, LookupError):
    """Raised when a referenced record does not exist."""
