"""Custom exceptions. Every layer raises a subclass of GameError so callers can tell domain failures apart from bugs."""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game."""


class RepositoryError(GameError):
    """A record could not be found in (or written to) the repository."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action."""


class DeckExhaustedError(GameStateError):
    """Both the draw pile and the discard pile ran out of cards to draw."""


class InvalidRequestError(GameError):
    """Request data could not be interpreted."""


class NotYourTurnError(GameError):
    """A player attempted to act while it is someone else's turn."""


class IllegalMoveError(GameError):
    """The card cannot be played: not in hand or not matching the discard pile."""


class InvalidPlayerError(GameError):
    """The requesting player is not a member of the game."""


class AuthenticationError(GameError):
    """Missing, expired or otherwise invalid bearer token."""


class InvalidPasswordError(GameError):
    """Joining a game with a password that does not match."""

    def __init__(self, password: str, message: str = "Invalid password") -> None:
        super().__init__(f"{message}: {password}")
        self.password = password
