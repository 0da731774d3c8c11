"""Protocol repositories (implemented with SQLAlchemy and in memory)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel, PlayerModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace an existing record with the new state of the game."""
        ...


class PlayerRepository(Protocol):
    """Players are created at login and referenced by ID afterwards."""

    def get_player(self, player_id: UUID) -> PlayerModel | None:
        """Get player by ID, if record exists."""
        ...

    def create_player(self, player: PlayerModel) -> tuple[PlayerModel, UUID]:
        """Store new player and return the stored data + newly created player ID."""
        ...
