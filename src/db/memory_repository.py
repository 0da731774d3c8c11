"""Implementation of the repositories keeping everything in process memory (no database needed)"""

from copy import deepcopy
from uuid import UUID, uuid4

from src.core.models import GameModel, PlayerModel


class InMemoryGameRepository:
    """Games stored in a dictionary keyed by game ID."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game = self._games.get(game_id)
        # hand out copies, so a caller mutating its game does not change the stored record
        return deepcopy(game) if game else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = deepcopy(game)
        return deepcopy(game), game_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace an existing record with the new state of the game (last write wins)."""
        if game_id not in self._games:
            return None
        self._games[game_id] = deepcopy(game)
        return deepcopy(game)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


class InMemoryPlayerRepository:
    """Players stored in a dictionary keyed by player ID."""

    def __init__(self) -> None:
        self._players: dict[UUID, PlayerModel] = {}

    def get_player(self, player_id: UUID) -> PlayerModel | None:
        return self._players.get(player_id)

    def create_player(self, player: PlayerModel) -> tuple[PlayerModel, UUID]:
        player_id = uuid4()
        self._players[player_id] = player
        return player, player_id

    def clear(self) -> None:
        self._players.clear()
