"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CardResponse,
    CreateGameRequest,
    GameResponse,
    JoinGameRequest,
    PlayCardRequest,
    PlayerResponse,
)
from src.core.exceptions import RepositoryError
from src.core.models import CardData, GameModel, PlayerModel
from src.core.shared_types import Status
from src.db.repository import GameRepository, PlayerRepository
from src.uno.cards import Card
from src.uno.game import Game, Player

logger = logging.getLogger(__name__)


class UnoService:
    """Orchestration of layers for an Uno game."""

    def __init__(
        self, repository: GameRepository, player_repository: PlayerRepository
    ) -> None:
        self.repo = repository
        self.players = player_repository

    # -- API routes logic ---
    def create_new_game(
        self, player_id: UUID, request: CreateGameRequest
    ) -> GameResponse:
        """A player creates a new game and becomes its host."""

        host = self._fetch_player(player_id)
        name = request.name or f"{host.name}'s Game"

        # Create the Game with the host already registered, and convert into GameModel
        new_game = Game.new_game(host=host, name=name, password=request.password)
        stored_game, game_id = self.repo.create_game(new_game.to_model())

        logger.info("Player %s created game %s (%r)", player_id, game_id, name)
        return self._create_game_response(game_id, stored_game)

    def join_game(
        self, game_id: UUID, player_id: UUID, request: JoinGameRequest
    ) -> GameResponse:
        """Another player requested to join a game."""

        player = self._fetch_player(player_id)
        game = Game.from_model(self._fetch_game(game_id))

        # Register the requested player
        game.register_player(player, request.password)

        with_player_registered = self._save(game_id, game)
        logger.info("Player %s joined game %s", player_id, game_id)
        return self._create_game_response(game_id, with_player_registered)

    def start_game(self, game_id: UUID, player_id: UUID) -> GameResponse:
        """A member starts the game: cards get dealt."""

        game = Game.from_model(self._fetch_game(game_id))
        was_waiting = game.status == Status.WAITING

        game.start(player_id)

        after_start = self._save(game_id, game)
        if was_waiting:
            logger.info(
                "Game %s started with %d players", game_id, len(game.players)
            )
        return self._create_game_response(game_id, after_start)

    def get_game_state(self, game_id: UUID, player_id: UUID) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(game_id)
        Game.from_model(game_model).assert_member(player_id)
        return self._create_game_response(game_id, game_model)

    def play_card(
        self, game_id: UUID, player_id: UUID, request: PlayCardRequest
    ) -> GameResponse:
        """Attempt to play a card from the player's hand."""

        game = Game.from_model(self._fetch_game(game_id))
        card = Card(color=request.color, value=request.value)

        game.play_card(player_id, card)

        after_play = self._save(game_id, game)
        logger.info("Player %s played %s in game %s", player_id, card, game_id)
        if game.status == Status.FINISHED:
            logger.info("Game %s finished, winner: %s", game_id, game.winner)
        return self._create_game_response(game_id, after_play)

    def draw_card(self, game_id: UUID, player_id: UUID) -> GameResponse:
        """The player takes a card from the draw pile instead of playing."""

        game = Game.from_model(self._fetch_game(game_id))

        game.draw_card(player_id)

        after_draw = self._save(game_id, game)
        logger.info("Player %s drew a card in game %s", player_id, game_id)
        return self._create_game_response(game_id, after_draw)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse(
            game_id=game_id,
            name=model.name,
            host=game.host,
            direction=model.direction,
            current_player=model.current_player,
            all_players=[
                PlayerResponse(
                    player_id=player["player_id"],
                    name=player["name"],
                    cards=self._card_responses(player["cards"]),
                )
                for player in model.players
            ],
            draw_pile=self._card_responses(model.draw_pile),
            discard_pile=self._card_responses(model.discard_pile),
            game_over=game.status == Status.FINISHED,
            winner=game.winner,
        )

    def _card_responses(self, cards: list[CardData]) -> list[CardResponse]:
        return [CardResponse.model_validate(card) for card in cards]

    def _save(self, game_id: UUID, game: Game) -> GameModel:
        """Persist the whole game state. Only called once the domain layer accepted the action."""
        stored = self.repo.update_game(game_id, game.to_model())
        if stored is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return stored

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    def _fetch_player(self, player_id: UUID) -> Player:
        """Look up a registered player, ready to sit down at a table."""
        player_model: PlayerModel | None = self.players.get_player(player_id)
        if player_model is None:
            raise RepositoryError(f"Player with {player_id=} not found.")
        return Player(player_id=player_id, name=player_model.name)
