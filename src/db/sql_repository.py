"""Implementation of the repositories using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel, PlayerModel
from src.db.schema import DBGame, DBPlayer


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(id=new_id)
        self._copy_into(game, game_db)
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace an existing record with the new state of the game (last write wins)."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        self._copy_into(game, game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _copy_into(self, game: GameModel, game_db: DBGame) -> None:
        """JSON columns only notice a change when they get assigned a new object, so copy the lists."""
        game_db.name = game.name
        game_db.password = game.password
        game_db.host = game.host
        game_db.players = [dict(player) for player in game.players]
        game_db.current_player = game.current_player
        game_db.direction = game.direction
        game_db.draw_pile = list(game.draw_pile)
        game_db.discard_pile = list(game.discard_pile)
        game_db.status = game.status

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            name=game_db.name,
            password=game_db.password,
            host=game_db.host,
            players=game_db.players,
            current_player=game_db.current_player,
            direction=game_db.direction,
            draw_pile=game_db.draw_pile,
            discard_pile=game_db.discard_pile,
            status=game_db.status,
        )


class SQLPlayerRepository:
    """Player records stored using SQL"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_player(self, player_id: UUID) -> PlayerModel | None:
        """Get player by ID, if record exists."""
        player_db = self.db.scalar(select(DBPlayer).where(DBPlayer.id == player_id))
        if player_db:
            return PlayerModel(name=player_db.name)
        return None

    def create_player(self, player: PlayerModel) -> tuple[PlayerModel, UUID]:
        """Store new player and return the stored data + newly created player ID."""
        new_id = uuid4()
        player_db = DBPlayer(id=new_id, name=player.name)
        self.db.add(player_db)
        self.db.commit()
        self.db.refresh(player_db)
        return PlayerModel(name=player_db.name), new_id
