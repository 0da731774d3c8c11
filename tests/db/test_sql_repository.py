"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.sql_repository import (
    GameModel,
    PlayerModel,
    SQLGameRepository,
    SQLPlayerRepository,
)

HOST_ID = str(uuid4())
GUEST_ID = str(uuid4())


def waiting_model() -> GameModel:
    return GameModel(
        name="Mock's Game",
        password="",
        host=HOST_ID,
        players=[{"player_id": HOST_ID, "name": "Mock", "cards": []}],
        current_player=0,
        direction=True,
        draw_pile=[],
        discard_pile=[],
        status=Status.WAITING,
    )


def playing_model() -> GameModel:
    return GameModel(
        name="Mock's Game",
        password="secret",
        host=HOST_ID,
        players=[
            {
                "player_id": HOST_ID,
                "name": "Mock",
                "cards": [{"color": "red", "value": "5"}, {"color": None, "value": "W4"}],
            },
            {
                "player_id": GUEST_ID,
                "name": "McMock",
                "cards": [{"color": "blue", "value": "S"}],
            },
        ],
        current_player=1,
        direction=False,
        draw_pile=[{"color": "green", "value": "D2"}, {"color": None, "value": "W"}],
        discard_pile=[{"color": "yellow", "value": "0"}],
        status=Status.PLAYING,
    )


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = playing_model()

    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(playing_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(waiting_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """Replace an earlier created record with the game after it got started."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(waiting_model())

    after = playing_model()
    updated_game = repo.update_game(game_id, after)
    assert updated_game is not None
    assert updated_game == after
    assert repo.get_game(game_id) == after


def test_consecutive_game_updates(db_session_repo: Session) -> None:
    """Tests that we can successfully make multiple updates to the same game (whole record gets replaced each time)."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(waiting_model())

    first_update = playing_model()
    second_update = playing_model()
    second_update.current_player = 0
    second_update.discard_pile = second_update.discard_pile + [
        {"color": "yellow", "value": "R"}
    ]
    third_update = playing_model()
    third_update.players[1]["cards"] = []
    third_update.status = Status.FINISHED

    repo.update_game(game_id, first_update)
    repo.update_game(game_id, second_update)
    repo.update_game(game_id, third_update)

    after_all_updates = repo.get_game(game_id)
    assert after_all_updates is not None
    assert after_all_updates == third_update


def test_attempt_updating_unknown_game(db_session_repo: Session) -> None:
    """the update_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), playing_model()) is None


def test_create_and_get_player(db_session_repo: Session) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    created, player_id = repo.create_player(PlayerModel(name="Mocker M. Mockerson"))

    assert created == PlayerModel(name="Mocker M. Mockerson")
    assert repo.get_player(player_id) == created


def test_get_unknown_player(db_session_repo: Session) -> None:
    repo = SQLPlayerRepository(db_session_repo)
    repo.create_player(PlayerModel(name="someone"))
    assert repo.get_player(uuid4()) is None
