import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, LoginRequest, PlayCardRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import CardValue, Color


# -- Validation - LoginRequest --
def test_username_is_stripped() -> None:
    request = LoginRequest(username="  don't hate the player, hate the name.  ")
    assert request.username == "don't hate the player, hate the name."


@pytest.mark.parametrize("username", ["", "   "])
def test_blank_username(username: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = LoginRequest(username=username)


# -- Validation - CreateGameRequest --
def test_create_game_fields_are_optional() -> None:
    request = CreateGameRequest()
    assert request.name is None
    assert request.password == ""


def test_blank_game_name() -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(name="  ")


# -- Validation - PlayCardRequest --
def test_play_card_request_from_json_values() -> None:
    request = PlayCardRequest.model_validate({"value": "W4", "color": "green"})
    assert request.value == CardValue.WILD_DRAW_FOUR
    assert request.color == Color.GREEN


@pytest.mark.parametrize(
    "body",
    [
        {"value": "11", "color": "red"},  # not a card value
        {"value": "5", "color": "black"},  # not a color
        {"value": "5"},  # color is always needed
    ],
)
def test_invalid_play_card_request(body: dict) -> None:
    with pytest.raises(ValidationError):
        _ = PlayCardRequest.model_validate(body)
