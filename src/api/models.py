"""Requests and Response models"""

from typing import Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import CardValue, Color


def _require_text(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise InvalidRequestError(f"{field_name} cannot be empty.")
    return value


# --- REQUEST MODELS ---
class LoginRequest(BaseModel):
    username: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _require_text(value, "username")


class CreateGameRequest(BaseModel):
    password: str = ""
    name: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _require_text(value, "name")


class JoinGameRequest(BaseModel):
    password: str = ""


class PlayCardRequest(BaseModel):
    """For a wild card, the color is the one the player picks for the next player to match."""

    value: CardValue
    color: Color


# --- RESPONSE MODELS ---
PayloadT = TypeVar("PayloadT")


class ApiResponse(BaseModel, Generic[PayloadT]):
    """Envelope around every successful response. `valid` is false (and there is no payload) when the token got rejected."""

    valid: bool = True
    payload: Optional[PayloadT] = None


class LoginResponse(BaseModel):
    token: str


class CardResponse(BaseModel):
    color: Optional[Color]
    value: CardValue


class PlayerResponse(BaseModel):
    player_id: UUID
    name: str
    cards: list[CardResponse]


class GameResponse(BaseModel):
    game_id: UUID
    name: str
    host: UUID
    direction: bool
    current_player: int
    all_players: list[PlayerResponse]
    draw_pile: list[CardResponse]
    discard_pile: list[CardResponse]
    game_over: bool
    winner: Optional[UUID] = None


class ErrorResponse(BaseModel):
    error: str
