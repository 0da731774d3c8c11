"""
Authentication service

Players log in with nothing but a username. The returned JWT identifies the player on every later request.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from src.api.models import LoginRequest, LoginResponse
from src.core.exceptions import AuthenticationError
from src.core.models import PlayerModel
from src.db.repository import PlayerRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Issue and verify bearer tokens for players."""

    def __init__(
        self,
        repository: PlayerRepository,
        secret: str,
        expiration: timedelta,
        algorithm: str = "HS256",
    ) -> None:
        self.repo = repository
        self.secret = secret
        self.expiration = expiration
        self.algorithm = algorithm

    def login(self, request: LoginRequest) -> LoginResponse:
        """Every login registers a new player record."""
        player, player_id = self.repo.create_player(PlayerModel(name=request.username))
        logger.info("Player %s logged in as %r", player_id, player.name)
        return LoginResponse(token=self.create_token(player_id, player.name))

    def create_token(self, player_id: UUID, name: str) -> str:
        payload = {
            "sub": str(player_id),
            "name": name,
            "exp": datetime.now(timezone.utc) + self.expiration,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def authenticate(self, token: str) -> UUID:
        """Decode the token and make sure the player it refers to still exists."""
        if not token:
            raise AuthenticationError("Token is required.")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired.") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("Invalid token.") from e

        try:
            player_id = UUID(str(payload.get("sub", "")))
        except ValueError as e:
            raise AuthenticationError("Invalid token payload.") from e

        if self.repo.get_player(player_id) is None:
            raise AuthenticationError(f"Unknown player {player_id}.")
        return player_id
