"""FastAPI dependencies: storage backend, services and the authenticated player"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Generator, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.config import Config
from src.core.exceptions import AuthenticationError
from src.db.repository import GameRepository, PlayerRepository
from src.db.sql_repository import SQLGameRepository, SQLPlayerRepository
from src.services.auth_service import AuthService
from src.services.uno_service import UnoService

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class Repositories:
    games: GameRepository
    players: PlayerRepository


def get_config(request: Request) -> type[Config]:
    return request.app.state.config


def get_repositories(request: Request) -> Generator[Repositories, None, None]:
    """
    One set of repositories per request.
    ----
    The in-memory backend lives on the app itself, the SQL backend opens a session from the app's session factory that is closed after the response.
    """
    state = request.app.state
    if state.config.STORAGE_BACKEND == "memory":
        yield Repositories(state.game_repository, state.player_repository)
        return

    db = state.session_factory()
    try:
        yield Repositories(SQLGameRepository(db), SQLPlayerRepository(db))
    finally:
        db.close()


def get_uno_service(
    repositories: Repositories = Depends(get_repositories),
) -> UnoService:
    return UnoService(repositories.games, repositories.players)


def get_auth_service(
    repositories: Repositories = Depends(get_repositories),
    config: type[Config] = Depends(get_config),
) -> AuthService:
    return AuthService(
        repositories.players,
        secret=config.JWT_SECRET,
        expiration=timedelta(hours=config.JWT_EXPIRATION_HOURS),
        algorithm=config.JWT_ALGORITHM,
    )


def get_current_player(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> UUID:
    """ID of the player making the request, taken from the bearer token."""
    if credentials is None:
        raise AuthenticationError("Missing bearer token.")
    return auth_service.authenticate(credentials.credentials)
