"""Translate domain exceptions into HTTP responses"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ApiResponse
from src.core.exceptions import (
    AuthenticationError,
    GameError,
    GameStateError,
    IllegalMoveError,
    InvalidPasswordError,
    InvalidPlayerError,
    InvalidRequestError,
    NotYourTurnError,
    RepositoryError,
)

logger = logging.getLogger(__name__)

# Most specific exception types first: the first isinstance match wins
ERROR_STATUS_CODES: list[tuple[type[GameError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (InvalidPasswordError, status.HTTP_400_BAD_REQUEST),
    (InvalidPlayerError, status.HTTP_403_FORBIDDEN),
    (RepositoryError, status.HTTP_404_NOT_FOUND),
    (NotYourTurnError, status.HTTP_409_CONFLICT),
    (GameStateError, status.HTTP_409_CONFLICT),
    (IllegalMoveError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidRequestError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]

ERROR_MESSAGES: dict[type[GameError], str] = {
    InvalidPasswordError: "Invalid password.",
    InvalidPlayerError: "You are not a member of this game.",
}


def status_code_for(exc: GameError) -> int:
    return next(
        (code for error_type, code in ERROR_STATUS_CODES if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    """
    Every GameError becomes {"error": message}. Anything else is left to the framework (500).
    ----
    NOTE a rejected token gets the empty envelope {"valid": false, "payload": null} instead.
    """
    status_code = status_code_for(exc)
    logger.warning(
        "%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc
    )

    if status_code == status.HTTP_401_UNAUTHORIZED:
        return JSONResponse(
            status_code=status_code,
            content=ApiResponse(valid=False).model_dump(),
            headers={"WWW-Authenticate": "Bearer"},
        )

    # don't echo a rejected password back to the client
    message = ERROR_MESSAGES.get(type(exc), str(exc))
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, game_error_handler)
