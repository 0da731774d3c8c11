"""HTTP endpoints. Each one hands the request to a service and returns its response, wrapped in an ApiResponse, as JSON."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_auth_service, get_current_player, get_uno_service
from src.api.models import (
    ApiResponse,
    CreateGameRequest,
    ErrorResponse,
    GameResponse,
    JoinGameRequest,
    LoginRequest,
    LoginResponse,
    PlayCardRequest,
)
from src.services.auth_service import AuthService
from src.services.uno_service import UnoService

router = APIRouter(
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ApiResponse[None]},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    }
)


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(
    request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)
) -> ApiResponse[LoginResponse]:
    return ApiResponse[LoginResponse](payload=auth_service.login(request))


@router.post(
    "/games",
    response_model=ApiResponse[GameResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_game(
    response: Response,
    request: CreateGameRequest | None = None,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    # the body is optional altogether: no password, default name
    game = service.create_new_game(player_id, request or CreateGameRequest())
    response.headers["Location"] = f"/games/{game.game_id}"
    return ApiResponse[GameResponse](payload=game)


@router.get("/games/{game_id}", response_model=ApiResponse[GameResponse])
def get_game(
    game_id: UUID,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    return ApiResponse[GameResponse](payload=service.get_game_state(game_id, player_id))


@router.post("/games/{game_id}/start", response_model=ApiResponse[GameResponse])
def start_game(
    game_id: UUID,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    return ApiResponse[GameResponse](payload=service.start_game(game_id, player_id))


@router.post(
    "/games/{game_id}/join",
    response_model=ApiResponse[GameResponse],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def join_game(
    game_id: UUID,
    request: JoinGameRequest | None = None,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    game = service.join_game(game_id, player_id, request or JoinGameRequest())
    return ApiResponse[GameResponse](payload=game)


@router.post("/games/{game_id}/play", response_model=ApiResponse[GameResponse])
def play_card(
    game_id: UUID,
    request: PlayCardRequest,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    game = service.play_card(game_id, player_id, request)
    return ApiResponse[GameResponse](payload=game)


@router.post("/games/{game_id}/draw", response_model=ApiResponse[GameResponse])
def draw_card(
    game_id: UUID,
    player_id: UUID = Depends(get_current_player),
    service: UnoService = Depends(get_uno_service),
) -> ApiResponse[GameResponse]:
    return ApiResponse[GameResponse](payload=service.draw_card(game_id, player_id))
