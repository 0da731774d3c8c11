"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Any, Optional

# Type aliases to make GameModel easier to read
CardData = dict[str, Optional[str]]
PlayerData = dict[str, Any]


@dataclass
class GameModel:
    """Transport-safe representation of an Uno game used between API, Service, DB, and Game layers."""

    name: str
    password: str
    host: str
    players: list[PlayerData]
    current_player: int
    direction: bool
    draw_pile: list[CardData]
    discard_pile: list[CardData]
    status: str


@dataclass
class PlayerModel:
    """A registered player, independent of any game."""

    name: str
