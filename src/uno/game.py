"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Uno -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Self
from uuid import UUID

from src.core.exceptions import (
    DeckExhaustedError,
    GameStateError,
    IllegalMoveError,
    InvalidPasswordError,
    InvalidPlayerError,
    NotYourTurnError,
)
from src.core.models import GameModel, PlayerData
from src.core.shared_types import CardValue, Status
from src.uno.cards import Card
from src.uno.deck import draw_top_card, generate_shuffled_deck, reshuffle_discard_pile

HAND_SIZE = 7

# How many cards the victim of a draw card has to take
DRAW_PENALTIES: dict[CardValue, int] = {
    CardValue.DRAW_TWO: 2,
    CardValue.WILD_DRAW_FOUR: 4,
}


def is_card_playable(card: Card, discard_pile: list[Card]) -> bool:
    """A card can go on the discard pile if it matches the top card's color or value, or if it is a wild."""
    if not discard_pile:
        return True
    top_card = discard_pile[-1]
    # a wild flipped over at the deal never got a color: anything goes
    if top_card.color is None:
        return True
    return (
        card.color == top_card.color
        or card.value == top_card.value
        or card.is_wild
    )


@dataclass
class Player:
    player_id: UUID
    name: str
    cards: list[Card] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: PlayerData) -> Self:
        return cls(
            player_id=UUID(data["player_id"]),
            name=data["name"],
            cards=[Card.from_data(card) for card in data["cards"]],
        )

    def to_data(self) -> PlayerData:
        return {
            "player_id": str(self.player_id),
            "name": self.name,
            "cards": [card.to_data() for card in self.cards],
        }

    def find_card(self, card: Card) -> Optional[int]:
        """Index of the first card in hand matching the requested card."""
        return next(
            (index for index, held in enumerate(self.cards) if held.matches(card)),
            None,
        )


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    name: str
    password: str
    host: UUID
    players: list[Player]
    current_player: int
    direction: bool  # True: ascending index order
    draw_pile: list[Card]
    discard_pile: list[Card]
    status: Status
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        return cls(
            name=model.name,
            password=model.password,
            host=UUID(model.host),
            players=[Player.from_data(player) for player in model.players],
            current_player=model.current_player,
            direction=model.direction,
            draw_pile=[Card.from_data(card) for card in model.draw_pile],
            discard_pile=[Card.from_data(card) for card in model.discard_pile],
            status=Status(model.status),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            name=self.name,
            password=self.password,
            host=str(self.host),
            players=[player.to_data() for player in self.players],
            current_player=self.current_player,
            direction=self.direction,
            draw_pile=[card.to_data() for card in self.draw_pile],
            discard_pile=[card.to_data() for card in self.discard_pile],
            status=self.status.value,
        )

    @classmethod
    def new_game(cls, host: Player, name: str, password: str = "") -> Self:
        """A new game starts out waiting for players, with the host as its first member."""
        return cls(
            name=name,
            password=password,
            host=host.player_id,
            players=[host],
            current_player=0,
            direction=True,
            draw_pile=[],
            discard_pile=[],
            status=Status.WAITING,
        )

    @property
    def winner(self) -> Optional[UUID]:
        """The first player to empty their hand. Only known once the game is finished."""
        if self.status != Status.FINISHED:
            return None
        return next(
            (player.player_id for player in self.players if not player.cards), None
        )

    @property
    def turn_player(self) -> Player:
        return self.players[self.current_player]

    def total_cards(self) -> int:
        """Cards in all hands and both piles. Never changes once the cards are dealt."""
        in_hands = sum(len(player.cards) for player in self.players)
        return in_hands + len(self.draw_pile) + len(self.discard_pile)

    def is_member(self, player_id: UUID) -> bool:
        return any(player.player_id == player_id for player in self.players)

    def assert_member(self, player_id: UUID) -> None:
        """Only members of a game may look at it or take part in it."""
        if not self.is_member(player_id):
            raise InvalidPlayerError(
                f"Player {player_id} is not a member of game {self.name!r}."
            )

    def register_player(self, player: Player, password: str = "") -> None:
        """Add a player to a game that has not started yet."""
        if self.status != Status.WAITING:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.status}"
            )

        if password != self.password:
            raise InvalidPasswordError(password)

        # joining twice is harmless
        if self.is_member(player.player_id):
            return

        self.players.append(player)

    def start(self, player_id: UUID) -> None:
        """Any member may start the game. Starting a game that is already running changes nothing."""
        self.assert_member(player_id)
        if self.status == Status.WAITING:
            self.deal_cards()

    def deal_cards(self) -> None:
        """
        Set up the table
        ----

        1. Build a deck that scales with the number of players
        2. Give every player a hand of seven cards
        3. Flip one card onto the discard pile
        4. Pick a random player to start
        """
        if not self.players:
            raise GameStateError("Cannot deal cards to a game without players.")

        self.draw_pile = generate_shuffled_deck(len(self.players), self.rng)
        self.discard_pile = []

        for player in self.players:
            player.cards = [draw_top_card(self.draw_pile) for _ in range(HAND_SIZE)]

        self.discard_pile.append(draw_top_card(self.draw_pile))

        self.current_player = self.rng.randrange(len(self.players))
        self.direction = True
        self._change_status(Status.PLAYING)

    def play_card(self, player_id: UUID, card: Card) -> None:
        """
        Attempt to play a card
        -----

        All checks happen before anything is changed, so a rejected card leaves the game untouched.

        1. put the card on the discard pile (a wild keeps the color the player picked)
        2. take the card out of the player's hand
        3. apply the effect of the card
        4. pass the turn on
        5. update game status (if the hand is now empty)
        """
        self._assert_in_progress()
        self.assert_member(player_id)
        self._assert_your_turn(player_id)

        player = self.turn_player
        hand_index = player.find_card(card)
        if hand_index is None:
            raise IllegalMoveError(f"Card not in your hand: {card}")

        if not is_card_playable(card, self.discard_pile):
            raise IllegalMoveError(
                f"Card {card} does not match the top of the discard pile: {self.discard_pile[-1]}"
            )

        if card.value in DRAW_PENALTIES:
            self._assert_cards_left_to_draw(DRAW_PENALTIES[card.value])

        self.discard_pile.append(card)
        del player.cards[hand_index]

        self._apply_card_effect(card)
        self.go_to_next_player()

        if not player.cards:
            self._change_status(Status.FINISHED)

    def draw_card(self, player_id: UUID) -> None:
        """Take the top card of the draw pile and pass the turn on."""
        self._assert_in_progress()
        self.assert_member(player_id)
        self._assert_your_turn(player_id)

        self._draw_cards(self.turn_player, 1)
        self.go_to_next_player()

    def go_to_next_player(self) -> None:
        """Step through the players in the current direction, wrapping around at either end."""
        step = 1 if self.direction else -1
        self.current_player = (self.current_player + step) % len(self.players)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.PLAYING:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player_id: UUID) -> None:
        """You must wait for your turn before playing or drawing a card."""
        turn_player = self.turn_player
        if player_id != turn_player.player_id:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {turn_player.name} to play first."
            )

    def _assert_cards_left_to_draw(self, count: int) -> None:
        """Everything on the discard pile except the card about to be played can be reshuffled into the draw pile."""
        available = len(self.draw_pile) + len(self.discard_pile)
        if count > available:
            raise DeckExhaustedError(
                f"Cannot draw {count} cards, only {available} left to draw."
            )

    def _apply_card_effect(self, card: Card) -> None:
        """
        Special cards
        ----

        NOTE the regular pass to the next player still follows after this.

        * Skip: the next player loses their turn
        * Draw two / wild draw four: the next player draws and loses their turn
        * Reverse: flip the direction of play
        """
        if card.value == CardValue.SKIP:
            self.go_to_next_player()

        if card.value in DRAW_PENALTIES:
            self.go_to_next_player()
            self._draw_cards(self.turn_player, DRAW_PENALTIES[card.value])

        if card.value == CardValue.REVERSE:
            self.direction = not self.direction

    def _draw_cards(self, player: Player, count: int) -> None:
        for _ in range(count):
            if not self.draw_pile:
                reshuffle_discard_pile(self.draw_pile, self.discard_pile, self.rng)
            player.cards.append(draw_top_card(self.draw_pile))

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
