"""Building, drawing from and reshuffling the piles of cards."""

import random

from src.core.exceptions import DeckExhaustedError
from src.core.shared_types import CardValue, Color
from src.uno.cards import WILD_VALUES, Card

STANDARD_DECK_SIZE = 108

# (value, copies per color) for the colored cards of one standard deck
COLORED_CARD_COUNTS: dict[CardValue, int] = {
    value: 1 if value == CardValue.ZERO else 2
    for value in CardValue
    if value not in WILD_VALUES
}
WILD_CARD_COUNT = 4


def standard_deck() -> list[Card]:
    """One unshuffled deck: 25 cards per color and 4 of each wild."""
    deck: list[Card] = []
    for color in Color:
        for value, copies in COLORED_CARD_COUNTS.items():
            deck.extend(Card(color, value) for _ in range(copies))
    for value in WILD_VALUES:
        deck.extend(Card(None, value) for _ in range(WILD_CARD_COUNT))
    return deck


def generate_shuffled_deck(
    multiplier: int, rng: random.Random | None = None
) -> list[Card]:
    """Combine `multiplier` standard decks and shuffle them."""
    rng = rng or random.Random()
    deck = [card for _ in range(multiplier) for card in standard_deck()]
    rng.shuffle(deck)
    return deck


def draw_top_card(draw_pile: list[Card]) -> Card:
    """The top of the pile is the end of the list."""
    if not draw_pile:
        raise DeckExhaustedError("The draw pile is empty.")
    return draw_pile.pop()


def reshuffle_discard_pile(
    draw_pile: list[Card], discard_pile: list[Card], rng: random.Random | None = None
) -> None:
    """
    Turn the discard pile over into the draw pile
    ----

    The top discard stays where it is, so the card to match does not change.
    Both lists are updated in place.
    """
    if len(discard_pile) < 2:
        raise DeckExhaustedError("No cards left to reshuffle into the draw pile.")

    rng = rng or random.Random()
    top_card = discard_pile[-1]
    draw_pile.extend(card.uncolored() for card in discard_pile[:-1])
    rng.shuffle(draw_pile)
    discard_pile[:] = [top_card]
