"""
A single Uno card

(placed in its own module as the deck and the game both need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from src.core.exceptions import InvalidRequestError
from src.core.models import CardData
from src.core.shared_types import CardValue, Color

WILD_VALUES = (CardValue.WILD, CardValue.WILD_DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    # A wild card has no color until it is played
    color: Optional[Color]
    value: CardValue

    @property
    def is_wild(self) -> bool:
        return self.value in WILD_VALUES

    def matches(self, other: Card) -> bool:
        """Is this the same card as one held in a hand? Wilds match on value alone, the color is chosen when played."""
        if self.value != other.value:
            return False
        return self.is_wild or self.color == other.color

    def uncolored(self) -> Card:
        """Wild cards that return to the draw pile forget the color they were played as."""
        return replace(self, color=None) if self.is_wild else self

    @classmethod
    def from_data(cls, data: CardData) -> Card:
        try:
            color = Color(data["color"]) if data.get("color") else None
            value = CardValue(data["value"])
        except (KeyError, ValueError) as e:
            raise InvalidRequestError(f"Cannot interpret {data!r} as a card.") from e
        return cls(color, value)

    def to_data(self) -> CardData:
        return {
            "color": self.color.value if self.color else None,
            "value": self.value.value,
        }

    def __str__(self) -> str:
        return f"{self.color or 'wild'} {self.value}"
