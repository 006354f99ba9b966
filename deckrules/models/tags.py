from dataclasses import dataclass
from enum import Enum
from typing import Any


class TagCategory(str, Enum):
    """What aspect of a deck a tag describes."""

    STRATEGY = "strategy"
    SPEED = "speed"
    INTERACTION = "interaction"
    THEME = "theme"
    MECHANIC = "mechanic"


@dataclass(frozen=True, slots=True)
class DeckTag:
    """
    An automatically generated deck tag.

    Attributes:
        name: Display name (e.g., "Token Strategy", "Elf Tribal")
        category: Tag category
        confidence: How strongly the deck matches, in (0, 1]
    """

    name: str
    category: TagCategory
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "confidence": self.confidence,
        }
