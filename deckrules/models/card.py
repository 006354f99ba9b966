"""
Card record model.

CardRecord is the read-only card shape every engine consumes. Raw card data
(typically Scryfall JSON) has optional and loosely typed fields; this model
makes the defaulting rules explicit:

- missing text fields become ""
- missing keyword, tag and color lists become empty tuples
- color letters are upper-cased and stored in WUBRG order
- missing or unparseable prices become 0.0
- unknown rarities become "common"
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from deckrules.models.mana import COLORS

VALID_RARITIES = frozenset({"common", "uncommon", "rare", "mythic", "special", "bonus"})


def normalize_colors(value: Any) -> tuple[str, ...]:
    """Normalize a color list or string into a WUBRG-ordered tuple."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = list(value)

    present = {str(color).strip().upper() for color in value}
    return tuple(color for color in COLORS if color in present)


class CardRecord(BaseModel):
    """
    A single card's oracle data.

    Attributes:
        id: Stable identifier used by deck entries to reference the card
        name: Card name
        type_line: Full type line (e.g., "Legendary Creature — Elf Druid")
        oracle_text: Rules text
        mana_cost: Cost string (e.g., "{1}{G}{G}")
        cmc: Mana value as stored on the record
        colors: The card's colors
        color_identity: Colors for deck-construction legality
        keywords: Keyword abilities (e.g., "Flying")
        tags: Functional role tags (e.g., "ramp", "removal-spot")
        rarity: common, uncommon, rare, mythic, special or bonus
        price: Price in USD
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type_line: str = ""
    oracle_text: str = ""
    mana_cost: str = ""
    cmc: float = Field(default=0.0, ge=0)
    colors: tuple[str, ...] = ()
    color_identity: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    tags: frozenset[str] = frozenset()
    rarity: str = "common"
    price: float = 0.0

    @field_validator("type_line", "oracle_text", "mana_cost", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("cmc", mode="before")
    @classmethod
    def _default_cmc(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("colors", "color_identity", mode="before")
    @classmethod
    def _normalize_colors(cls, value: Any) -> tuple[str, ...]:
        return normalize_colors(value)

    @field_validator("keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value: Any) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(str(keyword) for keyword in value)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> frozenset[str]:
        if not value:
            return frozenset()
        return frozenset(str(tag).lower() for tag in value)

    @field_validator("rarity", mode="before")
    @classmethod
    def _normalize_rarity(cls, value: Any) -> str:
        rarity = str(value).lower() if value else "common"
        return rarity if rarity in VALID_RARITIES else "common"

    @field_validator("price", mode="before")
    @classmethod
    def _normalize_price(cls, value: Any) -> float:
        # Scryfall nests prices: {"usd": "1.23", "usd_foil": ...}
        if isinstance(value, dict):
            value = value.get("usd")
        if value is None:
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    @property
    def is_land(self) -> bool:
        return self.has_type("land")

    @property
    def is_creature(self) -> bool:
        return self.has_type("creature")

    def has_type(self, word: str) -> bool:
        """Case-insensitive substring check against the type line."""
        return word.lower() in self.type_line.lower()
