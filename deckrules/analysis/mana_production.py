"""
Mana production analysis.

Infers which colors a land (or other permanent) can add from its type line
and oracle text. This is phrase matching, not rules parsing: unusual
templating can be under- or over-reported. Use the result for advisory
mana-base analysis only, never for legality decisions.
"""

from deckrules.models.card import CardRecord
from deckrules.models.mana import COLORS

# Basic land type -> color it taps for
BASIC_LAND_TYPES: dict[str, str] = {
    "plains": "W",
    "island": "U",
    "swamp": "B",
    "mountain": "R",
    "forest": "G",
}

COLORLESS_PHRASES: tuple[str, ...] = ("add {c}", "add one mana of any type")

ANY_COLOR_PHRASES: tuple[str, ...] = ("any color", "add one mana of any color")


def analyze_mana_production(oracle_text: str | None, type_line: str | None) -> frozenset[str]:
    """
    Infer the mana a permanent can produce.

    Args:
        oracle_text: Rules text
        type_line: Type line (basic land types are recognized)

    Returns:
        Set of color letters W/U/B/R/G, plus "C" for colorless mana
    """
    text = (oracle_text or "").lower()
    types = (type_line or "").lower()
    produced: set[str] = set()

    for land_type, color in BASIC_LAND_TYPES.items():
        if land_type in types or f"add {{{color.lower()}}}" in text:
            produced.add(color)

    if any(phrase in text for phrase in COLORLESS_PHRASES):
        produced.add("C")

    if any(phrase in text for phrase in ANY_COLOR_PHRASES):
        produced.update(COLORS)

    return frozenset(produced)


def can_produce_color(card: CardRecord, color: str) -> bool:
    """Check whether a card can (heuristically) add mana of a color."""
    return color.upper() in analyze_mana_production(card.oracle_text, card.type_line)
