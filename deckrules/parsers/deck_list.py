"""
Deck list loader.

Builds a Deck from a JSON-style dictionary:

    {
        "name": "Atraxa Superfriends",
        "format": "commander",
        "commander": "atraxa",
        "cards": [
            {"card_id": "atraxa", "quantity": 1, "is_commander": true},
            {"card_id": "sol-ring", "quantity": 1},
            {"card_id": "forest", "quantity": 10}
        ]
    }

"commander" is optional; so is every entry field except "card_id".
"""

import json
from pathlib import Path
from typing import Any

from deckrules.models.deck import Deck, DeckEntry


def _parse_entry(item: Any) -> DeckEntry:
    if not isinstance(item, dict):
        raise ValueError(f"Deck entry must be an object, got {type(item).__name__}")

    quantity = item.get("quantity", 1)
    try:
        quantity = int(quantity)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid quantity {quantity!r} for '{item.get('card_id')}'") from None

    return DeckEntry(
        card_id=str(item["card_id"]),
        quantity=quantity,
        is_commander=bool(item.get("is_commander", False)),
        is_sideboard=bool(item.get("is_sideboard", False)),
    )


def parse_deck(data: dict[str, Any]) -> Deck:
    """
    Build a Deck from a dictionary.

    Raises:
        InvalidDeckEntryError: If an entry has a quantity below 1
        KeyError: If an entry has no card_id
        ValueError: If the deck, its card list or an entry has the wrong shape,
            or a quantity is not a whole number
    """
    if not isinstance(data, dict):
        raise ValueError(f"Deck must be an object, got {type(data).__name__}")

    cards = data.get("cards", [])
    if not isinstance(cards, list):
        raise ValueError("Deck 'cards' must be an array")

    entries = [_parse_entry(item) for item in cards]

    commander = data.get("commander")

    return Deck(
        entries=entries,
        format=str(data.get("format", "commander")).lower(),
        commander_id=str(commander) if commander else None,
        name=str(data.get("name", "")),
    )


def load_deck(path: Path) -> Deck:
    """Load a Deck from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return parse_deck(json.load(f))
