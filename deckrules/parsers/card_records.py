"""
Card record loader.

Turns raw card dictionaries (Scryfall-shaped JSON) into validated
CardRecords, filling fields the raw data may omit:

- cmc: parsed from the mana cost when absent
- color_identity: derived from the mana cost, colors and oracle text when absent
- id: falls back to the card name when absent
"""

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from deckrules.models.card import CardRecord, normalize_colors
from deckrules.models.mana import COLORS
from deckrules.parsers.mana_cost import parse_mana_cost

logger = logging.getLogger(__name__)

# Brace-delimited symbols printed in rules text, e.g. "{T}: Add {G}."
ORACLE_SYMBOL_PATTERN = re.compile(r"\{[^{}]+\}")


class CardRecordError(Exception):
    """Raised when raw card data cannot be turned into a CardRecord."""

    def __init__(self, card_name: str, reason: str) -> None:
        self.card_name = card_name
        self.reason = reason
        super().__init__(f"Invalid card record '{card_name}': {reason}")


def derive_color_identity(
    mana_cost: str | None,
    oracle_text: str | None = None,
    colors: Iterable[str] | None = None,
) -> tuple[str, ...]:
    """
    Derive a color identity from a card's printed information.

    Identity is the union of the colors in the mana cost, the card's own
    colors, and every colored mana symbol printed in its rules text
    (e.g. a land reading "{T}: Add {R} or {G}.").

    Args:
        mana_cost: Cost string
        oracle_text: Rules text
        colors: The card's colors

    Returns:
        Color identity in WUBRG order
    """
    present = set(parse_mana_cost(mana_cost).color_identity)
    present.update(normalize_colors(colors))

    for symbol in ORACLE_SYMBOL_PATTERN.findall(oracle_text or ""):
        present.update(parse_mana_cost(symbol).color_identity)

    return tuple(color for color in COLORS if color in present)


def _front_face(data: dict[str, Any]) -> dict[str, Any]:
    """Fill missing top-level fields from card faces (MDFCs, split cards)."""
    faces = data.get("card_faces") or []
    if not faces:
        return data

    merged = dict(data)
    front = faces[0]
    for key in ("mana_cost", "type_line", "colors"):
        if merged.get(key) in (None, "") and front.get(key) is not None:
            merged[key] = front[key]

    if merged.get("oracle_text") in (None, ""):
        merged["oracle_text"] = "\n".join(face.get("oracle_text", "") for face in faces)
    return merged


def parse_card_record(data: dict[str, Any]) -> CardRecord:
    """
    Build a CardRecord from raw card data.

    Args:
        data: Raw card dictionary

    Returns:
        Validated CardRecord

    Raises:
        CardRecordError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise CardRecordError("<unnamed>", f"expected an object, got {type(data).__name__}")

    raw = _front_face(data)
    name = str(raw.get("name") or "")

    fields = dict(raw)
    fields.setdefault("id", name)
    fields.setdefault("price", raw.get("prices"))

    if fields.get("cmc") is None:
        fields["cmc"] = parse_mana_cost(raw.get("mana_cost")).mana_value

    if fields.get("color_identity") is None:
        fields["color_identity"] = derive_color_identity(
            raw.get("mana_cost"),
            raw.get("oracle_text"),
            raw.get("colors"),
        )

    try:
        return CardRecord.model_validate(fields)
    except (ValidationError, TypeError) as e:
        raise CardRecordError(name or "<unnamed>", str(e)) from e


def build_card_lookup(
    records: Iterable[dict[str, Any]],
    key: str = "id",
) -> dict[str, CardRecord]:
    """
    Build a card-id -> CardRecord lookup.

    Invalid records are logged and left out of the lookup; deck entries that
    reference them are later reported as skipped.

    Args:
        records: Raw card dictionaries
        key: CardRecord attribute to key the lookup by ("id" or "name")

    Returns:
        Dict mapping keys to CardRecords. Later duplicates overwrite earlier ones.
    """
    lookup: dict[str, CardRecord] = {}

    for data in records:
        try:
            card = parse_card_record(data)
        except CardRecordError as e:
            logger.warning("Skipping card record: %s", e)
            continue
        lookup[getattr(card, key)] = card

    return lookup


def load_card_lookup(path: Path, key: str = "id") -> dict[str, CardRecord]:
    """
    Load a card lookup from a JSON file holding an array of card objects.

    Args:
        path: Path to the JSON file
        key: CardRecord attribute to key the lookup by

    Returns:
        Dict mapping keys to CardRecords

    Raises:
        ValueError: If the file is not JSON or does not hold an array
    """
    with open(path, encoding="utf-8") as f:
        cards = json.load(f)

    if not isinstance(cards, list):
        raise ValueError(f"{path}: expected a JSON array of card objects")

    return build_card_lookup(cards, key=key)
