from deckrules.parsers.card_records import (
    CardRecordError,
    build_card_lookup,
    derive_color_identity,
    load_card_lookup,
    parse_card_record,
)
from deckrules.parsers.deck_list import load_deck, parse_deck
from deckrules.parsers.mana_cost import classify_symbol, parse_mana_cost

__all__ = [
    "CardRecordError",
    "build_card_lookup",
    "classify_symbol",
    "derive_color_identity",
    "load_card_lookup",
    "load_deck",
    "parse_card_record",
    "parse_deck",
    "parse_mana_cost",
]
