from deckrules.models.card import VALID_RARITIES, CardRecord, normalize_colors
from deckrules.models.compatibility import ColorViolation, CompatibilityReport
from deckrules.models.deck import Deck, DeckEntry, InvalidDeckEntryError
from deckrules.models.mana import COLORS, ManaCost, ManaSymbol, SymbolKind
from deckrules.models.power import PowerBand, PowerReport, RoleCounts
from deckrules.models.tags import DeckTag, TagCategory

__all__ = [
    "COLORS",
    "CardRecord",
    "ColorViolation",
    "CompatibilityReport",
    "Deck",
    "DeckEntry",
    "DeckTag",
    "InvalidDeckEntryError",
    "ManaCost",
    "ManaSymbol",
    "PowerBand",
    "PowerReport",
    "RoleCounts",
    "SymbolKind",
    "TagCategory",
    "VALID_RARITIES",
    "normalize_colors",
]
