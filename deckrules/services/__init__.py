"""
deckrules services.

Orchestration over the analysis engines.
"""

from deckrules.services.deck_analyzer import (
    DeckAnalysis,
    ResolvedDeck,
    analyze_deck,
    resolve_deck,
)

__all__ = [
    "DeckAnalysis",
    "ResolvedDeck",
    "analyze_deck",
    "resolve_deck",
]
