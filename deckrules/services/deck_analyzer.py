"""
Deck analysis service.

Resolves a deck against a card-data snapshot and runs every engine over it:
tags, power level, color identity compatibility, per-card mana costs and
devotion. The engines are independent; they all read the same resolved
snapshot and none of them mutates it.

Deck entries whose card id is missing from the lookup are skipped by every
engine. The skipped ids are reported so callers can tell how much of the
deck was actually analyzed.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from deckrules.analysis.color_identity import check_deck_color_compatibility
from deckrules.analysis.deck_tagger import generate_deck_tags
from deckrules.analysis.devotion import devotion_by_color
from deckrules.analysis.power_level import score_power_level
from deckrules.config import Settings
from deckrules.models.card import CardRecord
from deckrules.models.compatibility import CompatibilityReport
from deckrules.models.deck import Deck, DeckEntry
from deckrules.models.mana import ManaCost
from deckrules.models.power import PowerReport
from deckrules.models.tags import DeckTag
from deckrules.parsers.mana_cost import parse_mana_cost

logger = logging.getLogger(__name__)

NONPERMANENT_TYPES: tuple[str, ...] = ("instant", "sorcery")


@dataclass
class ResolvedDeck:
    """
    A deck resolved against a card lookup.

    Attributes:
        cards: Mainboard cards, one element per copy (commander included)
        entries: Mainboard entries whose card was found
        commander: The commander's record, if set and found
        skipped: Card ids that were not found in the lookup
    """

    cards: list[CardRecord] = field(default_factory=list)
    entries: list[DeckEntry] = field(default_factory=list)
    commander: CardRecord | None = None
    skipped: list[str] = field(default_factory=list)


@dataclass
class DeckAnalysis:
    """
    Every engine's output for one deck snapshot.

    Attributes:
        tags: Deck tags, highest confidence first
        power: Power level report
        compatibility: Color identity report
        mana_costs: Card id -> parsed mana cost
        devotion: Color -> devotion across the deck's permanents
        cards_analyzed: Number of mainboard cards that were resolved
        skipped_entries: Card ids missing from the lookup
    """

    tags: list[DeckTag]
    power: PowerReport
    compatibility: CompatibilityReport
    mana_costs: dict[str, ManaCost] = field(default_factory=dict)
    devotion: dict[str, int] = field(default_factory=dict)
    cards_analyzed: int = 0
    skipped_entries: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "tags": [tag.to_dict() for tag in self.tags],
            "power": self.power.to_dict(),
            "compatibility": self.compatibility.to_dict(),
            "mana_costs": {
                card_id: {
                    "cost": str(cost),
                    "mana_value": cost.mana_value,
                    "color_identity": list(cost.color_identity),
                }
                for card_id, cost in self.mana_costs.items()
            },
            "devotion": dict(self.devotion),
            "cards_analyzed": self.cards_analyzed,
            "skipped_entries": list(self.skipped_entries),
        }


def resolve_deck(deck: Deck, card_data: Mapping[str, CardRecord]) -> ResolvedDeck:
    """
    Resolve a deck's mainboard against a card lookup.

    Args:
        deck: The deck to resolve
        card_data: Card id -> CardRecord snapshot

    Returns:
        ResolvedDeck with found cards, the commander and skipped ids
    """
    resolved = ResolvedDeck()

    for entry in deck.mainboard():
        card = card_data.get(entry.card_id)
        if card is None:
            resolved.skipped.append(entry.card_id)
            continue
        resolved.entries.append(entry)
        resolved.cards.extend([card] * entry.quantity)

    commander_entry = deck.commander_entry()
    if commander_entry is not None:
        resolved.commander = card_data.get(commander_entry.card_id)
        if resolved.commander is None and commander_entry.card_id not in resolved.skipped:
            resolved.skipped.append(commander_entry.card_id)

    if resolved.skipped:
        logger.warning(
            "Skipped %d deck entries missing from card data: %s",
            len(resolved.skipped),
            ", ".join(resolved.skipped),
        )

    return resolved


def analyze_deck(
    deck: Deck,
    card_data: Mapping[str, CardRecord],
    settings: Settings | None = None,
) -> DeckAnalysis:
    """
    Run every engine over a deck.

    Args:
        deck: The deck to analyze
        card_data: Card id -> CardRecord snapshot, treated as immutable
        settings: Tagger and format settings (defaults from the environment)

    Returns:
        DeckAnalysis combining tags, power, compatibility, mana costs and devotion
    """
    settings = settings or Settings()
    resolved = resolve_deck(deck, card_data)

    tags = generate_deck_tags(
        resolved.entries,
        card_data,
        confidence_floor=settings.tag_confidence_floor,
        max_tags=settings.max_deck_tags,
        tribal_threshold=settings.tribal_threshold,
    )

    power = score_power_level(
        resolved.cards,
        resolved.commander,
        format_name=deck.format,
        commander_format=settings.commander_format,
    )

    compatibility = check_deck_color_compatibility(
        resolved.cards,
        resolved.commander,
        format_name=deck.format,
        commander_format=settings.commander_format,
    )

    mana_costs = {card.id: parse_mana_cost(card.mana_cost) for card in resolved.cards}

    permanents = [
        card
        for card in resolved.cards
        if not any(card.has_type(card_type) for card_type in NONPERMANENT_TYPES)
    ]

    logger.info(
        "Analyzed deck %r: %d cards, %d tags, power %d (%s), %d identity violations",
        deck.name,
        len(resolved.cards),
        len(tags),
        power.overall,
        power.band.value,
        len(compatibility.violations),
    )

    return DeckAnalysis(
        tags=tags,
        power=power,
        compatibility=compatibility,
        mana_costs=mana_costs,
        devotion=devotion_by_color(permanents),
        cards_analyzed=len(resolved.cards),
        skipped_entries=resolved.skipped,
    )
