"""
Automatic deck tagging.

Analyzes deck composition to generate descriptive tags. The pipeline is a
series of pure passes over the deck:

1. count cards by type
2. collect keywords (printed keywords plus phrases found in oracle text)
3. detect tribal themes from creature-type frequency
4. run five independent generators (strategy, speed, interaction, theme,
   mechanic), each emitting tags with a fixed confidence
5. drop low-confidence tags, sort by confidence, keep the top few

Entries whose card id is missing from the card lookup are skipped in every
stage.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence

from deckrules.config import MAX_DECK_TAGS, TAG_CONFIDENCE_FLOOR, TRIBAL_THRESHOLD
from deckrules.models.card import CardRecord
from deckrules.models.deck import DeckEntry
from deckrules.models.tags import DeckTag, TagCategory

logger = logging.getLogger(__name__)

CARD_TYPES: tuple[str, ...] = (
    "creature",
    "instant",
    "sorcery",
    "artifact",
    "enchantment",
    "planeswalker",
    "land",
)

# Oracle text phrases -> keyword they imply
TEXT_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("draw",), "card-draw"),
    (("counter target",), "counterspell"),
    (("destroy",), "removal"),
    (("exile",), "exile"),
    (("sacrifice",), "sacrifice"),
    (("token",), "tokens"),
    (("graveyard",), "graveyard"),
    (("search your library",), "tutor"),
    (("extra turn",), "extra-turns"),
    (("copy",), "copy"),
    (("ramp", "search for a land"), "ramp"),
)

TRIBES: tuple[str, ...] = (
    "elf",
    "goblin",
    "zombie",
    "dragon",
    "vampire",
    "wizard",
    "merfolk",
    "angel",
    "demon",
    "spirit",
)

# Keyword -> mechanic tag name
MECHANIC_TAGS: dict[str, str] = {
    "flying": "Flying",
    "haste": "Haste",
    "trample": "Trample",
    "lifelink": "Lifelink",
    "deathtouch": "Deathtouch",
    "card-draw": "Card Draw",
    "ramp": "Ramp",
    "tutor": "Tutors",
    "extra-turns": "Extra Turns",
    "copy": "Copy Effects",
}

# Average mana value of non-land cards when a deck has none
DEFAULT_AVERAGE_MANA_VALUE = 3.0


def _resolved(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
) -> Iterator[tuple[DeckEntry, CardRecord]]:
    for entry in entries:
        card = card_data.get(entry.card_id)
        if card is not None:
            yield entry, card


def count_card_types(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
) -> dict[str, int]:
    """
    Count cards of each type, by quantity.

    A card counts once for every type in its type line ("Artifact Creature"
    counts as both).
    """
    counts = dict.fromkeys(CARD_TYPES, 0)

    for entry, card in _resolved(entries, card_data):
        type_line = card.type_line.lower()
        for card_type in CARD_TYPES:
            if card_type in type_line:
                counts[card_type] += entry.quantity

    return counts


def extract_keywords(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
) -> set[str]:
    """Collect printed keywords and keywords implied by oracle text phrases."""
    keywords: set[str] = set()

    for _, card in _resolved(entries, card_data):
        keywords.update(keyword.lower() for keyword in card.keywords)

        text = card.oracle_text.lower()
        for phrases, keyword in TEXT_KEYWORDS:
            if any(phrase in text for phrase in phrases):
                keywords.add(keyword)

    return keywords


def detect_themes(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
    tribal_threshold: int = TRIBAL_THRESHOLD,
) -> set[str]:
    """
    Detect tribal themes.

    Returns:
        Themes such as "elf-tribal" for every tribe with at least
        `tribal_threshold` copies
    """
    tribe_counts: dict[str, int] = {}

    for entry, card in _resolved(entries, card_data):
        type_line = card.type_line.lower()
        for tribe in TRIBES:
            if tribe in type_line:
                tribe_counts[tribe] = tribe_counts.get(tribe, 0) + entry.quantity

    return {f"{tribe}-tribal" for tribe, count in tribe_counts.items() if count >= tribal_threshold}


def generate_strategy_tags(type_counts: Mapping[str, int], keywords: set[str]) -> list[DeckTag]:
    tags: list[DeckTag] = []

    if type_counts.get("creature", 0) >= 30:
        tags.append(DeckTag("Creature-Heavy", TagCategory.STRATEGY, 0.8))

    if type_counts.get("instant", 0) + type_counts.get("sorcery", 0) >= 25:
        tags.append(DeckTag("Spell-Heavy", TagCategory.STRATEGY, 0.8))

    if "tokens" in keywords:
        tags.append(DeckTag("Token Strategy", TagCategory.STRATEGY, 0.7))

    if "sacrifice" in keywords:
        tags.append(DeckTag("Sacrifice Matters", TagCategory.STRATEGY, 0.7))

    if "graveyard" in keywords:
        tags.append(DeckTag("Graveyard Matters", TagCategory.STRATEGY, 0.7))

    return tags


def generate_speed_tags(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
) -> list[DeckTag]:
    """Exactly one speed tag, from the average mana value of non-land cards."""
    total_mana_value = 0.0
    nonland_count = 0

    for entry, card in _resolved(entries, card_data):
        if not card.is_land:
            total_mana_value += card.cmc * entry.quantity
            nonland_count += entry.quantity

    avg_mana_value = (
        total_mana_value / nonland_count if nonland_count > 0 else DEFAULT_AVERAGE_MANA_VALUE
    )

    if avg_mana_value <= 2.5:
        return [DeckTag("Fast", TagCategory.SPEED, 0.8)]
    if avg_mana_value >= 4.5:
        return [DeckTag("Slow/Late Game", TagCategory.SPEED, 0.7)]
    return [DeckTag("Mid-Speed", TagCategory.SPEED, 0.6)]


def generate_interaction_tags(type_counts: Mapping[str, int], keywords: set[str]) -> list[DeckTag]:
    tags: list[DeckTag] = []

    if "counterspell" in keywords:
        tags.append(DeckTag("Counterspells", TagCategory.INTERACTION, 0.8))

    if "removal" in keywords:
        tags.append(DeckTag("Removal Heavy", TagCategory.INTERACTION, 0.7))

    if "exile" in keywords:
        tags.append(DeckTag("Exile Effects", TagCategory.INTERACTION, 0.6))

    if type_counts.get("instant", 0) >= 15:
        tags.append(DeckTag("Instant Speed", TagCategory.INTERACTION, 0.7))

    return tags


def generate_theme_tags(themes: set[str], keywords: set[str]) -> list[DeckTag]:
    tags: list[DeckTag] = []

    for theme in sorted(themes):
        if theme.endswith("-tribal"):
            tribe = theme.removesuffix("-tribal")
            tags.append(DeckTag(f"{tribe.capitalize()} Tribal", TagCategory.THEME, 0.9))

    if "equipment" in keywords or "equip" in keywords:
        tags.append(DeckTag("Equipment Matters", TagCategory.THEME, 0.7))

    return tags


def generate_mechanic_tags(keywords: set[str]) -> list[DeckTag]:
    return [
        DeckTag(tag_name, TagCategory.MECHANIC, 0.6)
        for keyword, tag_name in MECHANIC_TAGS.items()
        if keyword in keywords
    ]


def generate_deck_tags(
    entries: Sequence[DeckEntry],
    card_data: Mapping[str, CardRecord],
    *,
    confidence_floor: float = TAG_CONFIDENCE_FLOOR,
    max_tags: int = MAX_DECK_TAGS,
    tribal_threshold: int = TRIBAL_THRESHOLD,
) -> list[DeckTag]:
    """
    Generate tags describing a deck.

    Args:
        entries: Deck entries to analyze
        card_data: Card id -> CardRecord lookup
        confidence_floor: Tags below this confidence are dropped
        max_tags: Maximum number of tags returned
        tribal_threshold: Copies of one creature type needed for a tribal theme

    Returns:
        Tags sorted by confidence, highest first. Ties keep generation order.
    """
    type_counts = count_card_types(entries, card_data)
    keywords = extract_keywords(entries, card_data)
    themes = detect_themes(entries, card_data, tribal_threshold=tribal_threshold)

    tags: list[DeckTag] = []
    tags.extend(generate_strategy_tags(type_counts, keywords))
    tags.extend(generate_speed_tags(entries, card_data))
    tags.extend(generate_interaction_tags(type_counts, keywords))
    tags.extend(generate_theme_tags(themes, keywords))
    tags.extend(generate_mechanic_tags(keywords))

    kept = [tag for tag in tags if tag.confidence >= confidence_floor]
    kept.sort(key=lambda tag: tag.confidence, reverse=True)

    logger.debug(
        "Generated %d tags (%d above floor) from %d keywords and %d themes",
        len(tags),
        len(kept),
        len(keywords),
        len(themes),
    )

    return kept[:max_tags]
