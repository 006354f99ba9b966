"""
Card role tagging.

Assigns functional role tags (ramp, removal, draw, ...) to a single card from
its oracle text. The power level scorer reads these tags; cards that already
carry precomputed tags keep them.
"""

import re

from deckrules.models.card import CardRecord

# Role tag -> patterns; a card gets the tag if any pattern matches its oracle text
ROLE_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "ramp": (
        re.compile(r"add \{[wubrgc]\}"),
        re.compile(r"add .*mana of any (color|type)"),
        re.compile(r"create .*treasure token"),
        re.compile(r"search your library for .*land.*onto the battlefield"),
        re.compile(r"you may put a land card"),
        re.compile(r"put .*land.*onto the battlefield"),
    ),
    "tutor-narrow": (
        re.compile(r"search your library for .*(creature|instant|sorcery|artifact|enchantment)"),
    ),
    "tutor-broad": (
        re.compile(r"search your library for a card"),
        re.compile(r"search your library for (up to )?\w+ cards?,"),
    ),
    "removal-sweeper": (
        re.compile(r"(destroy|exile) all (creatures|artifacts|enchantments|nonland permanents)"),
        re.compile(r"all creatures get -\d+/-\d+"),
        re.compile(r"damage to each creature"),
    ),
    "removal-spot": (
        re.compile(r"(destroy|exile) target"),
        re.compile(r"target .*gets -\d+/-\d+ until end of turn"),
        re.compile(r"deals? \d+ damage to (target creature|any target)"),
        re.compile(r"return target .*to its owner's hand"),
    ),
    "counterspell": (re.compile(r"counter target .*spell"),),
    "draw": (
        re.compile(r"draws? (a card|\w+ cards)"),
        re.compile(r"you may draw"),
    ),
    "protection": (
        re.compile(r"hexproof"),
        re.compile(r"shroud"),
        re.compile(r"protection from"),
        re.compile(r"indestructible"),
    ),
    "wincon": (
        re.compile(r"you win the game"),
        re.compile(r"loses the game"),
        re.compile(r"poison counter"),
        re.compile(r"extra turn"),
    ),
}


def tag_card_roles(card: CardRecord) -> frozenset[str]:
    """
    Derive role tags for a card from its oracle text.

    Args:
        card: The card to tag

    Returns:
        Set of role tags such as "ramp", "removal-spot", "draw"
    """
    text = card.oracle_text.lower()
    tags: set[str] = set()

    for tag, patterns in ROLE_PATTERNS.items():
        if any(pattern.search(text) for pattern in patterns):
            tags.add(tag)

    # Mana rocks and dorks
    if ("add" in text and "mana" in text) or "add {" in text:
        if card.cmc == 0 and not card.is_land:
            tags.add("fast-mana")
        if 1 <= card.cmc <= 2:
            tags.add("ramp")

    if card.is_land:
        # Lands tapping for mana are not ramp
        tags.discard("ramp")
        tags.discard("fast-mana")

    return frozenset(tags)


def card_role_tags(card: CardRecord, derive_missing: bool = True) -> frozenset[str]:
    """
    Role tags for a card: its precomputed tags, or derived ones if it has none.

    Args:
        card: The card
        derive_missing: Derive tags from oracle text when the card has none

    Returns:
        Set of role tags
    """
    if card.tags or not derive_missing:
        return card.tags
    return tag_card_roles(card)
