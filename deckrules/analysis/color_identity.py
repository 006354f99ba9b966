"""
Color identity compatibility checking.

In the commander format every card's color identity must be a subset of the
commander's. A colorless commander therefore restricts the deck to colorless
cards, and a colorless card is legal under any commander.

Other formats have no identity restriction and always pass.
"""

from collections.abc import Iterable, Sequence

from deckrules.models.card import CardRecord
from deckrules.models.compatibility import ColorViolation, CompatibilityReport
from deckrules.models.mana import COLORS

COMMANDER_FORMAT = "commander"

COLOR_NAMES: dict[str, str] = {
    "W": "White",
    "U": "Blue",
    "B": "Black",
    "R": "Red",
    "G": "Green",
    "C": "Colorless",
}

# Named color combinations, keyed by WUBRG-ordered letters
COMBINATION_NAMES: dict[str, str] = {
    "WU": "Azorius",
    "UB": "Dimir",
    "BR": "Rakdos",
    "RG": "Gruul",
    "WG": "Selesnya",
    "WB": "Orzhov",
    "UR": "Izzet",
    "BG": "Golgari",
    "WR": "Boros",
    "UG": "Simic",
    "WUB": "Esper",
    "UBR": "Grixis",
    "BRG": "Jund",
    "WRG": "Naya",
    "WUG": "Bant",
    "WBR": "Mardu",
    "WUR": "Jeskai",
    "UBG": "Sultai",
    "URG": "Temur",
    "WBG": "Abzan",
    "WUBR": "Yore-Tiller",
    "WUBG": "Witch-Maw",
    "WURG": "Ink-Treader",
    "WBRG": "Dune-Brood",
    "UBRG": "Glint-Eye",
    "WUBRG": "Five-Color",
}


def _ordered(colors: Iterable[str]) -> tuple[str, ...]:
    present = set(colors)
    return tuple(color for color in COLORS if color in present)


def check_color_identity_compatibility(
    card_identity: Iterable[str],
    commander_identity: Iterable[str],
) -> tuple[bool, tuple[str, ...]]:
    """
    Check one card's identity against a commander's.

    Args:
        card_identity: The card's color identity
        commander_identity: The commander's color identity

    Returns:
        Tuple of (compatible, invalid colors in WUBRG order)
    """
    allowed = set(commander_identity)
    invalid = _ordered(color for color in card_identity if color not in allowed)
    return not invalid, invalid


def check_deck_color_compatibility(
    cards: Sequence[CardRecord],
    commander: CardRecord | None,
    format_name: str = COMMANDER_FORMAT,
    commander_format: str = COMMANDER_FORMAT,
) -> CompatibilityReport:
    """
    Check an entire deck for color identity violations.

    Args:
        cards: The deck's cards. Each distinct card is checked once and the
            commander itself is skipped
        commander: The deck's commander, if any
        format_name: Format the deck is built for
        commander_format: Name of the format that enforces color identity

    Returns:
        CompatibilityReport; trivially compatible outside the commander format
        or when no commander is set
    """
    if format_name != commander_format or commander is None:
        return CompatibilityReport()

    commander_identity = commander.color_identity
    violations: list[ColorViolation] = []
    deck_colors: set[str] = set()
    checked: set[str] = {commander.id}

    for card in cards:
        # One verdict per card, however many copies the deck runs
        if card.id in checked:
            continue
        checked.add(card.id)

        deck_colors.update(card.color_identity)

        compatible, invalid = check_color_identity_compatibility(
            card.color_identity, commander_identity
        )
        if not compatible:
            violations.append(
                ColorViolation(
                    card_id=card.id,
                    card_name=card.name,
                    card_colors=card.color_identity,
                    invalid_colors=invalid,
                    reason=(
                        f"Card has {', '.join(invalid)} in its identity, which is not in "
                        f"commander's identity ({', '.join(commander_identity)})"
                    ),
                )
            )

    return CompatibilityReport(
        is_compatible=not violations,
        violations=violations,
        commander_identity=commander_identity,
        deck_colors=_ordered(deck_colors),
    )


def can_add_card_to_deck(
    card: CardRecord,
    commander: CardRecord | None,
    format_name: str = COMMANDER_FORMAT,
    commander_format: str = COMMANDER_FORMAT,
) -> tuple[bool, str | None]:
    """
    Check whether adding a card would violate color identity.

    Returns:
        Tuple of (allowed, reason). Reason is None when allowed.
    """
    if format_name != commander_format or commander is None:
        return True, None

    compatible, invalid = check_color_identity_compatibility(
        card.color_identity, commander.color_identity
    )
    if compatible:
        return True, None

    return False, (
        f"{card.name} has {', '.join(invalid)} in its color identity, "
        "which is not in your commander's identity"
    )


def color_name(color: str) -> str:
    """Full name for a color letter; unknown letters are returned unchanged."""
    return COLOR_NAMES.get(color, color)


def format_color_identity(colors: Sequence[str]) -> str:
    """Display text for a color identity, e.g. "White, Blue"."""
    if not colors:
        return "Colorless"
    return ", ".join(color_name(color) for color in colors)


def color_identity_label(colors: Iterable[str]) -> str:
    """Named label for a color combination, e.g. "Azorius" or "Mono-Red"."""
    ordered = _ordered(colors)
    if not ordered:
        return "Colorless"
    if len(ordered) == 1:
        return f"Mono-{color_name(ordered[0])}"
    return COMBINATION_NAMES.get("".join(ordered), format_color_identity(ordered))


def calculate_deck_color_distribution(cards: Iterable[CardRecord]) -> dict[str, int]:
    """
    Count cards per color (by the card's colors, not its identity).

    Multicolored cards count once for each of their colors; colorless cards
    are counted under "C".
    """
    distribution = dict.fromkeys((*COLORS, "C"), 0)

    for card in cards:
        if not card.colors:
            distribution["C"] += 1
            continue
        for color in card.colors:
            distribution[color] += 1

    return distribution
