"""
Devotion calculations.

Devotion to a color is the number of that color's mana symbols among the
mana costs of a player's permanents. Hybrid and Phyrexian symbols count
toward each of their colors.
"""

from collections.abc import Iterable

from deckrules.models.card import CardRecord
from deckrules.models.mana import COLORS
from deckrules.parsers.mana_cost import parse_mana_cost


def calculate_devotion(permanents: Iterable[CardRecord], colors: Iterable[str]) -> int:
    """
    Sum devotion to the given colors across permanents.

    Args:
        permanents: Cards on the battlefield
        colors: Colors to count (devotion to "black and red" passes ["B", "R"])

    Returns:
        Total devotion
    """
    wanted = [color.upper() for color in colors]
    total = 0

    for permanent in permanents:
        if not permanent.mana_cost:
            continue
        contribution = parse_mana_cost(permanent.mana_cost).devotion_contribution
        for color in wanted:
            total += contribution.get(color, 0)

    return total


def meets_devotion_requirement(permanents: Iterable[CardRecord], requirement: str) -> bool:
    """
    Check a devotion threshold such as "{R}{R}{R}" or "{U/B}{U/B}".

    Each color the requirement mentions is checked independently.

    Args:
        permanents: Cards on the battlefield
        requirement: Requirement written as a mana cost

    Returns:
        True if devotion to every required color is high enough
    """
    permanents = list(permanents)
    required = parse_mana_cost(requirement).devotion_contribution

    for color in COLORS:
        if required[color] > 0 and calculate_devotion(permanents, [color]) < required[color]:
            return False

    return True


def devotion_by_color(permanents: Iterable[CardRecord]) -> dict[str, int]:
    """Devotion to each color separately, in WUBRG order."""
    devotion = dict.fromkeys(COLORS, 0)

    for permanent in permanents:
        contribution = parse_mana_cost(permanent.mana_cost).devotion_contribution
        for color in COLORS:
            devotion[color] += contribution[color]

    return devotion
