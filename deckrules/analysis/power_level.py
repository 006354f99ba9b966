"""
Power level scoring.

Scores a deck on speed, interaction, consistency and resilience from the
number of cards filling each functional role, then combines the four into a
weighted overall score.

Every sub-score starts at a baseline of 50 and moves by fixed amounts when a
role count crosses a threshold. Sub-scores are clamped to 0-100 only after
the overall score has been computed from the unclamped values.
"""

import logging
import math
from collections.abc import Sequence

from deckrules.analysis.card_roles import card_role_tags
from deckrules.config import (
    COMMANDER_MIN_LANDS,
    POWER_BAND_THRESHOLDS,
    POWER_BASELINE,
    POWER_WEIGHTS,
)
from deckrules.models.card import CardRecord
from deckrules.models.power import PowerBand, PowerReport, RoleCounts

logger = logging.getLogger(__name__)

# Tags that place a card in each role
RAMP_TAGS = frozenset({"ramp"})
REMOVAL_TARGETED_TAGS = frozenset({"removal-spot"})
REMOVAL_MASS_TAGS = frozenset({"removal-sweeper"})
DRAW_TAGS = frozenset({"draw"})
TUTOR_BROAD_TAGS = frozenset({"tutor-broad"})
TUTOR_NARROW_TAGS = frozenset({"tutor-narrow"})
PROTECTION_TAGS = frozenset({"protection"})
WINCON_TAGS = frozenset({"wincon"})


def count_roles(cards: Sequence[CardRecord], derive_missing_tags: bool = True) -> RoleCounts:
    """
    Tally how many cards fill each functional role.

    Args:
        cards: Cards to tally (each element counts once)
        derive_missing_tags: Derive role tags from oracle text for untagged cards

    Returns:
        RoleCounts
    """
    counts = RoleCounts()

    for card in cards:
        tags = card_role_tags(card, derive_missing=derive_missing_tags)

        targeted = bool(tags & REMOVAL_TARGETED_TAGS)
        mass = bool(tags & REMOVAL_MASS_TAGS)
        broad = bool(tags & TUTOR_BROAD_TAGS)
        narrow = bool(tags & TUTOR_NARROW_TAGS)

        counts.ramp += bool(tags & RAMP_TAGS)
        counts.removal_targeted += targeted
        counts.removal_mass += mass
        counts.removal += targeted or mass
        counts.draw += bool(tags & DRAW_TAGS)
        counts.tutor_broad += broad
        counts.tutor_narrow += narrow
        counts.tutors += broad or narrow
        counts.protection += bool(tags & PROTECTION_TAGS)
        counts.wincons += bool(tags & WINCON_TAGS)
        counts.lands += card.is_land

    return counts


def build_mana_curve(cards: Sequence[CardRecord]) -> dict[float, int]:
    """Mana value -> number of cards, lands included. Fractional values keep their own bucket."""
    curve: dict[float, int] = {}
    for card in cards:
        mv = int(card.cmc) if float(card.cmc).is_integer() else card.cmc
        curve[mv] = curve.get(mv, 0) + 1
    return curve


def power_band(score: int) -> PowerBand:
    """Qualitative band for an overall power score."""
    competitive, high, mid, casual = POWER_BAND_THRESHOLDS

    if score >= competitive:
        return PowerBand.COMPETITIVE
    if score >= high:
        return PowerBand.HIGH
    if score >= mid:
        return PowerBand.MID
    if score >= casual:
        return PowerBand.CASUAL
    return PowerBand.PRECON


def _clamp(score: float) -> int:
    return int(min(100, max(0, score)))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _speed_score(counts: RoleCounts, avg_mana_value: float) -> int:
    speed = POWER_BASELINE

    if counts.ramp >= 10:
        speed += 20
    elif counts.ramp >= 7:
        speed += 10
    elif counts.ramp < 5:
        speed -= 15

    if avg_mana_value < 3:
        speed += 15
    elif avg_mana_value > 4:
        speed -= 10

    if counts.tutors >= 5:
        speed += 15

    return speed


def _interaction_score(counts: RoleCounts) -> int:
    interaction = POWER_BASELINE
    total = counts.removal + counts.protection

    if total >= 15:
        interaction += 25
    elif total >= 10:
        interaction += 15
    elif total < 7:
        interaction -= 20

    return interaction


def _consistency_score(counts: RoleCounts) -> int:
    consistency = POWER_BASELINE

    if counts.draw >= 10:
        consistency += 20
    elif counts.draw < 7:
        consistency -= 15

    if counts.tutors >= 5:
        consistency += 15
    elif counts.tutors >= 3:
        consistency += 10

    return consistency


def _resilience_score(counts: RoleCounts) -> int:
    resilience = POWER_BASELINE

    if counts.protection >= 5:
        resilience += 20
    elif counts.protection < 3:
        resilience -= 10

    return resilience


def _find_issues(
    counts: RoleCounts, avg_mana_value: float, format_name: str, commander_format: str
) -> list[str]:
    issues: list[str] = []

    if counts.ramp < 8:
        issues.append("Low ramp count - deck may be too slow")
    if counts.removal < 8:
        issues.append("Insufficient removal - vulnerable to threats")
    if counts.draw < 8:
        issues.append("Low card draw - may run out of resources")
    if counts.wincons < 3:
        issues.append("Few win conditions - unclear path to victory")
    if avg_mana_value > 3.5:
        issues.append("High average mana value - may be too slow")
    if counts.lands < COMMANDER_MIN_LANDS and format_name == commander_format:
        issues.append("Low land count for Commander format")

    return issues


def _find_strengths(counts: RoleCounts, avg_mana_value: float) -> list[str]:
    strengths: list[str] = []

    if counts.ramp >= 10:
        strengths.append("Strong ramp package")
    if counts.removal >= 12:
        strengths.append("Excellent removal suite")
    if counts.draw >= 10:
        strengths.append("Strong card advantage")
    if counts.tutors >= 5:
        strengths.append("High consistency through tutors")
    if avg_mana_value < 3:
        strengths.append("Efficient mana curve")

    return strengths


def score_power_level(
    cards: Sequence[CardRecord],
    commander: CardRecord | None = None,
    format_name: str = "commander",
    commander_format: str = "commander",
    derive_missing_tags: bool = True,
) -> PowerReport:
    """
    Score a deck's power level.

    Args:
        cards: The deck's cards, one element per copy
        commander: The commander; counted once if not already in `cards`
        format_name: Format the deck is built for
        commander_format: Name of the commander format (for the land-count issue)
        derive_missing_tags: Derive role tags from oracle text for untagged cards

    Returns:
        PowerReport with sub-scores, overall score, band, issues and strengths
    """
    scored = list(cards)
    if commander is not None and all(card.id != commander.id for card in scored):
        scored.append(commander)

    counts = count_roles(scored, derive_missing_tags=derive_missing_tags)
    avg_mana_value = sum(card.cmc for card in scored) / max(len(scored), 1)

    speed = _speed_score(counts, avg_mana_value)
    interaction = _interaction_score(counts)
    consistency = _consistency_score(counts)
    resilience = _resilience_score(counts)

    overall = _round_half_up(
        speed * POWER_WEIGHTS["speed"]
        + interaction * POWER_WEIGHTS["interaction"]
        + consistency * POWER_WEIGHTS["consistency"]
        + resilience * POWER_WEIGHTS["resilience"]
    )
    overall = _clamp(overall)

    logger.debug(
        "Power scores for %d cards: speed=%d interaction=%d consistency=%d "
        "resilience=%d overall=%d",
        len(scored),
        speed,
        interaction,
        consistency,
        resilience,
        overall,
    )

    return PowerReport(
        speed=_clamp(speed),
        interaction=_clamp(interaction),
        consistency=_clamp(consistency),
        resilience=_clamp(resilience),
        overall=overall,
        band=power_band(overall),
        issues=_find_issues(counts, avg_mana_value, format_name, commander_format),
        strengths=_find_strengths(counts, avg_mana_value),
        role_counts=counts,
        average_mana_value=avg_mana_value,
        mana_curve=build_mana_curve(scored),
        cards_scored=len(scored),
    )
