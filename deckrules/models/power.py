"""
Power level models.

A PowerReport scores a deck on four axes (speed, interaction, consistency,
resilience), each 0-100, and combines them into a weighted overall score
with a qualitative band.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PowerBand(str, Enum):
    """Qualitative label for an overall power score."""

    COMPETITIVE = "cEDH/competitive"  # 80+
    HIGH = "high power"  # 60-79
    MID = "mid power"  # 40-59
    CASUAL = "casual/focused"  # 20-39
    PRECON = "precon/beginner"  # below 20


@dataclass
class RoleCounts:
    """
    Number of cards filling each functional role.

    A card with both removal tags counts once in `removal`; same for tutors.
    """

    ramp: int = 0
    removal_targeted: int = 0
    removal_mass: int = 0
    removal: int = 0
    draw: int = 0
    tutor_broad: int = 0
    tutor_narrow: int = 0
    tutors: int = 0
    protection: int = 0
    wincons: int = 0
    lands: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "ramp": self.ramp,
            "removal_targeted": self.removal_targeted,
            "removal_mass": self.removal_mass,
            "removal": self.removal,
            "draw": self.draw,
            "tutor_broad": self.tutor_broad,
            "tutor_narrow": self.tutor_narrow,
            "tutors": self.tutors,
            "protection": self.protection,
            "wincons": self.wincons,
            "lands": self.lands,
        }


@dataclass
class PowerReport:
    """
    Power level analysis for a deck.

    Attributes:
        speed: How quickly the deck develops (0-100)
        interaction: Ability to answer opposing threats (0-100)
        consistency: Ability to find key pieces (0-100)
        resilience: Ability to survive disruption (0-100)
        overall: Weighted combination of the four sub-scores (0-100)
        band: Qualitative label for the overall score
        issues: Weaknesses worth addressing
        strengths: What the deck does well
        role_counts: Functional role tallies the scores were derived from
        average_mana_value: Mean mana value across all scored cards
        mana_curve: Mana value -> number of cards
        cards_scored: Number of cards that went into the tallies
    """

    speed: int
    interaction: int
    consistency: int
    resilience: int
    overall: int
    band: PowerBand
    issues: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    role_counts: RoleCounts = field(default_factory=RoleCounts)
    average_mana_value: float = 0.0
    mana_curve: dict[float, int] = field(default_factory=dict)
    cards_scored: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "speed": self.speed,
            "interaction": self.interaction,
            "consistency": self.consistency,
            "resilience": self.resilience,
            "overall": self.overall,
            "band": self.band.value,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
            "role_counts": self.role_counts.to_dict(),
            "average_mana_value": round(self.average_mana_value, 2),
            "mana_curve": {str(mv): count for mv, count in sorted(self.mana_curve.items())},
            "cards_scored": self.cards_scored,
        }
