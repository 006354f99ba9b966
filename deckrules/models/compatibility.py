"""
Color identity compatibility models.

A CompatibilityReport is derived from the current deck and commander. It is
recomputed whenever either changes and is never persisted.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ColorViolation:
    """
    A card whose color identity falls outside the commander's.

    Attributes:
        card_id: Identifier of the offending card
        card_name: Name of the offending card
        card_colors: The card's full color identity
        invalid_colors: Colors not in the commander's identity
        reason: Human-readable explanation
    """

    card_id: str
    card_name: str
    card_colors: tuple[str, ...]
    invalid_colors: tuple[str, ...]
    reason: str


@dataclass
class CompatibilityReport:
    """
    Color identity check results for a whole deck.

    Attributes:
        is_compatible: True if and only if there are no violations
        violations: One entry per offending card
        commander_identity: The commander's color identity
        deck_colors: Union of all checked cards' color identities
    """

    is_compatible: bool = True
    violations: list[ColorViolation] = field(default_factory=list)
    commander_identity: tuple[str, ...] = ()
    deck_colors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "is_compatible": self.is_compatible,
            "violations": [
                {
                    "card_id": v.card_id,
                    "card_name": v.card_name,
                    "card_colors": list(v.card_colors),
                    "invalid_colors": list(v.invalid_colors),
                    "reason": v.reason,
                }
                for v in self.violations
            ],
            "commander_identity": list(self.commander_identity),
            "deck_colors": list(self.deck_colors),
        }
