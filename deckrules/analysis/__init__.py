from deckrules.analysis.card_roles import card_role_tags, tag_card_roles
from deckrules.analysis.color_identity import (
    can_add_card_to_deck,
    check_color_identity_compatibility,
    check_deck_color_compatibility,
)
from deckrules.analysis.deck_tagger import generate_deck_tags
from deckrules.analysis.devotion import (
    calculate_devotion,
    devotion_by_color,
    meets_devotion_requirement,
)
from deckrules.analysis.mana_production import analyze_mana_production, can_produce_color
from deckrules.analysis.power_level import power_band, score_power_level

__all__ = [
    "analyze_mana_production",
    "calculate_devotion",
    "can_add_card_to_deck",
    "can_produce_color",
    "card_role_tags",
    "check_color_identity_compatibility",
    "check_deck_color_compatibility",
    "devotion_by_color",
    "generate_deck_tags",
    "meets_devotion_requirement",
    "power_band",
    "score_power_level",
    "tag_card_roles",
]
