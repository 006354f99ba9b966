from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# DECK TAGGER DEFAULTS
# =============================================================================

# Tags below this confidence are dropped from the final tag list
TAG_CONFIDENCE_FLOOR = 0.4

# Maximum number of tags returned for one deck
MAX_DECK_TAGS = 10

# Copies of one creature type needed before a deck counts as tribal
TRIBAL_THRESHOLD = 15


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKRULES_")

    app_name: str = "deckrules"
    debug: bool = False
    log_level: str = "INFO"

    # Only this format restricts decks to the commander's color identity
    commander_format: str = "commander"

    # Deck tagger output shaping
    tag_confidence_floor: float = TAG_CONFIDENCE_FLOOR
    max_deck_tags: int = MAX_DECK_TAGS
    tribal_threshold: int = TRIBAL_THRESHOLD


settings = Settings()


# =============================================================================
# POWER LEVEL CALIBRATION
# =============================================================================

# Every sub-score starts here before threshold adjustments
POWER_BASELINE = 50

# Sub-score weights for the overall score (sum to 1.0)
POWER_WEIGHTS: dict[str, float] = {
    "speed": 0.25,
    "interaction": 0.25,
    "consistency": 0.30,
    "resilience": 0.20,
}

# Overall score breakpoints, highest first
POWER_BAND_THRESHOLDS: tuple[int, ...] = (80, 60, 40, 20)

# Recommended minimum land count for the commander format
COMMANDER_MIN_LANDS = 33
