# chuk_ai_context_optimizer/models/enums.py
"""Enums for the context optimizer."""

from enum import Enum


class CompressionLevel(str, Enum):
    """
    Text-transform strength applied after assembly.

    NONE leaves text untouched, LIGHT normalizes whitespace and
    punctuation, AGGRESSIVE also drops filler adverbs and hedges.
    """

    NONE = "none"
    LIGHT = "light"
    AGGRESSIVE = "aggressive"


class EmotionCategory(str, Enum):
    """Coarse label of an emotional event."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    SIGNIFICANT = "significant"


class PresetName(str, Enum):
    """Named optimization presets, most generous first."""

    BALANCED = "balanced"
    EFFICIENT = "efficient"
    ECONOMY = "economy"


# All preset names as strings (for validation and help text)
ALL_PRESET_NAMES: list[str] = [name.value for name in PresetName]
