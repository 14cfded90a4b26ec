# chuk_ai_context_optimizer/models/__init__.py
"""
Models for the context optimizer.

Organized as:
- enums.py: CompressionLevel, EmotionCategory, PresetName
- profile.py: UserProfile, RecentExchange, EmotionalEvent
- preset.py: OptimizationPreset, PresetSummary, ResponseConfig
- analytics.py: TokenAnalytics
"""

from chuk_ai_context_optimizer.models.analytics import TokenAnalytics
from chuk_ai_context_optimizer.models.enums import (
    ALL_PRESET_NAMES,
    CompressionLevel,
    EmotionCategory,
    PresetName,
)
from chuk_ai_context_optimizer.models.preset import (
    OptimizationPreset,
    PresetSummary,
    ResponseConfig,
)
from chuk_ai_context_optimizer.models.profile import (
    EmotionalEvent,
    RecentExchange,
    UserProfile,
)

__all__ = [
    # Enums
    "ALL_PRESET_NAMES",
    "CompressionLevel",
    "EmotionCategory",
    "PresetName",
    # Profile
    "EmotionalEvent",
    "RecentExchange",
    "UserProfile",
    # Presets
    "OptimizationPreset",
    "PresetSummary",
    "ResponseConfig",
    # Analytics
    "TokenAnalytics",
]
