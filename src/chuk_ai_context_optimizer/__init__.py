# chuk_ai_context_optimizer/__init__.py
"""
Context budgeting for persona chat.

Assembles a bounded prompt body from an unbounded user profile:
- Relevance: keyword-overlap scoring against the incoming message
- Selection: ranked, budget-trimmed personal facts, exchanges, emotions
- Assembly: proportional budget split under the active preset
- Compression: idempotent text transforms (none / light / aggressive)
- Analytics: token counts, cost estimate, reduction and quality scores

Usage::

    from chuk_ai_context_optimizer import UserProfile, analyze, assemble

    context = assemble(UserProfile(display_name="Ava"), "How are you?")
    stats = analyze(context, reply)
"""

from chuk_ai_context_optimizer.admin import (
    change_level,
    help_text,
    response_config,
    show_settings,
)
from chuk_ai_context_optimizer.analytics import (
    AnalyticsCalculator,
    PricingConfig,
    analyze,
)
from chuk_ai_context_optimizer.assembler import (
    AssemblerConfig,
    ContextAssembler,
    assemble,
)
from chuk_ai_context_optimizer.compressor import Compressor, CompressorConfig, compress
from chuk_ai_context_optimizer.exceptions import InvalidPresetName
from chuk_ai_context_optimizer.models import (
    CompressionLevel,
    EmotionalEvent,
    EmotionCategory,
    OptimizationPreset,
    PresetName,
    PresetSummary,
    RecentExchange,
    ResponseConfig,
    TokenAnalytics,
    UserProfile,
)
from chuk_ai_context_optimizer.presets import (
    PRESETS,
    ActivePresetState,
    PresetRegistry,
    get_preset_registry,
    reset_preset_registry,
)
from chuk_ai_context_optimizer.relevance import RelevanceScorer, ScoredItem, ScoringConfig, score_relevance
from chuk_ai_context_optimizer.selectors import (
    ConversationSelector,
    EmotionalContextSelector,
    PersonalDetailSelector,
)
from chuk_ai_context_optimizer.tokens import estimate_tokens

__all__ = [
    # Entry points
    "assemble",
    "analyze",
    "compress",
    "estimate_tokens",
    "score_relevance",
    # Admin
    "change_level",
    "help_text",
    "response_config",
    "show_settings",
    # Presets
    "PRESETS",
    "ActivePresetState",
    "PresetRegistry",
    "get_preset_registry",
    "reset_preset_registry",
    # Components
    "AnalyticsCalculator",
    "AssemblerConfig",
    "Compressor",
    "CompressorConfig",
    "ContextAssembler",
    "ConversationSelector",
    "EmotionalContextSelector",
    "PersonalDetailSelector",
    "PricingConfig",
    "RelevanceScorer",
    "ScoredItem",
    "ScoringConfig",
    # Models
    "CompressionLevel",
    "EmotionCategory",
    "EmotionalEvent",
    "OptimizationPreset",
    "PresetName",
    "PresetSummary",
    "RecentExchange",
    "ResponseConfig",
    "TokenAnalytics",
    "UserProfile",
    # Errors
    "InvalidPresetName",
]
