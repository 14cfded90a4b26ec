# chuk_ai_context_optimizer/constants.py
"""Shared constants for context budgeting.

Centralizes scoring weights, budget shares, word lists, and thresholds so
selection logic never carries inlined magic numbers.
"""

from __future__ import annotations

# =============================================================================
# Relevance scoring
# =============================================================================

# Tokens of this length or shorter never count as meaningful
MIN_MEANINGFUL_TOKEN_LENGTH = 3

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "should",
        "could",
    }
)

# Personal fact ranking (must sum to 1.0)
RELEVANCE_WEIGHT = 0.7
RECENCY_WEIGHT = 0.3

# =============================================================================
# Budget split (fractions of the pool remaining at each step)
# =============================================================================

PERSONAL_BUDGET_SHARE = 0.3
CONVERSATION_BUDGET_SHARE = 0.5
EMOTIONAL_BUDGET_SHARE = 0.2

# =============================================================================
# Emotional context
# =============================================================================

EMOTIONAL_INTENSITY_THRESHOLD = 6
MAX_EMOTIONAL_EVENTS = 2
# Emotional context is only shared once the relationship exceeds this level
EMOTIONAL_RELATIONSHIP_GATE = 30

# =============================================================================
# Core identity
# =============================================================================

FRIENDLY_TONE_CEILING = 20
WARM_TONE_CEILING = 60
INTERACTION_MENTION_THRESHOLD = 10

TONE_FRIENDLY = "Be friendly, curious."
TONE_WARM = "Be warm, playful."
TONE_INTIMATE = "Be intimate, affectionate."

# =============================================================================
# Fragment rendering
# =============================================================================

PERSONAL_PREFIX = "Known: "
PERSONAL_SEPARATOR = ", "
CONVERSATION_HEADER = "Recent:"
EMOTIONAL_PREFIX = "Emotional: "
EMOTIONAL_SEPARATOR = "; "
FRAGMENT_SEPARATOR = "\n"

# =============================================================================
# Compression word lists
# =============================================================================

INTENSITY_ADVERBS: tuple[str, ...] = ("very", "really", "quite", "rather", "somewhat", "pretty")
HEDGE_PHRASES: tuple[str, ...] = ("I think", "I believe", "I feel", "it seems", "perhaps", "maybe")

# =============================================================================
# Analytics
# =============================================================================

DEFAULT_CHARS_PER_TOKEN = 4
DEFAULT_INPUT_COST_PER_MILLION = 3.0
OUTPUT_COST_MULTIPLIER = 5.0
QUALITY_FLOOR = 0.4
QUALITY_PENALTY_PER_REDUCTION = 0.5
DEFAULT_TEMPERATURE = 0.7
