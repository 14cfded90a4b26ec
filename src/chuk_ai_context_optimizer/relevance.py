# chuk_ai_context_optimizer/relevance.py
"""
Keyword-overlap relevance scoring.

Scores how much a candidate text (a stored fact, a past user message)
overlaps the incoming message. Normalizing by the larger meaningful-token
set favors short candidates whose words are all shared over long ones
that share the same words amid noise.

Usage::

    from chuk_ai_context_optimizer.relevance import RelevanceScorer

    scorer = RelevanceScorer()
    scorer.score("programming", "help with programming")  # 0.5
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.constants import MIN_MEANINGFUL_TOKEN_LENGTH, STOP_WORDS

# =============================================================================
# Models
# =============================================================================


class ScoringConfig(BaseModel):
    """Configuration for relevance scoring."""

    min_token_length: int = Field(
        default=MIN_MEANINGFUL_TOKEN_LENGTH,
        description="Tokens this long or shorter are ignored",
    )
    stop_words: frozenset[str] = Field(default=STOP_WORDS)


class ScoredItem(BaseModel):
    """A ranking candidate. Lives only for the duration of one selection."""

    model_config = {"arbitrary_types_allowed": True}

    item: Any
    index: int = Field(..., description="Position in the original most-recent-first sequence")
    relevance_score: float = Field(default=0.0, ge=0.0, le=1.0)
    recency_score: float = Field(default=0.0, ge=0.0, le=1.0)
    combined_score: float = 0.0


# =============================================================================
# Scorer
# =============================================================================


class RelevanceScorer:
    """Pure keyword-overlap scorer. Safe to share between threads."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def meaningful_tokens(self, text: Any) -> set[str]:
        """Lower-cased whitespace tokens that are long enough and not stop words."""
        if not isinstance(text, str):
            return set()
        min_length = self.config.min_token_length
        stop_words = self.config.stop_words
        return {word for word in text.lower().split() if len(word) > min_length and word not in stop_words}

    def score(self, candidate_text: Any, reference_text: Any) -> float:
        """
        Score overlap between two texts.

        Returns 0.0 when either side has no meaningful tokens, otherwise the
        shared token count divided by the larger meaningful-token set.
        """
        candidate = self.meaningful_tokens(candidate_text)
        reference = self.meaningful_tokens(reference_text)
        if not candidate or not reference:
            return 0.0
        return len(candidate & reference) / max(len(candidate), len(reference))


_default_scorer = RelevanceScorer()


def score_relevance(candidate_text: Any, reference_text: Any) -> float:
    """Score with the default configuration."""
    return _default_scorer.score(candidate_text, reference_text)
