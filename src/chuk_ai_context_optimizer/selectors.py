# chuk_ai_context_optimizer/selectors.py
"""
Fragment selectors for context assembly.

Each selector picks items from one section of the user profile, ranks
them, and renders as many as fit a token budget into one prompt fragment.
A selector returns ``None`` when it has nothing to contribute.

The budget is charged against the rendered fragment (prefix and
separators included), so a returned fragment's estimated cost never
exceeds the budget it was given.

Usage::

    from chuk_ai_context_optimizer.selectors import PersonalDetailSelector

    selector = PersonalDetailSelector()
    fragment = selector.select(profile.personal_facts, message, 3, 120)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.constants import (
    CONVERSATION_HEADER,
    EMOTIONAL_INTENSITY_THRESHOLD,
    EMOTIONAL_PREFIX,
    EMOTIONAL_SEPARATOR,
    FRAGMENT_SEPARATOR,
    MAX_EMOTIONAL_EVENTS,
    PERSONAL_PREFIX,
    PERSONAL_SEPARATOR,
    RECENCY_WEIGHT,
    RELEVANCE_WEIGHT,
)
from chuk_ai_context_optimizer.models import EmotionalEvent, RecentExchange
from chuk_ai_context_optimizer.relevance import RelevanceScorer, ScoredItem
from chuk_ai_context_optimizer.tokens import estimate_tokens

logger = logging.getLogger(__name__)

# =============================================================================
# Personal details
# =============================================================================


class PersonalDetailConfig(BaseModel):
    """Ranking weights for personal facts (must sum to 1.0)."""

    relevance_weight: float = Field(default=RELEVANCE_WEIGHT, ge=0.0, le=1.0)
    recency_weight: float = Field(default=RECENCY_WEIGHT, ge=0.0, le=1.0)


class PersonalDetailSelector:
    """
    Ranks stored facts by relevance to the message and by recency.

    combined = relevance * relevance_weight + recency * recency_weight,
    where recency runs from 1.0 (newest) down to 1/N (oldest). Ties keep
    the more recent fact first.
    """

    def __init__(
        self,
        config: PersonalDetailConfig | None = None,
        scorer: RelevanceScorer | None = None,
    ) -> None:
        self.config = config or PersonalDetailConfig()
        self.scorer = scorer or RelevanceScorer()

    def rank(self, facts: Sequence[str], reference_text: str) -> list[ScoredItem]:
        """
        Score every entry and return them best first. Does not touch ``facts``.

        Recency comes from each entry's position in the full sequence, blank
        entries included, so N is always ``len(facts)``.
        """
        total = len(facts)
        cfg = self.config
        scored: list[ScoredItem] = []
        for i, fact in enumerate(facts):
            relevance = self.scorer.score(fact, reference_text)
            recency = (total - i) / total
            scored.append(
                ScoredItem(
                    item=fact,
                    index=i,
                    relevance_score=relevance,
                    recency_score=recency,
                    combined_score=relevance * cfg.relevance_weight + recency * cfg.recency_weight,
                )
            )
        # sorted() is stable, so equal scores keep most-recent-first order
        return sorted(scored, key=lambda s: s.combined_score, reverse=True)

    def select(
        self,
        facts: Sequence[str] | None,
        reference_text: str,
        max_count: int,
        token_budget: float,
    ) -> str | None:
        """
        Pick up to ``max_count`` of the best-ranked facts that fit the budget.

        Only the top ``max_count`` ranked facts are candidates; a candidate
        that does not fit is skipped and the next one is tried.
        """
        if not facts or max_count <= 0:
            return None

        # Blank or non-string entries keep their slot for recency but are never picked
        candidates = [s for s in self.rank(facts, reference_text) if isinstance(s.item, str) and s.item.strip()]
        selected: list[str] = []
        for candidate in candidates[:max_count]:
            trial = [*selected, candidate.item]
            if estimate_tokens(self.render(trial)) <= token_budget:
                selected = trial

        return self.render(selected) if selected else None

    @staticmethod
    def render(facts: Sequence[str]) -> str:
        return f"{PERSONAL_PREFIX}{PERSONAL_SEPARATOR.join(facts)}."


# =============================================================================
# Conversation
# =============================================================================


class ConversationSelector:
    """
    Picks recent exchanges either in recency order or by relevance.

    Budget exhaustion is a hard stop: once an exchange does not fit, no
    later (possibly cheaper) exchange is considered.
    """

    def __init__(self, scorer: RelevanceScorer | None = None) -> None:
        self.scorer = scorer or RelevanceScorer()

    def order(
        self,
        exchanges: Sequence[RecentExchange],
        reference_text: str,
        prioritize_recent: bool,
    ) -> list[RecentExchange]:
        if prioritize_recent:
            return list(exchanges)

        scored: list[ScoredItem] = []
        for i, exchange in enumerate(exchanges):
            relevance = self.scorer.score(exchange.user_text, reference_text)
            scored.append(ScoredItem(item=exchange, index=i, relevance_score=relevance, combined_score=relevance))
        return [s.item for s in sorted(scored, key=lambda s: s.combined_score, reverse=True)]

    def select(
        self,
        exchanges: Sequence[RecentExchange] | None,
        reference_text: str,
        max_count: int,
        token_budget: float,
        prioritize_recent: bool = True,
    ) -> str | None:
        if not exchanges or max_count <= 0:
            return None

        lines: list[str] = []
        for exchange in self.order(exchanges, reference_text, prioritize_recent)[:max_count]:
            trial = [*lines, self.format_exchange(exchange)]
            if estimate_tokens(self.render(trial)) > token_budget:
                break
            lines = trial

        return self.render(lines) if lines else None

    @staticmethod
    def format_exchange(exchange: RecentExchange) -> str:
        return f"User: {exchange.user_text}\nAssistant: {exchange.model_text}"

    @staticmethod
    def render(lines: Sequence[str]) -> str:
        return FRAGMENT_SEPARATOR.join([CONVERSATION_HEADER, *lines])


# =============================================================================
# Emotional context
# =============================================================================


class EmotionalContextConfig(BaseModel):
    """Configuration for emotional context selection."""

    intensity_threshold: int = Field(default=EMOTIONAL_INTENSITY_THRESHOLD, ge=1, le=10)
    max_events: int = Field(default=MAX_EMOTIONAL_EVENTS, ge=0)


class EmotionalContextSelector:
    """Shares the most recent intense emotional events, all or nothing."""

    def __init__(self, config: EmotionalContextConfig | None = None) -> None:
        self.config = config or EmotionalContextConfig()

    def select(
        self,
        events: Sequence[EmotionalEvent] | None,
        token_budget: float,
    ) -> str | None:
        if not events:
            return None

        significant = [event for event in events if event.intensity >= self.config.intensity_threshold]
        significant = significant[: self.config.max_events]
        if not significant:
            return None

        fragment = self.render(significant)
        if estimate_tokens(fragment) > token_budget:
            logger.debug("Emotional context (%d events) exceeds budget %.1f", len(significant), token_budget)
            return None
        return fragment

    @staticmethod
    def render(events: Sequence[EmotionalEvent]) -> str:
        body = EMOTIONAL_SEPARATOR.join(f"{event.category.value}: {event.summary}" for event in events)
        return f"{EMOTIONAL_PREFIX}{body}."
