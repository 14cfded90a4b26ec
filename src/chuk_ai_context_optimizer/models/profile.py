# chuk_ai_context_optimizer/models/profile.py
"""User profile snapshot consumed by context assembly."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from chuk_ai_context_optimizer.models.enums import EmotionCategory


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecentExchange(BaseModel):
    """One user message and the reply that was sent for it."""

    timestamp: datetime = Field(default_factory=_utcnow)
    user_text: str = ""
    model_text: str = ""
    token_count: int = Field(default=0, ge=0, description="Estimated tokens for this pair")


class EmotionalEvent(BaseModel):
    """A labeled emotional moment; keep summaries short."""

    timestamp: datetime = Field(default_factory=_utcnow)
    category: EmotionCategory
    summary: str
    intensity: int = Field(..., ge=1, le=10)


class UserProfile(BaseModel):
    """
    Read-only snapshot of everything known about a user.

    Owned by the persistence layer. All sequences are most-recent-first and
    already capped; context assembly never mutates them.
    """

    user_id: str | None = None
    display_name: str = ""
    relationship_level: int = Field(default=0, ge=0, le=100)
    total_interactions: int = Field(default=0, ge=0)
    personal_facts: list[str] = Field(default_factory=list)
    recent_exchanges: list[RecentExchange] = Field(default_factory=list)
    emotional_events: list[EmotionalEvent] = Field(default_factory=list)

    @field_validator("personal_facts", "recent_exchanges", "emotional_events", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value
