# chuk_ai_context_optimizer/models/preset.py
"""Optimization preset models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.base_models import MappingCompatModel
from chuk_ai_context_optimizer.models.enums import CompressionLevel, PresetName


class OptimizationPreset(BaseModel):
    """
    Immutable bundle of budgets and limits controlling context trimming.

    Instances are shared process-wide, so they are frozen: selecting a
    different preset swaps the reference, it never edits one in place.
    """

    model_config = {"frozen": True}

    name: PresetName
    max_context_tokens: int = Field(..., gt=0, description="Token budget for the assembled context")
    max_response_tokens: int = Field(..., gt=0, description="Token cap for the model reply")
    prioritize_recent: bool = Field(default=True, description="Recent order instead of relevance order")
    include_emotional_context: bool = Field(default=True)
    personal_fact_limit: int = Field(default=3, ge=0)
    conversation_limit: int = Field(default=4, ge=0)
    compression_level: CompressionLevel = CompressionLevel.LIGHT

    def summary(self) -> PresetSummary:
        return PresetSummary(
            name=self.name.value,
            max_context_tokens=self.max_context_tokens,
            max_response_tokens=self.max_response_tokens,
            personal_fact_limit=self.personal_fact_limit,
            conversation_limit=self.conversation_limit,
            compression_level=self.compression_level.value,
        )


class PresetSummary(MappingCompatModel):
    """Admin-facing view of a preset."""

    name: str
    max_context_tokens: int
    max_response_tokens: int
    personal_fact_limit: int
    conversation_limit: int
    compression_level: str


class ResponseConfig(MappingCompatModel):
    """Model-call settings derived from the active preset."""

    model: str
    max_tokens: int
    temperature: float
