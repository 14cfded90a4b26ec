# chuk_ai_context_optimizer/analytics.py
"""
Token, cost, and quality analytics for a completed model call.

Run by the caller after the model responds; nothing here is persisted.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.config import INPUT_COST_PER_MILLION
from chuk_ai_context_optimizer.constants import (
    OUTPUT_COST_MULTIPLIER,
    QUALITY_FLOOR,
    QUALITY_PENALTY_PER_REDUCTION,
)
from chuk_ai_context_optimizer.models import TokenAnalytics
from chuk_ai_context_optimizer.presets import PresetRegistry, get_preset_registry
from chuk_ai_context_optimizer.tokens import estimate_tokens

logger = logging.getLogger(__name__)


class PricingConfig(BaseModel):
    """Per-token pricing and quality-estimate parameters."""

    input_cost_per_token: float = Field(default=INPUT_COST_PER_MILLION / 1_000_000, ge=0.0)
    output_cost_multiplier: float = Field(default=OUTPUT_COST_MULTIPLIER, ge=0.0)
    quality_floor: float = Field(default=QUALITY_FLOOR, ge=0.0, le=1.0)
    quality_penalty: float = Field(default=QUALITY_PENALTY_PER_REDUCTION, ge=0.0)

    @property
    def output_cost_per_token(self) -> float:
        return self.input_cost_per_token * self.output_cost_multiplier


class AnalyticsCalculator:
    """Computes TokenAnalytics from the texts of one model call."""

    def __init__(
        self,
        pricing: PricingConfig | None = None,
        registry: PresetRegistry | None = None,
    ) -> None:
        self.pricing = pricing or PricingConfig()
        self._registry = registry

    @property
    def registry(self) -> PresetRegistry:
        return self._registry or get_preset_registry()

    def analyze(
        self,
        input_text: str | None,
        output_text: str | None,
        original_input_text: str | None = None,
        preset_name: str | None = None,
    ) -> TokenAnalytics:
        """
        Analyze one call.

        Args:
            input_text: The optimized prompt that was sent
            output_text: The model reply
            original_input_text: The unoptimized prompt, if known
            preset_name: Preset the call ran under; defaults to the active preset

        Returns:
            TokenAnalytics; the reduction ratio is 0 without an original
        """
        pricing = self.pricing
        if preset_name is None:
            preset_name = self.registry.get_active().name.value
        input_tokens = estimate_tokens(input_text)
        output_tokens = estimate_tokens(output_text)

        estimated_cost = input_tokens * pricing.input_cost_per_token + output_tokens * pricing.output_cost_per_token

        reduction = 0.0
        original_tokens = estimate_tokens(original_input_text)
        if original_tokens > 0:
            reduction = max(0.0, 1.0 - input_tokens / original_tokens)

        quality = max(pricing.quality_floor, 1.0 - reduction * pricing.quality_penalty)

        analytics = TokenAnalytics(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
            estimated_cost=estimated_cost,
            context_reduction_ratio=reduction,
            quality_score=min(1.0, quality),
            optimization_level=preset_name,
        )
        logger.debug(
            "Token analytics: %d in, %d out, $%.6f, reduction %.2f",
            input_tokens,
            output_tokens,
            estimated_cost,
            reduction,
        )
        return analytics


_default_calculator = AnalyticsCalculator()


def analyze(
    input_text: str | None,
    output_text: str | None,
    original_input_text: str | None = None,
    preset_name: str | None = None,
) -> TokenAnalytics:
    """Analyze with default pricing."""
    return _default_calculator.analyze(input_text, output_text, original_input_text, preset_name)
