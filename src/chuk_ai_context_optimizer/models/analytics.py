# chuk_ai_context_optimizer/models/analytics.py
"""Per-call token and cost analytics."""

from pydantic import Field

from chuk_ai_context_optimizer.base_models import MappingCompatModel


class TokenAnalytics(MappingCompatModel):
    """Token usage, cost, and estimated quality for one model call."""

    input_tokens: int = Field(default=0, ge=0, description="Tokens sent to the model")
    output_tokens: int = Field(default=0, ge=0, description="Tokens received from the model")
    total_tokens: int = Field(default=0, ge=0)
    estimated_cost: float = Field(default=0.0, ge=0.0, description="Estimated cost in USD")
    context_reduction_ratio: float = Field(default=0.0, ge=0.0, le=1.0, description="Fraction of input removed (0-1)")
    quality_score: float = Field(default=1.0, ge=0.0, le=1.0, description="Estimated quality preservation (0.4-1)")
    optimization_level: str | None = Field(default=None, description="Preset the call ran under")

