# chuk_ai_context_optimizer/tokens.py
"""Approximate token counting (characters per token, rounded up)."""

from __future__ import annotations

import math

from chuk_ai_context_optimizer.config import CHARS_PER_TOKEN


def estimate_tokens(text: str | None, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    """Estimate the token cost of ``text``; ``None`` and ``""`` cost nothing."""
    if not text:
        return 0
    return math.ceil(len(text) / chars_per_token)
