from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from chuk_ai_context_optimizer.constants import (
    DEFAULT_CHARS_PER_TOKEN,
    DEFAULT_INPUT_COST_PER_MILLION,
)

logger = logging.getLogger(__name__)

load_dotenv()


def env_int(name: str, default: int) -> int:
    """Integer environment override; malformed values log a warning and use ``default``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


def env_float(name: str, default: float) -> float:
    """Float environment override; malformed values log a warning and use ``default``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


# Central model config: can be overridden by environment variable
DEFAULT_TOKEN_MODEL = os.getenv("CHUK_DEFAULT_MODEL", "claude-sonnet-4-20250514")

# Preset active at process start
DEFAULT_PRESET_NAME = os.getenv("CHUK_CONTEXT_PRESET", "balanced").strip().lower()

# Persona named in the core identity fragment
PERSONA_NAME = os.getenv("CHUK_CONTEXT_PERSONA", "Albedo")

INPUT_COST_PER_MILLION = env_float("CHUK_INPUT_COST_PER_MILLION", DEFAULT_INPUT_COST_PER_MILLION)

CHARS_PER_TOKEN = max(1, env_int("CHUK_CHARS_PER_TOKEN", DEFAULT_CHARS_PER_TOKEN))
