# chuk_ai_context_optimizer/presets.py
"""
Optimization presets and the process-wide active preset.

Presets are frozen constants. The only mutable state is which preset is
active, held by ActivePresetState as a single reference that is replaced
wholesale, so a reader sees either the old or the new preset in full.
Assembly captures the active preset once at entry.

Usage::

    from chuk_ai_context_optimizer.presets import get_preset_registry

    registry = get_preset_registry()
    preset = registry.get_active()
    registry.set_active("economy")
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType

from chuk_ai_context_optimizer.config import DEFAULT_PRESET_NAME
from chuk_ai_context_optimizer.exceptions import InvalidPresetName
from chuk_ai_context_optimizer.models import (
    ALL_PRESET_NAMES,
    CompressionLevel,
    OptimizationPreset,
    PresetName,
    PresetSummary,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Named presets
# =============================================================================

BALANCED = OptimizationPreset(
    name=PresetName.BALANCED,
    max_context_tokens=1500,
    max_response_tokens=300,
    prioritize_recent=True,
    include_emotional_context=True,
    personal_fact_limit=3,
    conversation_limit=4,
    compression_level=CompressionLevel.LIGHT,
)

EFFICIENT = OptimizationPreset(
    name=PresetName.EFFICIENT,
    max_context_tokens=1000,
    max_response_tokens=200,
    prioritize_recent=True,
    include_emotional_context=False,
    personal_fact_limit=2,
    conversation_limit=3,
    compression_level=CompressionLevel.LIGHT,
)

ECONOMY = OptimizationPreset(
    name=PresetName.ECONOMY,
    max_context_tokens=600,
    max_response_tokens=150,
    prioritize_recent=True,
    include_emotional_context=False,
    personal_fact_limit=1,
    conversation_limit=2,
    compression_level=CompressionLevel.AGGRESSIVE,
)

PRESETS: MappingProxyType[PresetName, OptimizationPreset] = MappingProxyType(
    {
        PresetName.BALANCED: BALANCED,
        PresetName.EFFICIENT: EFFICIENT,
        PresetName.ECONOMY: ECONOMY,
    }
)

# Expected cost reduction per preset (shown in admin help text)
EXPECTED_SAVINGS: MappingProxyType[PresetName, str] = MappingProxyType(
    {
        PresetName.BALANCED: "20-30%",
        PresetName.EFFICIENT: "40-50%",
        PresetName.ECONOMY: "60-70%",
    }
)


def resolve_preset(name: str | PresetName) -> OptimizationPreset:
    """Look up a preset by name (case-insensitive); raises InvalidPresetName."""
    if isinstance(name, PresetName):
        return PRESETS[name]
    if isinstance(name, str):
        key = name.strip().lower()
        if key in ALL_PRESET_NAMES:
            return PRESETS[PresetName(key)]
    raise InvalidPresetName(name, ALL_PRESET_NAMES)


# =============================================================================
# Active preset state
# =============================================================================


class ActivePresetState:
    """Holds the reference to the active preset; swaps are atomic."""

    def __init__(self, preset: OptimizationPreset = BALANCED) -> None:
        self._preset = preset
        self._lock = threading.Lock()

    @property
    def preset(self) -> OptimizationPreset:
        return self._preset

    def swap(self, preset: OptimizationPreset) -> OptimizationPreset:
        """Replace the active preset and return the previous one."""
        with self._lock:
            previous = self._preset
            self._preset = preset
        return previous


class PresetRegistry:
    """Named presets plus the active selection."""

    def __init__(self, initial: str | PresetName = PresetName.BALANCED) -> None:
        self._state = ActivePresetState(resolve_preset(initial))

    def get_active(self) -> OptimizationPreset:
        """Return the active preset. Presets are frozen, so the caller owns a stable copy."""
        return self._state.preset

    def set_active(self, name: str | PresetName) -> OptimizationPreset:
        """Make ``name`` the active preset; on InvalidPresetName nothing changes."""
        preset = resolve_preset(name)
        previous = self._state.swap(preset)
        logger.info(
            "Token optimization level changed from %s to %s",
            previous.name.value,
            preset.name.value,
        )
        return preset

    def get(self, name: str | PresetName) -> OptimizationPreset:
        return resolve_preset(name)

    def names(self) -> list[str]:
        return list(ALL_PRESET_NAMES)

    def summary(self) -> PresetSummary:
        """Admin-facing view of the active preset."""
        return self.get_active().summary()


# =============================================================================
# Process-wide registry
# =============================================================================

_registry: PresetRegistry | None = None
_registry_lock = threading.Lock()


def _initial_preset_name() -> str:
    if DEFAULT_PRESET_NAME in ALL_PRESET_NAMES:
        return DEFAULT_PRESET_NAME
    logger.warning(
        "Unknown preset %r in CHUK_CONTEXT_PRESET, falling back to %s",
        DEFAULT_PRESET_NAME,
        PresetName.BALANCED.value,
    )
    return PresetName.BALANCED.value


def get_preset_registry() -> PresetRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = PresetRegistry(_initial_preset_name())
    return _registry


def reset_preset_registry() -> None:
    """Drop the process-wide registry so the next call starts from the default."""
    global _registry
    with _registry_lock:
        _registry = None
