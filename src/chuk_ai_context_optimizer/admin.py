# chuk_ai_context_optimizer/admin.py
"""
Admin-facing operations on the active optimization preset.

The chat layer parses commands and checks permissions; these functions
produce the reply text. ``change_level`` lets InvalidPresetName propagate
so the caller can show the operator the valid options.
"""

from __future__ import annotations

from chuk_ai_context_optimizer.config import DEFAULT_TOKEN_MODEL
from chuk_ai_context_optimizer.constants import DEFAULT_TEMPERATURE
from chuk_ai_context_optimizer.models import PresetName, PresetSummary, ResponseConfig
from chuk_ai_context_optimizer.presets import EXPECTED_SAVINGS, PresetRegistry, get_preset_registry

_LEVEL_DESCRIPTIONS: dict[PresetName, str] = {
    PresetName.BALANCED: "Good quality, moderate savings",
    PresetName.EFFICIENT: "Significant savings, good quality",
    PresetName.ECONOMY: "Maximum savings",
}


def _settings_lines(summary: PresetSummary) -> list[str]:
    return [
        f"- Max Context Tokens: {summary.max_context_tokens}",
        f"- Max Response Tokens: {summary.max_response_tokens}",
        f"- Personal Details Limit: {summary.personal_fact_limit}",
        f"- Recent Messages Limit: {summary.conversation_limit}",
        f"- Compression: {summary.compression_level}",
    ]


def show_settings(registry: PresetRegistry | None = None) -> str:
    """Describe the active preset."""
    summary = (registry or get_preset_registry()).summary()
    lines = ["Current Optimization Settings:", f"- Level: {summary.name}", *_settings_lines(summary)]
    lines.append("")
    lines.append(f"Change with: optimize [{'|'.join(name.value for name in PresetName)}]")
    return "\n".join(lines)


def change_level(name: str, registry: PresetRegistry | None = None) -> str:
    """Switch the active preset and describe the new settings."""
    preset = (registry or get_preset_registry()).set_active(name)
    summary = preset.summary()
    lines = [f"Optimization level changed to: {summary.name}", "", "New Settings:", *_settings_lines(summary)]
    lines.append("")
    lines.append("Changes take effect for the next message.")
    return "\n".join(lines)


def help_text() -> str:
    """List the available levels with their expected savings."""
    lines = ["Optimization Levels:"]
    for name in PresetName:
        default = " (default)" if name == PresetName.BALANCED else ""
        lines.append(f"- {name.value}{default}: {_LEVEL_DESCRIPTIONS[name]} ({EXPECTED_SAVINGS[name]})")
    return "\n".join(lines)


def response_config(registry: PresetRegistry | None = None) -> ResponseConfig:
    """Model-call settings for the active preset."""
    preset = (registry or get_preset_registry()).get_active()
    return ResponseConfig(
        model=DEFAULT_TOKEN_MODEL,
        max_tokens=preset.max_response_tokens,
        temperature=DEFAULT_TEMPERATURE,
    )
