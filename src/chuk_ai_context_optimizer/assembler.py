# chuk_ai_context_optimizer/assembler.py
"""
Context Assembler.

Builds the prompt body prepended to a user's message from a profile
snapshot, under the active preset's token budget:

1. Core identity (always included, never trimmed)
2. Personal details, from 30% of the remaining budget
3. Recent conversation, from 50% of what remains after step 2
4. Emotional context, from 20% of what remains after step 3
   (only when the preset allows it and the relationship is past the gate)

Each share is taken from the pool left at that step, not from the
original total, so later fragments see whatever earlier ones left over.
The joined fragments are then compressed at the preset's level.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.compressor import Compressor
from chuk_ai_context_optimizer.config import PERSONA_NAME
from chuk_ai_context_optimizer.constants import (
    CONVERSATION_BUDGET_SHARE,
    EMOTIONAL_BUDGET_SHARE,
    EMOTIONAL_RELATIONSHIP_GATE,
    FRAGMENT_SEPARATOR,
    FRIENDLY_TONE_CEILING,
    INTERACTION_MENTION_THRESHOLD,
    PERSONAL_BUDGET_SHARE,
    TONE_FRIENDLY,
    TONE_INTIMATE,
    TONE_WARM,
    WARM_TONE_CEILING,
)
from chuk_ai_context_optimizer.exceptions import InvalidPresetName
from chuk_ai_context_optimizer.models import OptimizationPreset, PresetName, UserProfile
from chuk_ai_context_optimizer.presets import PresetRegistry, get_preset_registry, resolve_preset
from chuk_ai_context_optimizer.selectors import (
    ConversationSelector,
    EmotionalContextSelector,
    PersonalDetailSelector,
)
from chuk_ai_context_optimizer.tokens import estimate_tokens

logger = logging.getLogger(__name__)


class AssemblerConfig(BaseModel):
    """Budget shares and identity settings for context assembly."""

    persona_name: str = Field(default=PERSONA_NAME)
    persona_traits: str = Field(default="analytical, playful AI companion")
    personal_share: float = Field(default=PERSONAL_BUDGET_SHARE, ge=0.0, le=1.0)
    conversation_share: float = Field(default=CONVERSATION_BUDGET_SHARE, ge=0.0, le=1.0)
    emotional_share: float = Field(default=EMOTIONAL_BUDGET_SHARE, ge=0.0, le=1.0)
    emotional_relationship_gate: int = Field(default=EMOTIONAL_RELATIONSHIP_GATE, ge=0, le=100)


class ContextAssembler:
    """
    Orchestrates fragment selection under one token budget.

    Stateless apart from its collaborators, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: AssemblerConfig | None = None,
        registry: PresetRegistry | None = None,
        personal_selector: PersonalDetailSelector | None = None,
        conversation_selector: ConversationSelector | None = None,
        emotional_selector: EmotionalContextSelector | None = None,
        compressor: Compressor | None = None,
    ) -> None:
        self.config = config or AssemblerConfig()
        self._registry = registry
        self.personal_selector = personal_selector or PersonalDetailSelector()
        self.conversation_selector = conversation_selector or ConversationSelector()
        self.emotional_selector = emotional_selector or EmotionalContextSelector()
        self.compressor = compressor or Compressor()

    @property
    def registry(self) -> PresetRegistry:
        return self._registry or get_preset_registry()

    def assemble(
        self,
        profile: UserProfile,
        reference_text: str | None,
        preset: OptimizationPreset | PresetName | str | None = None,
    ) -> str:
        """
        Assemble the prompt body for one message.

        Args:
            profile: Read-only snapshot of the user
            reference_text: The incoming message, used for relevance
            preset: A preset, a preset name, or None for the active preset;
                an unknown name falls back to the active preset

        Returns:
            The compressed context; never empty, always holds the core identity
        """
        # Captured once; a concurrent set_active cannot affect this call
        preset = self._capture_preset(preset)
        reference = reference_text or ""
        cfg = self.config

        core = self.build_core_identity(profile)
        fragments = [core]
        remaining = max(0, preset.max_context_tokens - estimate_tokens(core))

        personal = self.personal_selector.select(
            profile.personal_facts,
            reference,
            preset.personal_fact_limit,
            remaining * cfg.personal_share,
        )
        if personal:
            fragments.append(personal)
            remaining = max(0, remaining - estimate_tokens(personal))

        conversation = self.conversation_selector.select(
            profile.recent_exchanges,
            reference,
            preset.conversation_limit,
            remaining * cfg.conversation_share,
            prioritize_recent=preset.prioritize_recent,
        )
        if conversation:
            fragments.append(conversation)
            remaining = max(0, remaining - estimate_tokens(conversation))

        if preset.include_emotional_context and profile.relationship_level > cfg.emotional_relationship_gate:
            emotional = self.emotional_selector.select(
                profile.emotional_events,
                remaining * cfg.emotional_share,
            )
            if emotional:
                fragments.append(emotional)

        context = self.compressor.compress(FRAGMENT_SEPARATOR.join(fragments), preset.compression_level)
        logger.debug(
            "Assembled context for %s: preset=%s fragments=%d tokens=%d/%d",
            profile.display_name,
            preset.name.value,
            len(fragments),
            estimate_tokens(context),
            preset.max_context_tokens,
        )
        return context

    def build_core_identity(self, profile: UserProfile) -> str:
        """Persona, who we are talking to, tone for the relationship tier."""
        cfg = self.config
        parts = [f"You're {cfg.persona_name}: {cfg.persona_traits}. Talking to {profile.display_name or 'someone'}."]

        level = profile.relationship_level
        if level < FRIENDLY_TONE_CEILING:
            parts.append(TONE_FRIENDLY)
        elif level < WARM_TONE_CEILING:
            parts.append(TONE_WARM)
        else:
            parts.append(TONE_INTIMATE)

        if profile.total_interactions > INTERACTION_MENTION_THRESHOLD:
            parts.append(f"{profile.total_interactions} chats together.")

        return " ".join(parts)

    def _capture_preset(self, preset: OptimizationPreset | PresetName | str | None) -> OptimizationPreset:
        if preset is None:
            return self.registry.get_active()
        if isinstance(preset, OptimizationPreset):
            return preset
        try:
            return resolve_preset(preset)
        except InvalidPresetName:
            active = self.registry.get_active()
            logger.warning("Ignoring unknown preset override %r, using %s", preset, active.name.value)
            return active


_default_assembler = ContextAssembler()


def assemble(
    profile: UserProfile,
    message: str | None,
    preset: OptimizationPreset | PresetName | str | None = None,
) -> str:
    """Assemble with the process-wide registry and default settings."""
    return _default_assembler.assemble(profile, message, preset)
