# tests/test_assembler.py
"""
Tests for context assembly.

Covers:
- Core identity fragment (tone tiers, interaction mention)
- Sequential budget deduction across personal / conversation / emotional
- Emotional gating by preset and relationship level
- Preset capture: explicit preset, name override, registry active preset
- End-to-end budget guarantees for every preset
- Profile immutability and minimal profiles
"""

import pytest

from chuk_ai_context_optimizer import assemble
from chuk_ai_context_optimizer.assembler import AssemblerConfig, ContextAssembler
from chuk_ai_context_optimizer.exceptions import InvalidPresetName
from chuk_ai_context_optimizer.models import OptimizationPreset, PresetName
from chuk_ai_context_optimizer.presets import BALANCED, ECONOMY, PRESETS, get_preset_registry
from chuk_ai_context_optimizer.selectors import ConversationSelector, PersonalDetailSelector
from chuk_ai_context_optimizer.tokens import estimate_tokens

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingPersonalSelector(PersonalDetailSelector):
    """Records the budgets it is handed."""

    def __init__(self):
        super().__init__()
        self.budgets = []

    def select(self, facts, reference_text, max_count, token_budget):
        self.budgets.append(token_budget)
        return super().select(facts, reference_text, max_count, token_budget)


class RecordingConversationSelector(ConversationSelector):
    """Records the budgets it is handed."""

    def __init__(self):
        super().__init__()
        self.budgets = []

    def select(self, exchanges, reference_text, max_count, token_budget, prioritize_recent=True):
        self.budgets.append(token_budget)
        return super().select(exchanges, reference_text, max_count, token_budget, prioritize_recent)


# ===========================================================================
# TestCoreIdentity
# ===========================================================================


class TestCoreIdentity:
    """The always-present identity fragment."""

    @pytest.mark.parametrize(
        "level,marker",
        [(0, "friendly"), (19, "friendly"), (20, "warm"), (59, "warm"), (60, "intimate"), (100, "intimate")],
    )
    def test_tone_tiers(self, profile_factory, level, marker):
        core = ContextAssembler().build_core_identity(profile_factory(relationship_level=level))
        assert marker in core

    def test_interaction_count_only_when_significant(self, profile_factory):
        assembler = ContextAssembler()
        assert "chats together" not in assembler.build_core_identity(profile_factory(total_interactions=10))
        assert "11 chats together." in assembler.build_core_identity(profile_factory(total_interactions=11))

    def test_names_persona_and_user(self, profile_factory):
        assembler = ContextAssembler(AssemblerConfig(persona_name="Nova"))
        core = assembler.build_core_identity(profile_factory(display_name="Ava"))
        assert core.startswith("You're Nova:")
        assert "Talking to Ava." in core

    def test_missing_display_name(self, profile_factory):
        assert "Talking to someone." in ContextAssembler().build_core_identity(profile_factory(display_name=""))


# ===========================================================================
# TestBudgetFlow
# ===========================================================================


class TestBudgetFlow:
    """Shares come out of the pool remaining at each step."""

    def test_sequential_deduction(self, large_profile):
        personal = RecordingPersonalSelector()
        conversation = RecordingConversationSelector()
        assembler = ContextAssembler(personal_selector=personal, conversation_selector=conversation)
        message = "Tell me about programming"

        assembler.assemble(large_profile, message, BALANCED)

        core = assembler.build_core_identity(large_profile)
        remaining = BALANCED.max_context_tokens - estimate_tokens(core)
        assert personal.budgets == [pytest.approx(remaining * 0.3)]

        fragment = PersonalDetailSelector().select(
            large_profile.personal_facts, message, BALANCED.personal_fact_limit, remaining * 0.3
        )
        assert fragment is not None
        remaining -= estimate_tokens(fragment)
        assert conversation.budgets == [pytest.approx(remaining * 0.5)]

    def test_core_larger_than_budget(self, profile_factory):
        tiny = OptimizationPreset(name=PresetName.ECONOMY, max_context_tokens=5, max_response_tokens=10)
        profile = profile_factory(personal_facts=["Loves TypeScript"])
        result = ContextAssembler().assemble(profile, "TypeScript", tiny)
        assert "Known:" not in result
        assert "Ava" in result


# ===========================================================================
# TestEmotionalGate
# ===========================================================================


class TestEmotionalGate:
    """Emotional context needs the preset flag and relationship > 30."""

    def test_gate_boundary(self, profile_factory, event_factory):
        events = [event_factory(9, "Wedding day")]
        assembler = ContextAssembler()
        assert "Wedding day" not in assembler.assemble(
            profile_factory(relationship_level=30, emotional_events=events), "hi", BALANCED
        )
        assert "Wedding day" in assembler.assemble(
            profile_factory(relationship_level=31, emotional_events=events), "hi", BALANCED
        )

    def test_preset_without_emotional_context(self, profile_factory, event_factory):
        profile = profile_factory(relationship_level=90, emotional_events=[event_factory(9, "Wedding day")])
        assert "Wedding day" not in ContextAssembler().assemble(profile, "hi", "efficient")


# ===========================================================================
# TestPresetCapture
# ===========================================================================


class TestPresetCapture:
    """Which preset a call runs under."""

    def test_uses_registry_active(self, registry, large_profile):
        registry.set_active("economy")
        result = ContextAssembler(registry=registry).assemble(large_profile, "hello")
        assert estimate_tokens(result) <= ECONOMY.max_context_tokens
        assert result.count("User:") <= ECONOMY.conversation_limit

    def test_name_override(self, profile_factory):
        profile = profile_factory(personal_facts=["Really very nice person"])
        result = assemble(profile, "hello", "economy")
        assert "nice person" in result
        assert "Really" not in result

    def test_unknown_override_falls_back(self, profile_factory):
        profile = profile_factory(personal_facts=["Really very nice person"])
        result = assemble(profile, "hello", "turbo")
        assert "Really very nice person" in result

    def test_global_registry_change_applies_to_next_call(self, large_profile):
        before = assemble(large_profile, "hello")
        get_preset_registry().set_active("economy")
        after = assemble(large_profile, "hello")
        assert estimate_tokens(after) < estimate_tokens(before)


# ===========================================================================
# TestEndToEnd
# ===========================================================================


@pytest.mark.integration
class TestEndToEnd:
    """Full assembly scenarios."""

    def _ava(self, profile_factory):
        return profile_factory(
            display_name="Ava",
            relationship_level=85,
            total_interactions=15,
            personal_facts=["Loves TypeScript"],
        )

    def test_balanced_scenario(self, profile_factory):
        result = assemble(self._ava(profile_factory), "How are you?", "balanced")
        assert "Ava" in result
        assert "intimate" in result
        assert "15" in result
        assert "Loves TypeScript" in result
        assert estimate_tokens(result) <= BALANCED.max_context_tokens

    def test_economy_scenario(self, profile_factory):
        profile = self._ava(profile_factory)
        balanced = assemble(profile, "How are you?", "balanced")
        economy = assemble(profile, "How are you?", "economy")
        assert estimate_tokens(economy) <= ECONOMY.max_context_tokens
        assert estimate_tokens(economy) <= estimate_tokens(balanced)

    def test_empty_profile_yields_core_identity_only(self, profile_factory):
        profile = profile_factory()
        result = assemble(profile, "How are you?", "balanced")
        assert result
        assert result == ContextAssembler().build_core_identity(profile)

    def test_none_message(self, profile_factory):
        assert "Ava" in assemble(profile_factory(personal_facts=["Loves TypeScript"]), None)

    def test_invalid_level_keeps_active(self):
        registry = get_preset_registry()
        before = registry.get_active()
        with pytest.raises(InvalidPresetName):
            registry.set_active("nonexistent")
        assert registry.get_active() is before

    def test_emotional_intensity_filter(self, profile_factory, event_factory):
        events = [
            event_factory(3, "Bad commute"),
            event_factory(7, "Got a promotion"),
            event_factory(9, "Wedding day"),
        ]
        result = assemble(profile_factory(relationship_level=50, emotional_events=events), "hi", "balanced")
        assert "Got a promotion" in result
        assert "Wedding day" in result
        assert "Bad commute" not in result

    @pytest.mark.parametrize("name", list(PresetName))
    def test_large_profile_fits_every_preset(self, large_profile, name):
        result = assemble(large_profile, "Tell me about programming projects", name)
        assert estimate_tokens(result) <= PRESETS[name].max_context_tokens

    def test_relevance_mode(self, profile_factory, exchange_factory):
        preset = BALANCED.model_copy(update={"prioritize_recent": False, "conversation_limit": 1})
        exchanges = [exchange_factory("Weather chat today"), exchange_factory("Python decorators explained")]
        result = assemble(profile_factory(recent_exchanges=exchanges), "python decorators", preset)
        assert "Python decorators" in result
        assert "Weather" not in result

    def test_profile_not_mutated(self, large_profile):
        snapshot = large_profile.model_copy(deep=True)
        assemble(large_profile, "Tell me about programming")
        assert large_profile == snapshot
