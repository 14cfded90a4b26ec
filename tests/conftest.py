# tests/conftest.py
"""
Shared pytest fixtures and configuration for chuk_ai_context_optimizer tests.

Profiles are built through small factories so each test states only the
fields it cares about.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from chuk_ai_context_optimizer.models import (
    EmotionalEvent,
    EmotionCategory,
    RecentExchange,
    UserProfile,
)
from chuk_ai_context_optimizer.presets import PresetRegistry, reset_preset_registry

# Configure logging for tests
logging.basicConfig(level=logging.WARNING)
logging.getLogger("chuk_ai_context_optimizer").setLevel(logging.DEBUG)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_exchange(user_text: str, model_text: str = "Sure thing.", minutes_ago: int = 0) -> RecentExchange:
    return RecentExchange(
        timestamp=BASE_TIME - timedelta(minutes=minutes_ago),
        user_text=user_text,
        model_text=model_text,
        token_count=(len(user_text) + len(model_text)) // 4,
    )


def make_event(
    intensity: int,
    summary: str = "Something happened",
    category: EmotionCategory = EmotionCategory.SIGNIFICANT,
    minutes_ago: int = 0,
) -> EmotionalEvent:
    return EmotionalEvent(
        timestamp=BASE_TIME - timedelta(minutes=minutes_ago),
        category=category,
        summary=summary,
        intensity=intensity,
    )


def make_profile(**overrides) -> UserProfile:
    data = {
        "user_id": "123456789012345678",
        "display_name": "Ava",
        "relationship_level": 50,
        "total_interactions": 5,
        "personal_facts": [],
        "recent_exchanges": [],
        "emotional_events": [],
    }
    data.update(overrides)
    return UserProfile(**data)


def make_large_profile(**overrides) -> UserProfile:
    """Profile at the persistence caps: 20 facts, 8 exchanges, 15 events."""
    facts = [f"Personal detail number {i:02d} about hobbies and work" for i in range(20)]
    exchanges = [
        make_exchange(f"Message {i} about programming and projects", f"Reply {i} with some thoughts", minutes_ago=i)
        for i in range(8)
    ]
    events = [make_event(intensity=(i % 10) + 1, summary=f"Event {i}", minutes_ago=i) for i in range(15)]
    data = {
        "relationship_level": 75,
        "total_interactions": 250,
        "personal_facts": facts,
        "recent_exchanges": exchanges,
        "emotional_events": events,
    }
    data.update(overrides)
    return make_profile(**data)


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def exchange_factory():
    return make_exchange


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def large_profile():
    return make_large_profile()


@pytest.fixture
def registry():
    """A private registry so tests never leak the active preset."""
    return PresetRegistry()


@pytest.fixture(autouse=True)
def _fresh_global_registry():
    reset_preset_registry()
    yield
    reset_preset_registry()


# Test markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: End-to-end assembly tests")
