"""Pytest fixtures for speech markup tests."""

import pytest

from speechmarkup import SpeechBuilder, create_builder
from speechmarkup.config import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep environment variables from leaking into cached settings."""
    for name in ("PRESET", "BASE_URL", "LANGUAGE", "PRETTY", "STRICT"):
        monkeypatch.delenv(f"SPEECHMARKUP_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings targeting Alexa with a base URL."""
    return Settings(
        preset="alexa",
        base_url="https://cdn.example.com/sounds/",
        language="en-GB",
    )


@pytest.fixture
def speech() -> SpeechBuilder:
    """Builder with the default preset."""
    return create_builder()


@pytest.fixture
def alexa() -> SpeechBuilder:
    """Builder targeting Amazon Alexa."""
    return create_builder("alexa")


@pytest.fixture
def google() -> SpeechBuilder:
    """Builder targeting Google Assistant."""
    return create_builder("google")


@pytest.fixture
def sample_lexicon() -> dict:
    """Lexicon mixing IPA strings and substitution fallbacks."""
    return {
        "foo": "fu",
        "bar": {"sub": "ba"},
        "GIF": {"x-sampa": "dZIf", "ipa": "dʒɪf"},
    }
