"""SSML 1.0 baseline and platform presets."""

from typing import Any

from speechmarkup.models import CapabilityProfile

SSML_NAMESPACE = "http://www.w3.org/2001/10/synthesis"

SSML_1_0 = CapabilityProfile(
    speak={
        "version": "1.0",
        "xmlns": SSML_NAMESPACE,
        "lang": "en-US",
        "base": False,
    },
    lang=True,
    p=True,
    s=True,
    sayAs=True,
    phoneme=True,
    prosody=True,
    sub=True,
    emphasis=True,
    audio={"children": True},
    **{"break": True},
)

# Overrides applied on top of the baseline, top-level keys only.
PRESET_OVERRIDES: dict[str, dict[str, Any]] = {
    "default": {
        "speak": {},
    },
    # Amazon Alexa
    "alexa": {
        "speak": {},
        "lang": False,
        "audio": {"children": False},
        "w": True,
        "effect": "amazon:effect",
    },
    # Google Assistant
    "google": {
        "speak": {},
        "phoneme": False,
        "prosody": False,
    },
    # Microsoft Cortana requires the full root attributes
    "cortana": {
        "emphasis": False,
    },
}

PRESETS: dict[str, CapabilityProfile] = {
    name: SSML_1_0.merge(overrides) for name, overrides in PRESET_OVERRIDES.items()
}

DEFAULT_PRESET = "default"


def get_preset(name: str) -> CapabilityProfile:
    """
    Look up a preset by name.

    Raises:
        KeyError: If no preset with that name exists.
    """
    return PRESETS[name.lower()]


def available_presets() -> list[str]:
    """Names of all known presets."""
    return sorted(PRESETS)
