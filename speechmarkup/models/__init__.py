"""Data models for speech markup generation."""

from .enums import DEFAULT_ALPHABET, SUB_ALPHABET, EmphasisLevel, Feature, PauseStrength
from .options import AudioSource, BuilderOptions, Pronunciation
from .profile import AudioCapability, CapabilityProfile, SpeakAttributes

__all__ = [
    # Enums
    "Feature",
    "PauseStrength",
    "EmphasisLevel",
    "SUB_ALPHABET",
    "DEFAULT_ALPHABET",
    # Profile
    "CapabilityProfile",
    "SpeakAttributes",
    "AudioCapability",
    # Options
    "BuilderOptions",
    "AudioSource",
    "Pronunciation",
]
