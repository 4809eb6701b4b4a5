"""Capability profiles, presets and option resolution."""

from .presets import PRESETS, SSML_1_0, available_presets, get_preset
from .resolver import configure, options_from_settings, resolve_profile

__all__ = [
    "PRESETS",
    "SSML_1_0",
    "available_presets",
    "get_preset",
    "configure",
    "options_from_settings",
    "resolve_profile",
]
