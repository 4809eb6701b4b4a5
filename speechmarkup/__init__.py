"""Feature-gated SSML builder for text-to-speech platforms."""

from .exceptions import ConfigurationError, SpeechMarkupError
from .models import (
    AudioCapability,
    AudioSource,
    BuilderOptions,
    CapabilityProfile,
    EmphasisLevel,
    Feature,
    PauseStrength,
    SpeakAttributes,
)
from .services import SpeechBuilder, configure, create_builder, render_plain_text, resolve_profile
from .services.capabilities import PRESETS, SSML_1_0, available_presets
from .utils import chance, random_choice, random_item

__version__ = "1.0.0"

__all__ = [
    # Builder
    "SpeechBuilder",
    "create_builder",
    "configure",
    "resolve_profile",
    "render_plain_text",
    # Profiles
    "CapabilityProfile",
    "SpeakAttributes",
    "AudioCapability",
    "PRESETS",
    "SSML_1_0",
    "available_presets",
    # Models
    "BuilderOptions",
    "AudioSource",
    "Feature",
    "PauseStrength",
    "EmphasisLevel",
    # Errors
    "SpeechMarkupError",
    "ConfigurationError",
    # Variations
    "chance",
    "random_choice",
    "random_item",
]
