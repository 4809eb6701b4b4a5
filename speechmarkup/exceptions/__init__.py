"""Custom exceptions for speech markup generation."""

from .errors import ConfigurationError, SpeechMarkupError

__all__ = [
    "SpeechMarkupError",
    "ConfigurationError",
]
