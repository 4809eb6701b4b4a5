"""Services for speech markup generation."""

from .capabilities import configure, resolve_profile
from .markup_engine import SpeechBuilder, create_builder, render_plain_text

__all__ = ["configure", "resolve_profile", "SpeechBuilder", "create_builder", "render_plain_text"]
