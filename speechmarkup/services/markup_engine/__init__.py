"""Markup building engine."""

from .builder import SpeechBuilder, create_builder
from .plain_text import render_plain_text

__all__ = ["SpeechBuilder", "create_builder", "render_plain_text"]
