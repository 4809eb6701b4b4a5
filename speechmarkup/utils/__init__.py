"""Utility functions for speech markup generation."""

from .urls import resolve_url
from .variations import chance, random_choice, random_item

__all__ = [
    "resolve_url",
    "chance",
    "random_choice",
    "random_item",
]
