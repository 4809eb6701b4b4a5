"""Helpers for varying spoken responses between requests."""

import random
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")


def random_choice(*items: T) -> Optional[T]:
    """Return one of the arguments at random, or None without arguments."""
    return random_item(items)


def random_item(items: Optional[Sequence[T]]) -> Optional[T]:
    """Return a random item of a sequence, or None if it is empty or None."""
    if not items:
        return None
    return items[int(random.random() * len(items))]


def chance(probability: float = 0.5, value: Any = True) -> Any:
    """
    Return ``value`` with the given probability, ``False`` otherwise.

    Example:
        >>> speech.add(chance(0.3, "By the way,"))
    """
    return value if probability > random.random() else False
