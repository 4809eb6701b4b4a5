"""URL helpers."""

from typing import Optional
from urllib.parse import urljoin


def resolve_url(base: Optional[str], href: str) -> str:
    """
    Resolve a possibly relative URL against a base.

    Args:
        base: Base URL, or None to keep ``href`` as given
        href: Absolute or relative URL

    Returns:
        Resolved URL
    """
    return urljoin(base or "", href)
