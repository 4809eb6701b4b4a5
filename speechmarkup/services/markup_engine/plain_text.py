"""Render a markup tree as plain spoken text."""

from xml.etree.ElementTree import Element

PARAGRAPH_BREAK = "\n\n"


def render_plain_text(element: Element) -> str:
    """
    Concatenate the text of a markup tree, dropping all tags.

    Adjacent fragments that would otherwise run together are joined with
    a space, and every paragraph is followed by a blank line.

    Args:
        element: Root of the tree, usually the <speak> element

    Returns:
        Plain text with leading and trailing whitespace removed
    """
    return _render(element).strip()


def _render(element: Element) -> str:
    rendered = _join("", element.text or "")
    for child in element:
        rendered = _join(rendered, _render(child))
        rendered = _join(rendered, child.tail or "")

    if element.tag.lower() == "p":
        rendered = _join(rendered, PARAGRAPH_BREAK)
    return rendered


def _join(left: str, right: str) -> str:
    if left[-1:].strip() and right[:1].strip():
        return f"{left} {right}"
    return left + right
