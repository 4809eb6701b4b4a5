"""
Thin adapter over xml.etree.ElementTree for building markup trees.

ElementTree keeps character data on ``text`` and ``tail`` instead of in
separate text nodes. The helpers here hide that: text appended to an
element lands after its last child, which is where a text node would go.
"""

import copy
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Mapping, Optional

INDENT = "  "


def create_root(name: str) -> ET.Element:
    """Create a detached root element."""
    return ET.Element(name)


def append_element(
    parent: ET.Element,
    name: str,
    attributes: Optional[Mapping[str, Any]] = None,
    text: Any = None,
) -> ET.Element:
    """Append a child element, optionally with text content."""
    attrib = {key: _attribute_value(value) for key, value in (attributes or {}).items()}
    child = ET.SubElement(parent, name, attrib)
    if text is not None:
        child.text = str(text)
    return child


def set_attribute(element: ET.Element, name: str, value: Any) -> None:
    element.set(name, _attribute_value(value))


def append_text(element: ET.Element, text: Any) -> None:
    """Append character data after the element's current content."""
    text = str(text)
    if not text:
        return
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text


def trailing_text(element: ET.Element) -> Optional[str]:
    """
    Text of the element's last text node.

    Returns None when the element is empty or ends with a child element.
    """
    if len(element):
        return element[-1].tail or None
    return element.text or None


def serialize(element: ET.Element, pretty: bool = False) -> str:
    """Render an element and its subtree as markup."""
    if pretty:
        element = copy.deepcopy(element)
        ET.indent(element, space=INDENT)
    return ET.tostring(element, encoding="unicode")


def _attribute_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)
