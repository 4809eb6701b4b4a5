"""Tests for plain text rendering and the tree adapter."""

import xml.etree.ElementTree as ET

from speechmarkup import render_plain_text
from speechmarkup.services.markup_engine import tree


class TestTree:
    """Test suite for the ElementTree adapter."""

    def test_append_text_before_children(self):
        root = tree.create_root("speak")
        tree.append_text(root, "a")
        tree.append_text(root, "b")
        assert root.text == "ab"
        assert tree.trailing_text(root) == "ab"

    def test_append_text_after_child(self):
        root = tree.create_root("speak")
        tree.append_text(root, "a")
        tree.append_element(root, "break")
        assert tree.trailing_text(root) is None
        tree.append_text(root, "b")
        assert root[0].tail == "b"
        assert tree.trailing_text(root) == "b"

    def test_empty_element_has_no_trailing_text(self):
        assert tree.trailing_text(tree.create_root("speak")) is None

    def test_attribute_values_are_strings(self):
        root = tree.create_root("speak")
        child = tree.append_element(root, "say-as", {"detail": 2}, 12)
        assert child.get("detail") == "2"
        assert child.text == "12"


class TestRenderPlainText:
    """Test suite for render_plain_text."""

    def test_text_only(self):
        assert render_plain_text(ET.fromstring("<speak> hello </speak>")) == "hello"

    def test_fragments_are_spaced(self):
        root = ET.fromstring("<speak>one<sub alias='1'>two</sub>three</speak>")
        assert render_plain_text(root) == "one two three"

    def test_existing_whitespace_is_kept(self):
        root = ET.fromstring("<speak>one <emphasis>two</emphasis> three</speak>")
        assert render_plain_text(root) == "one two three"

    def test_paragraph_break(self):
        root = ET.fromstring("<speak><P>one</P><p><s>two</s><s>three</s></p></speak>")
        assert render_plain_text(root) == "one\n\ntwo three"

    def test_empty_elements(self):
        root = ET.fromstring("<speak>wait<break time='1s'/>go</speak>")
        assert render_plain_text(root) == "wait go"
