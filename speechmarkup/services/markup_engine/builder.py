"""Feature-gated speech markup builder."""

import logging
import re
from typing import Any, Mapping, Optional, Union
from xml.etree.ElementTree import Element

from speechmarkup.models import (
    DEFAULT_ALPHABET,
    SUB_ALPHABET,
    AudioSource,
    BuilderOptions,
    EmphasisLevel,
    Feature,
    PauseStrength,
    Pronunciation,
)
from speechmarkup.services.capabilities import configure
from speechmarkup.utils.urls import resolve_url

from . import plain_text, tree

logger = logging.getLogger(__name__)


class SpeechBuilder:
    """
    Composes speech markup for one target platform.

    Each builder wraps one element of the output tree. Every markup
    operation checks the capability profile first and, when the platform
    lacks the feature, degrades to plain text or an alternate construct
    instead of failing. Operations return the builder for chaining;
    nested scopes (p, s, w, emphasis, effect) return the outer builder.

    Example:
        >>> speech = create_builder("alexa")
        >>> speech.add("Hello").break_(300).emphasis("world")
    """

    ROOT_TAG = "speak"
    LANG_SCOPES = ("speak", "p", "s", "voice")
    DIGIT_PATTERN = re.compile(r"\d")

    def __init__(self, options: BuilderOptions, element: Optional[Element] = None):
        self.options = options
        self.features = options.features

        if element is None:
            element = tree.create_root(self.ROOT_TAG)
            self._set_root_attributes(element)
        self.element = element

        self.lang(options.lang or self.features.speak.lang)
        self._lexicon_pattern = self._compile_lexicon()

    def _set_root_attributes(self, element: Element) -> None:
        speak = self.features.speak
        if speak.version:
            tree.set_attribute(element, "version", speak.version)
        if speak.xmlns:
            tree.set_attribute(element, "xmlns", speak.xmlns)
        if self.options.base and speak.base:
            tree.set_attribute(element, "xml:base", self.options.base)

    def _compile_lexicon(self) -> Optional[re.Pattern]:
        if not self.options.lexicon:
            return None
        # Longest words first so "New York" wins over "New"
        words = sorted((word for word in self.options.lexicon if word), key=len, reverse=True)
        if not words:
            return None
        alternation = "|".join(re.escape(word) for word in words)
        # Text between lexicon words is matched as one run
        return re.compile(f"({alternation})|((?:(?!{alternation}).)+)", re.DOTALL)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def lang(self, tag: Optional[str]) -> "SpeechBuilder":
        """
        Set xml:lang on the current element.

        No-op unless the platform supports it and the element is one of
        speak, p, s or voice.
        """
        if tag and self.features.lang and self.element.tag in self.LANG_SCOPES:
            tree.set_attribute(self.element, "xml:lang", tag)
        return self

    def add_text(self, text: Union[str, int, float]) -> "SpeechBuilder":
        """Append text as-is, without word spacing or lexicon lookups."""
        tree.append_text(self.element, text)
        return self

    def add_token(self, text: Union[str, int, float]) -> "SpeechBuilder":
        """
        Append a word or phrase, separated from preceding text by a space.

        The space is skipped when the text starts with whitespace or the
        preceding text already ends with whitespace or an element. Words
        found in the lexicon are emitted as <phoneme> or <sub>.
        """
        text = str(text)
        if not text:
            return self

        self._space_before(text)
        if self._lexicon_pattern is None:
            tree.append_text(self.element, text)
            return self

        for match in self._lexicon_pattern.finditer(text):
            word, literal = match.groups()
            if word is None:
                tree.append_text(self.element, literal)
                continue
            pronunciation = self.options.lexicon.get(word)
            if not (pronunciation and self._pronounce(word, pronunciation)):
                tree.append_text(self.element, word)
        return self

    def add(self, content: Any) -> "SpeechBuilder":
        """
        Add content of any supported kind.

        Args:
            content: A callable invoked with this builder, a list or tuple
                of content, or a string or number. Anything else is ignored.
        """
        if callable(content):
            content(self)
        elif isinstance(content, (list, tuple)):
            for item in content:
                self.add(item)
        elif isinstance(content, (str, int, float)) and not isinstance(content, bool):
            self.add_token(content)
        return self

    def _space_before(self, text: str) -> None:
        if text[:1].isspace():
            return
        previous = tree.trailing_text(self.element)
        if previous and not previous[-1].isspace():
            tree.append_text(self.element, " ")

    # ------------------------------------------------------------------
    # Pronunciation
    # ------------------------------------------------------------------

    def sub(self, text: str, alias: str) -> "SpeechBuilder":
        """Add a <sub> tag, or the alias as plain text if unsupported."""
        if not self.features.sub:
            return self.add(alias)
        tree.append_element(self.element, "sub", {"alias": alias}, text)
        return self

    def phoneme(self, text: str, pronunciation: Pronunciation) -> "SpeechBuilder":
        """
        Add a <phoneme> tag.

        Args:
            text: Written form
            pronunciation: IPA string, or a map of alphabet -> notation.
                The first alphabet the platform accepts is used; the
                special ``sub`` alphabet produces a <sub> tag instead.
                Without an accepted alphabet the text is added through ``add_token``.
        """
        if not self._pronounce(text, pronunciation):
            self.add_token(text)
        return self

    def _pronounce(self, text: str, pronunciation: Pronunciation) -> bool:
        if isinstance(pronunciation, Mapping):
            notations = pronunciation
        else:
            notations = {DEFAULT_ALPHABET: pronunciation}

        alphabet = next((a for a in self.features.alphabets if a in notations), None)
        if alphabet is None:
            return False

        if alphabet == SUB_ALPHABET:
            self.sub(text, notations[alphabet])
        else:
            tree.append_element(
                self.element,
                "phoneme",
                {"alphabet": alphabet, "ph": notations[alphabet]},
                text,
            )
        return True

    def say_as(
        self,
        interpret_as: str,
        text: Union[str, int, float],
        format: Optional[str] = None,
        detail: Union[str, int, None] = None,
    ) -> "SpeechBuilder":
        """Add a <say-as> tag, or the text as-is if unsupported."""
        if not self.features.say_as:
            return self.add(text)
        attributes = {"interpret-as": interpret_as}
        if format:
            attributes["format"] = format
        if detail:
            attributes["detail"] = detail
        tree.append_element(self.element, "say-as", attributes, text)
        return self

    # ------------------------------------------------------------------
    # Timing and sound
    # ------------------------------------------------------------------

    def break_(self, time: Union[str, int, float, PauseStrength, None] = None) -> "SpeechBuilder":
        """
        Add a <break> tag. No-op if unsupported.

        Args:
            time: Milliseconds as a number, a duration such as "2s", or a
                strength such as "x-strong". Omit for a default pause.
        """
        if not self.features.break_:
            return self

        attributes = {}
        if time:
            if isinstance(time, PauseStrength):
                time = time.value
            elif isinstance(time, (int, float)):
                time = f"{time}ms"
            kind = "time" if self.DIGIT_PATTERN.search(time) else "strength"
            attributes[kind] = time
        tree.append_element(self.element, "break", attributes)
        return self

    def prosody(self, attributes: Mapping[str, Any], text: Any) -> "SpeechBuilder":
        """Add a <prosody> tag, or the text as-is if unsupported."""
        if not self.features.prosody:
            return self.add(text)
        tree.append_element(self.element, "prosody", attributes, text)
        return self

    def audio(self, source: Union[str, Mapping[str, Any], AudioSource, None]) -> "SpeechBuilder":
        """
        Add an <audio> tag.

        Args:
            source: URL, or a url/alt text pair. Relative URLs are resolved
                against the base URL unless the platform resolves them itself.

        Falls back to the alt text when audio is unsupported or no URL is
        given. Platforms that cannot nest text in <audio> lose the alt text.
        """
        if isinstance(source, AudioSource):
            clip = source
        elif isinstance(source, Mapping):
            clip = AudioSource.model_validate(source)
        else:
            clip = AudioSource(url=source)

        if not clip.url or not self.features.audio:
            logger.debug(f"Audio not rendered, using alt text: {clip.alt_text!r}")
            return self.add(clip.alt_text)

        element = tree.append_element(self.element, "audio", {"src": self._resolve(clip.url)})
        if clip.alt_text and self.features.audio_children:
            tree.append_text(element, clip.alt_text)
        return self

    def _resolve(self, href: str) -> str:
        if self.features.speak.base:
            # Platform resolves against the xml:base on <speak>
            return href
        return resolve_url(self.options.base, href)

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    def _wrap(
        self,
        content: Any,
        feature: Feature,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> "SpeechBuilder":
        builder = self
        if self.features.supports(feature):
            element = tree.append_element(self.element, self.features.tag_name(feature), attributes)
            builder = SpeechBuilder(self.options, element)
        else:
            logger.debug(f"Feature '{feature.value}' unsupported, adding content unwrapped")
        builder.add(content)
        return self

    def emphasis(
        self,
        content: Any,
        level: Union[str, EmphasisLevel, None] = None,
    ) -> "SpeechBuilder":
        """Add an <emphasis> scope, or the content as-is if unsupported."""
        attributes = {}
        if level:
            attributes["level"] = level
        return self._wrap(content, Feature.EMPHASIS, attributes)

    def p(self, content: Any) -> "SpeechBuilder":
        """Add a paragraph scope."""
        return self._wrap(content, Feature.P)

    def s(self, content: Any) -> "SpeechBuilder":
        """Add a sentence scope."""
        return self._wrap(content, Feature.S)

    def w(self, role: str, content: Any) -> "SpeechBuilder":
        """Add a <w> scope disambiguating a word by role, e.g. amazon:VBD."""
        return self._wrap(content, Feature.W, {"role": role})

    def effect(self, name: str, content: Any) -> "SpeechBuilder":
        """Add an effect scope such as whispered; the tag name comes from the profile."""
        return self._wrap(content, Feature.EFFECT, {"name": name})

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Serialize the markup, pretty-printed if configured."""
        return tree.serialize(self.element, pretty=self.options.pretty)

    def to_plain_text(self) -> str:
        """Render only the spoken text, for platforms without markup support."""
        return plain_text.render_plain_text(self.element)

    def __str__(self) -> str:
        return self.to_string()


def create_builder(options: Any = None) -> SpeechBuilder:
    """
    Create a root builder.

    Args:
        options: Anything ``configure`` accepts: None, a preset name,
            capability overrides, or prepared ``BuilderOptions``.
    """
    return SpeechBuilder(configure(options))
