"""Capability profile models describing what a speech platform supports."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from .enums import DEFAULT_ALPHABET, SUB_ALPHABET, Feature


class SpeakAttributes(BaseModel):
    """Attributes a platform requires on the root <speak> element."""

    version: Optional[str] = None
    xmlns: Optional[str] = None
    lang: Optional[str] = Field(
        default=None,
        description="Default document language, used when no language option is given",
    )
    base: bool = Field(
        default=False,
        description="Platform resolves relative URLs itself through xml:base",
    )

    model_config = {"frozen": True, "extra": "ignore"}


class AudioCapability(BaseModel):
    """Shape of the audio feature when it is supported."""

    children: bool = Field(
        default=False,
        description="Whether fallback text may be nested inside <audio>",
    )

    model_config = {"frozen": True, "extra": "ignore"}


class CapabilityProfile(BaseModel):
    """
    Immutable description of the markup features of one platform.

    Every feature is disabled unless enabled explicitly. Fields accept
    both their python names and their markup names (``sayAs``, ``break``).
    """

    speak: SpeakAttributes = Field(default_factory=SpeakAttributes)
    lang: bool = False
    p: bool = False
    s: bool = False
    say_as: bool = Field(default=False, alias="sayAs")
    phoneme: Union[bool, str, tuple[str, ...]] = Field(
        default=False,
        description="Supported alphabets in priority order, or True for IPA only",
    )
    prosody: bool = False
    sub: bool = False
    break_: bool = Field(default=False, alias="break")
    emphasis: bool = False
    audio: Union[bool, AudioCapability] = False
    w: bool = False
    effect: Union[bool, str] = Field(
        default=False,
        description="True for <effect>, or a namespaced tag name such as amazon:effect",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    def capability(self, feature: Union[Feature, str]) -> Any:
        """Return the raw descriptor of a feature."""
        return getattr(self, _FIELD_NAMES[Feature(feature)])

    def supports(self, feature: Union[Feature, str]) -> bool:
        """Check whether a feature is enabled in any shape."""
        return bool(self.capability(feature))

    def tag_name(self, feature: Union[Feature, str]) -> str:
        """Tag emitted for a feature, honouring platform-specific renames."""
        feature = Feature(feature)
        value = self.capability(feature)
        if isinstance(value, str) and value:
            return value
        return feature.value

    @property
    def audio_children(self) -> bool:
        """Whether <audio> may carry nested fallback text."""
        return isinstance(self.audio, AudioCapability) and self.audio.children

    @property
    def alphabets(self) -> tuple[str, ...]:
        """
        Pronunciation alphabets this profile accepts, in priority order.

        When substitutions are supported the pseudo-alphabet ``sub`` is
        accepted last, so a pronunciation map may carry a <sub> fallback.
        """
        phoneme = self.phoneme
        if isinstance(phoneme, tuple):
            alphabets = list(phoneme)
        elif isinstance(phoneme, str):
            alphabets = [phoneme]
        elif phoneme:
            alphabets = [DEFAULT_ALPHABET]
        else:
            alphabets = []

        if self.sub:
            alphabets.append(SUB_ALPHABET)
        return tuple(alphabets)

    def merge(self, overrides: Mapping[str, Any]) -> "CapabilityProfile":
        """
        Return a new profile with top-level keys replaced by ``overrides``.

        Nested descriptors (``speak``, ``audio``) are replaced wholesale,
        never deep-merged.

        Raises:
            pydantic.ValidationError: If an override has the wrong shape.
        """
        data = self.model_dump(by_alias=True)
        for key, value in overrides.items():
            data[_ALIASES.get(key, key)] = value
        return CapabilityProfile.model_validate(data)


_FIELD_NAMES: dict[Feature, str] = {
    Feature(info.alias or name): name
    for name, info in CapabilityProfile.model_fields.items()
}

# python field name -> markup name, for overrides given as keyword-style keys
_ALIASES: dict[str, str] = {
    name: info.alias
    for name, info in CapabilityProfile.model_fields.items()
    if info.alias
}
