"""Builder options and input models."""

from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from .profile import CapabilityProfile

# A pronunciation is either an IPA string or a map of alphabet -> notation.
Pronunciation = Union[str, dict[str, str]]


class BuilderOptions(BaseModel):
    """Options shared by every builder of one document."""

    features: CapabilityProfile
    base: Optional[str] = Field(
        default=None,
        description="Base URL that relative audio URLs are resolved against",
    )
    lang: Optional[str] = Field(
        default=None,
        description="Document language, overrides the profile default",
    )
    pretty: bool = False
    lexicon: Optional[dict[str, Pronunciation]] = Field(
        default=None,
        description="Words applied automatically as <phoneme> or <sub> while adding text",
    )

    model_config = {"frozen": True, "extra": "ignore"}


class AudioSource(BaseModel):
    """Audio clip reference with optional fallback text."""

    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("url", "src"),
    )
    alt_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("alt_text", "altText", "alt"),
    )

    model_config = {"frozen": True, "extra": "ignore"}
