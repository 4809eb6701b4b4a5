"""Resolve preset names and capability overrides into builder options."""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from speechmarkup.config import Settings, get_settings
from speechmarkup.exceptions import ConfigurationError
from speechmarkup.models import BuilderOptions, CapabilityProfile

from .presets import DEFAULT_PRESET, PRESETS, SSML_1_0, get_preset

logger = logging.getLogger(__name__)


def resolve_profile(value: Any = None, strict: Optional[bool] = None) -> CapabilityProfile:
    """
    Resolve a capability descriptor into a profile.

    Args:
        value: None for the default preset, a preset name, a mapping of
            overrides merged over the default preset, or a profile.
        strict: Raise instead of falling back to the full SSML baseline
            on bad input. Defaults to the ``strict`` setting.

    Returns:
        Resolved capability profile

    Raises:
        ConfigurationError: On an unknown preset or malformed overrides,
            only when strict.
    """
    if strict is None:
        strict = get_settings().strict

    if value is None:
        return PRESETS[DEFAULT_PRESET]

    if isinstance(value, CapabilityProfile):
        return value

    if isinstance(value, str):
        try:
            profile = get_preset(value)
        except KeyError:
            return _fallback(f"Unknown preset '{value}'", strict, preset=value)
        logger.debug(f"Resolved preset '{value}'")
        return profile

    if isinstance(value, Mapping):
        if "features" in value:
            return resolve_profile(value["features"], strict)
        try:
            return PRESETS[DEFAULT_PRESET].merge(value)
        except ValidationError as e:
            field = ".".join(str(part) for part in e.errors()[0]["loc"])
            return _fallback(
                f"Malformed capability override '{field}'",
                strict,
                field=field,
                cause=e,
            )

    return _fallback(
        f"Unsupported capability descriptor of type {type(value).__name__}",
        strict,
    )


def configure(value: Any = None, strict: Optional[bool] = None) -> BuilderOptions:
    """
    Build the options shared by all builders of one document.

    A mapping with a ``features`` key has that key resolved as a
    capability descriptor (recursively), while its sibling keys
    (``base``, ``lang``, ``pretty``, ``lexicon``) pass through. Any other
    value is resolved as a capability descriptor on its own.

    Raises:
        ConfigurationError: If sibling options are malformed, or on bad
            capability input when strict.
    """
    if isinstance(value, BuilderOptions):
        return value

    if value is None:
        return options_from_settings(get_settings())

    if isinstance(value, Mapping) and "features" in value:
        nested = value["features"]
        inner = configure(nested, strict)
        data = {key: item for key, item in value.items() if key != "features"}
        if isinstance(nested, Mapping) and "features" in nested:
            # Options set deeper in the nesting win, as with the features themselves
            data.update({name: getattr(inner, name) for name in inner.model_fields_set})
        else:
            data["features"] = inner.features
        try:
            return BuilderOptions(**data)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid builder options",
                field=".".join(str(part) for part in e.errors()[0]["loc"]),
                cause=e,
            ) from e

    return BuilderOptions(features=resolve_profile(value, strict))


def options_from_settings(settings: Settings) -> BuilderOptions:
    """Build options from environment settings."""
    return BuilderOptions(
        features=resolve_profile(settings.preset, settings.strict),
        base=settings.base_url,
        lang=settings.language,
        pretty=settings.pretty,
    )


def _fallback(message: str, strict: bool, **kwargs: Any) -> CapabilityProfile:
    if strict:
        raise ConfigurationError(message, **kwargs)
    logger.warning(f"{message}; falling back to the full SSML 1.0 baseline")
    return SSML_1_0
