"""Enumerations for speech markup generation."""

from enum import Enum


class Feature(str, Enum):
    """Markup features a target platform may support."""

    SPEAK = "speak"
    LANG = "lang"
    P = "p"
    S = "s"
    SAY_AS = "sayAs"
    PHONEME = "phoneme"
    PROSODY = "prosody"
    SUB = "sub"
    BREAK = "break"
    EMPHASIS = "emphasis"
    AUDIO = "audio"
    W = "w"
    EFFECT = "effect"


class PauseStrength(str, Enum):
    """Named pause strengths for <break strength="...">."""

    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"


class EmphasisLevel(str, Enum):
    """Emphasis levels for <emphasis level="...">."""

    STRONG = "strong"
    MODERATE = "moderate"
    NONE = "none"
    REDUCED = "reduced"


# Reserved lexicon/pronunciation key meaning "use as <sub> alias".
SUB_ALPHABET = "sub"

# Alphabet assumed when a pronunciation is given as a plain string.
DEFAULT_ALPHABET = "ipa"
