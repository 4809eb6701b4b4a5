"""Exceptions raised while configuring speech markup builders."""

from typing import Any, Optional


class SpeechMarkupError(Exception):
    """
    Root of the speechmarkup exception tree.

    Builder operations never raise for unsupported features; errors only
    come from configuration. ``details`` carries the offending preset or
    field, ``cause`` the underlying validation error if there is one.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Error name, message and details, e.g. for structured log records."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SpeechMarkupError):
    """Unknown preset, malformed capability override or invalid builder option."""

    def __init__(
        self,
        message: str = "Configuration error",
        preset: Optional[str] = None,
        field: Optional[str] = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if preset:
            details["preset"] = preset
        if field:
            details["field"] = field
        super().__init__(message, details=details, **kwargs)
