"""
Translation-specific exceptions.

This module defines all custom exceptions raised while orchestrating
record translations.
"""

from typing import Any, Optional


class TranslationError(Exception):
    """Base class for translation errors."""
    pass


class ConfigurationMissing(TranslationError):
    """
    Raised when the locale catalog or the provider credential is absent.

    Checked before any record is touched; the message is meant for the
    operator running the translation.
    """
    pass


class UnsupportedLocale(TranslationError):
    """Raised when the source or target locale is not in the catalog."""

    def __init__(self, message: str, source_locale: str = "", target_locale: str = ""):
        super().__init__(message)
        self.source_locale = source_locale
        self.target_locale = target_locale


class SameLocale(UnsupportedLocale):
    """Raised when the source and target locale are the same."""
    pass


class AlreadyTranslated(TranslationError):
    """Raised when every translatable field of a record already has target content."""

    def __init__(self, message: str, record: Optional[Any] = None):
        super().__init__(message)
        self.record = record


class ProviderError(TranslationError):
    """
    Raised for any failure reported by the translation provider.

    Transport failures, failed remote jobs and validation errors returned
    by the remote service all end up here.
    """
    pass


class TranslationTimeout(TranslationError):
    """Raised when a run exceeds its overall wall-clock budget."""
    pass


MISSING_LOCALES_MESSAGE = (
    "The language configuration is missing. "
    "Please define 'locales' with supported languages."
)

MISSING_API_KEY_MESSAGE = (
    "The SharpAPI client API key is not configured. "
    "Please set 'SHARP_API_KEY' in the environment or 'api_key' in the config."
)

UNSUPPORTED_LOCALE_MESSAGE = (
    "The selected languages are not supported. "
    "Please ensure both source and target languages are defined in the 'locales' configuration."
)

SAME_LOCALE_MESSAGE = "The source and target languages must be different."

ALREADY_TRANSLATED_MESSAGE = (
    "All the target language fields already contain content. "
    "Clear them and rerun the action if you wish to overwrite."
)
