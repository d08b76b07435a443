"""Configuration validation."""

import logging
from typing import Any, Dict, Mapping, Optional

from ai_translator.translation.exceptions import (
    MISSING_API_KEY_MESSAGE,
    MISSING_LOCALES_MESSAGE,
    ConfigurationMissing,
)
from ai_translator.translation.models import VoiceTone
from ai_translator.translation.orchestrator import ALREADY_TRANSLATED_POLICIES


logger = logging.getLogger(__name__)


SUPPORTED_PROVIDERS = ["sharpapi"]


class ConfigValidator:
    """Validate configuration dictionaries."""

    @staticmethod
    def validate_translation_config(config: Dict[str, Any]) -> None:
        """
        Validate translation configuration.

        Args:
            config: Configuration dictionary

        Raises:
            ValueError: If configuration is invalid
        """
        # Validate locales
        locales = config.get("locales")
        if locales is not None:
            if not isinstance(locales, dict):
                raise ValueError("locales must be a mapping of locale code to display name")
            for code, name in locales.items():
                if not isinstance(code, str) or not code.strip():
                    raise ValueError("Locale codes must be non-empty strings")
                if not isinstance(name, str) or not name.strip():
                    raise ValueError(f"Display name for locale '{code}' must be a non-empty string")

        if "default_locale" in config:
            default_locale = config["default_locale"]
            # An empty catalog is reported by check_required
            if locales and default_locale not in locales:
                raise ValueError(f"default_locale '{default_locale}' is not defined in locales")

        # Validate optional fields
        if "tone" in config:
            try:
                VoiceTone.from_value(config["tone"])
            except ValueError:
                raise ValueError(
                    f"tone must be one of: {', '.join(VoiceTone.options())}"
                ) from None

        if "provider" in config and config["provider"] not in SUPPORTED_PROVIDERS:
            raise ValueError(f"provider must be one of: {', '.join(SUPPORTED_PROVIDERS)}")

        if "on_already_translated" in config:
            if config["on_already_translated"] not in ALREADY_TRANSLATED_POLICIES:
                raise ValueError(
                    f"on_already_translated must be one of: {', '.join(ALREADY_TRANSLATED_POLICIES)}"
                )

        if "max_workers" in config:
            max_workers = config["max_workers"]
            if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
                raise ValueError("max_workers must be a positive integer")

        for key in ["time_budget", "poll_interval", "max_wait", "request_timeout"]:
            if key in config:
                value = config[key]
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                    raise ValueError(f"{key} must be a positive number")

        if "api_key" in config and config["api_key"] is not None and not isinstance(config["api_key"], str):
            raise ValueError("api_key must be a string if provided")

        logger.info("Translation config validation passed")

    @staticmethod
    def check_required(
        locales: Optional[Mapping[str, str]],
        api_key: Optional[str] = None,
        has_credential: Optional[bool] = None
    ) -> None:
        """
        Check the settings a translation run cannot start without.

        Args:
            locales: Locale catalog
            api_key: Provider credential
            has_credential: Whether the provider already holds a credential;
                when given, api_key is not looked at

        Raises:
            ConfigurationMissing: If the catalog is empty or the credential is unset
        """
        if not locales:
            raise ConfigurationMissing(MISSING_LOCALES_MESSAGE)

        if has_credential is None:
            has_credential = bool(api_key and str(api_key).strip())

        if not has_credential:
            raise ConfigurationMissing(MISSING_API_KEY_MESSAGE)

        logger.info(f"Configuration check passed ({len(locales)} locales)")
