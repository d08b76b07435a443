"""Configuration loading from YAML files."""

import os
import logging
from pathlib import Path
from typing import Any, Dict

import yaml


logger = logging.getLogger(__name__)


API_KEY_ENV_VAR = "SHARP_API_KEY"


class ConfigLoader:
    """Load and parse YAML configuration files."""

    @staticmethod
    def load_yaml(config_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Configuration dictionary
        """
        config_path = Path(config_path)
        logger.info(f"Loading config from: {config_path}")

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if config is None:
            raise ValueError(f"Empty config file: {config_path}")
        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        logger.info(f"Loaded config with keys: {list(config.keys())}")
        return config

    @staticmethod
    def save_yaml(config: Dict[str, Any], output_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration dictionary
            output_path: Path to save YAML file
        """
        output_path = Path(output_path)
        logger.info(f"Saving config to: {output_path}")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

        logger.info("Config saved successfully")

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configuration dictionaries.
        Later configs override earlier ones.

        Args:
            *configs: Configuration dictionaries to merge

        Returns:
            Merged configuration
        """
        result = {}

        for config in configs:
            result = ConfigLoader._deep_merge(result, config)

        return result

    @staticmethod
    def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Fill the provider credential from SHARP_API_KEY when the config has none.
        The key is never logged.
        """
        merged = config.copy()
        if not merged.get("api_key"):
            env_key = os.getenv(API_KEY_ENV_VAR)
            if env_key:
                logger.info(f"Using API key from {API_KEY_ENV_VAR}")
                merged["api_key"] = env_key
        return merged

    @staticmethod
    def _deep_merge(base: Dict, update: Dict) -> Dict:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
