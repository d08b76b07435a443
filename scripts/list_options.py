#!/usr/bin/env python3
"""
List configured locales and voice tones.

Usage:
    python scripts/list_options.py --config configs/translation_config.yaml --source en
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_translator.config import ConfigLoader
from ai_translator.translation import LocaleCatalog, VoiceTone


def main():
    parser = argparse.ArgumentParser(description="List locales and voice tones")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/translation_config.yaml"),
        help="Path to translation configuration YAML file"
    )
    parser.add_argument(
        "--source",
        help="Source locale; lists the locales it can be translated into"
    )

    args = parser.parse_args()

    config = ConfigLoader.load_yaml(args.config)
    locales = LocaleCatalog.from_config(config)

    if not locales:
        print("✗ Error: no locales configured")
        print("\nPlease define 'locales' in the config file, e.g.")
        print("  locales:")
        print("    en: English")
        print("    fr: French")
        sys.exit(1)

    source = args.source or config.get("default_locale")

    print("=== Locales ===")
    for code in locales:
        marker = " (default)" if code == config.get("default_locale") else ""
        print(f"  {code}: {locales[code]}{marker}")

    if source:
        print(f"\n=== Targets for {locales.display_name(source)} ===")
        for code, name in locales.target_options(source).items():
            print(f"  {code}: {name}")

    print("\n=== Voice tones ===")
    for value, label in VoiceTone.options().items():
        marker = " (default)" if value == VoiceTone.default().value else ""
        print(f"  {value}: {label}{marker}")


if __name__ == "__main__":
    main()
