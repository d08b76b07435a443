#!/usr/bin/env python3
"""
Test script to verify the setup without making API calls.

Usage:
    python scripts/check_setup.py
"""

import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def check_imports():
    """Test that all modules can be imported."""
    print("Testing imports...")
    try:
        from ai_translator.translation import TranslationOrchestrator, SharpApiProvider, LocaleCatalog
        from ai_translator.records import RecordFileStore
        from ai_translator.config import ConfigLoader, ConfigValidator
        from ai_translator.utils import setup_logging, load_data, save_results
        print("✓ All imports successful")
        return True
    except ImportError as e:
        print(f"✗ Import error: {e}")
        return False


def check_config_loading():
    """Test loading the translation configuration."""
    print("\nTesting config loading...")
    try:
        from ai_translator.config import ConfigLoader, ConfigValidator

        config = ConfigLoader.load_yaml(Path("configs/translation_config.yaml"))
        ConfigValidator.validate_translation_config(config)
        print("✓ Loaded translation config")
        print(f"  - Locales: {', '.join(config.get('locales', {}))}")
        print(f"  - Default locale: {config.get('default_locale')}")
        print(f"  - Tone: {config.get('tone', 'neutral')}")
        return True
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ Config loading error: {e}")
        return False


def check_records_loading():
    """Test loading the sample records file."""
    print("\nTesting records loading...")
    try:
        from ai_translator.records import RecordFileStore

        records = RecordFileStore(Path("data/sample_records.csv")).load()
        print(f"✓ Loaded sample_records.csv: {len(records)} records")
        return True
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ Records loading error: {e}")
        return False


def check_api_key():
    """Test API key availability."""
    print("\nChecking API key...")

    api_key = os.getenv("SHARP_API_KEY")

    if api_key:
        print(f"✓ SHARP_API_KEY found (length: {len(api_key)})")
        return True

    print("⚠ SHARP_API_KEY not found in environment")
    print("  You can set it in your config file or as an environment variable:")
    print("    export SHARP_API_KEY='your-key-here'")
    return False


def check_dependencies():
    """Test that required dependencies are available."""
    print("\nTesting dependencies...")

    deps = [
        ("pandas", "Pandas"),
        ("yaml", "PyYAML"),
        ("requests", "requests"),
    ]

    all_ok = True
    for module_name, display_name in deps:
        try:
            __import__(module_name)
            print(f"✓ {display_name}")
        except ImportError:
            print(f"✗ {display_name} not installed")
            all_ok = False

    if not all_ok:
        print("\n⚠ Some dependencies are missing. Install with:")
        print("  pip install -e .")

    return all_ok


def main():
    print("=" * 60)
    print("AI Model Translator - Setup Test")
    print("=" * 60)

    checks = [
        ("Dependencies", check_dependencies),
        ("Imports", check_imports),
        ("Config Loading", check_config_loading),
        ("Records Loading", check_records_loading),
        ("API Key", check_api_key),
    ]

    results = {name: check_func() for name, check_func in checks}

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)

    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"{status}: {name}")

    if all(results.values()):
        print("\n✓ All checks passed! Your setup is ready.")
        print("\nNext steps:")
        print("  1. Preview: python scripts/translate.py --config configs/translation_config.yaml --target fr --preview")
        print("  2. Run:     python scripts/translate.py --config configs/translation_config.yaml --target fr")
    else:
        print("\n⚠ Some checks failed. Please fix the issues above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
