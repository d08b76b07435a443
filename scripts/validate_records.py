#!/usr/bin/env python3
"""
Utility script to validate a records file before translating it.

Usage:
    python scripts/validate_records.py --input data/records.csv --config configs/translation_config.yaml
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_translator.config import ConfigLoader
from ai_translator.utils import load_data, validate_record_dataframe


def validate_records(input_file: Path, locales=None) -> bool:
    """
    Validate a records file and print blank counts per locale.

    Args:
        input_file: Records file path
        locales: Known locale codes (optional)

    Returns:
        True if the file is valid
    """
    print(f"Reading records: {input_file}")

    try:
        df = validate_record_dataframe(load_data(input_file), locales)
    except (ValueError, FileNotFoundError) as e:
        print(f"✗ Error: {e}")
        return False

    print(f"✓ Successfully loaded {len(df)} rows, {df['record_id'].nunique()} records")
    print(f"  Fields: {sorted(df['field'].unique())}")

    blank = df["text"].str.strip() == ""
    counts = df.assign(blank=blank).groupby("locale")["blank"].agg(["sum", "count"])

    print("\nBlank values per locale:")
    for locale, row in counts.iterrows():
        print(f"  - {locale}: {int(row['sum'])} of {int(row['count'])}")

    if locales is not None:
        missing = sorted(set(locales) - set(df["locale"]))
        if missing:
            print(f"\n⚠ No rows for locales: {missing} (they will be treated as blank)")

    return True


def main():
    parser = argparse.ArgumentParser(
        description="Validate a records file (record_id, field, locale, text)"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Records file path"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Translation config, used to check locales against the catalog"
    )

    args = parser.parse_args()

    if not args.input.exists():
        print(f"✗ Error: Input file not found: {args.input}")
        sys.exit(1)

    locales = None
    if args.config:
        locales = list((ConfigLoader.load_yaml(args.config).get("locales") or {}).keys())

    if not validate_records(args.input, locales):
        sys.exit(1)


if __name__ == "__main__":
    main()
