#!/usr/bin/env python3
"""
Script for filling missing translations of multilingual records.

Usage:
    python scripts/translate.py --config configs/translation_config.yaml --target fr
    python scripts/translate.py --config configs/translation_config.yaml --target fr --preview
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_translator.config import ConfigLoader, ConfigValidator
from ai_translator.records import RecordFileStore
from ai_translator.translation import (
    ConfigurationMissing,
    LocaleCatalog,
    ProviderError,
    TranslationOrchestrator,
    TranslationTimeout,
    UnsupportedLocale,
    VoiceTone,
    create_provider,
)
from ai_translator.utils import setup_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate blank fields of multilingual records")
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to translation configuration YAML file"
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Records file path (overrides config)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file path (overrides config, default: overwrite input)"
    )
    parser.add_argument(
        "--source",
        help="Source locale code (default: default_locale from config)"
    )
    parser.add_argument(
        "--target",
        help="Target locale code (overrides config)"
    )
    parser.add_argument(
        "--tone",
        choices=list(VoiceTone.options()),
        help="Voice tone for the translation"
    )
    parser.add_argument(
        "--skip-translated",
        action="store_true",
        help="Skip fully translated records instead of stopping the batch"
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Fields of one record translated at the same time"
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Only show which fields would be translated"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(level=args.log_level)

    # Load config
    config = ConfigLoader.load_yaml(args.config)

    # Override with CLI arguments
    if args.input:
        config["input_file"] = str(args.input)
    if args.output:
        config["output_file"] = str(args.output)
    if args.source:
        config["source_lang"] = args.source
    if args.target:
        config["target_lang"] = args.target
    if args.tone:
        config["tone"] = args.tone
    if args.skip_translated:
        config["on_already_translated"] = "skip"
    if args.workers is not None:
        config["max_workers"] = args.workers

    config = ConfigLoader.apply_env_overrides(config)

    try:
        ConfigValidator.check_required(config.get("locales"), config.get("api_key"))
    except ConfigurationMissing as e:
        logger.error(str(e))
        print(f"✗ {e}")
        return 1

    ConfigValidator.validate_translation_config(config)

    source_lang = config.get("source_lang") or config.get("default_locale")
    target_lang = config.get("target_lang")
    if not source_lang or not target_lang:
        print("✗ Both a source and a target language are required (--source/--target)")
        return 2

    if "input_file" not in config:
        print("✗ No records file given (--input or input_file in config)")
        return 2

    locales = LocaleCatalog.from_config(config)
    store = RecordFileStore(
        Path(config["input_file"]),
        output_path=Path(config["output_file"]) if config.get("output_file") else None
    )
    records = store.load(locales=locales.codes)

    orchestrator = TranslationOrchestrator(
        provider=create_provider(config),
        locales=locales,
        time_budget=config.get("time_budget", 600.0),
        max_workers=config.get("max_workers", 1),
        on_already_translated=config.get("on_already_translated", "abort")
    )

    if args.preview:
        try:
            plan = orchestrator.preview(records, source_lang, target_lang)
        except UnsupportedLocale as e:
            print(f"✗ {e}")
            return 1
        print(plan.describe())
        for record_plan in plan.records:
            if record_plan.already_translated:
                print(f"  [{record_plan.record_id}] already translated")
                continue
            fields = ", ".join(record_plan.fields_to_translate) or "-"
            print(f"  [{record_plan.record_id}] {fields}")
        return 0

    print(
        f"Translating {len(records)} records from {locales.display_name(source_lang)} "
        f"to {locales.display_name(target_lang)}"
    )

    try:
        summary = orchestrator.translate(records, source_lang, target_lang, config.get("tone"))
    except ConfigurationMissing as e:
        print(f"✗ {e}")
        return 1
    except (ProviderError, TranslationTimeout) as e:
        logger.error(f"Translation aborted: {e}")
        print(f"✗ Translation aborted: {e}")
        print(f"  Records saved before the failure: {', '.join(store.finished_ids) or 'none'}")
        return 1

    if not summary.ok:
        print(f"✗ {summary.message}")
        return 1

    print(f"\n✓ {summary.message}")
    print(f"  Results saved to: {store.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
