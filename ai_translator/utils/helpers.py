"""Utility helper functions."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

import pandas as pd


logger = logging.getLogger(__name__)


RECORD_COLUMNS = ["record_id", "field", "locale", "text"]


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, create if needed.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_data(
    file_path: Path,
    required_columns: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Load data from CSV, Excel or JSON file.

    Args:
        file_path: Path to data file
        required_columns: List of required column names

    Returns:
        DataFrame

    Raises:
        ValueError: If required columns are missing
    """
    logger.info(f"Loading data from: {file_path}")

    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")

    # Text columns must not be coerced to numbers or NaN
    if file_path.suffix == ".csv":
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    elif file_path.suffix in [".xlsx", ".xls"]:
        df = pd.read_excel(file_path, dtype=str, keep_default_na=False)
    elif file_path.suffix == ".json":
        df = pd.read_json(file_path, orient="records", dtype=False)
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}")

    logger.info(f"Loaded {len(df)} rows, {len(df.columns)} columns")

    # Validate required columns
    if required_columns:
        missing = set(required_columns) - set(df.columns)
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

    return df


def save_results(
    data: Any,
    output_path: Path,
    file_format: Optional[str] = None
) -> None:
    """
    Save results to file.

    Args:
        data: Data to save (DataFrame or dict)
        output_path: Output file path
        file_format: File format override (inferred from path if None)
    """
    output_path = Path(output_path)
    ensure_dir(output_path.parent)

    if file_format is None:
        file_format = output_path.suffix.lstrip(".")

    logger.debug(f"Saving results to: {output_path}")

    if isinstance(data, pd.DataFrame):
        if file_format == "csv":
            data.to_csv(output_path, index=False)
        elif file_format in ["xlsx", "xls"]:
            data.to_excel(output_path, index=False)
        elif file_format == "json":
            data.to_json(output_path, orient="records", indent=2, force_ascii=False)
        else:
            raise ValueError(f"Unsupported format for DataFrame: {file_format}")

    elif isinstance(data, dict):
        if file_format == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"Unsupported format for dict: {file_format}")

    else:
        # Try generic text save
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(str(data))

    logger.debug("Results saved successfully")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers = [logging.StreamHandler()]

    if log_file:
        log_file = Path(log_file)
        ensure_dir(log_file.parent)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )

    logger.info(f"Logging setup complete (level: {level})")


def validate_record_dataframe(
    df: pd.DataFrame,
    locales: Optional[Iterable[str]] = None
) -> pd.DataFrame:
    """
    Validate a long-format record table and normalise its values.

    Args:
        df: DataFrame with record_id, field, locale and text columns
        locales: Known locale codes; rows in other locales are reported

    Returns:
        Normalised DataFrame (string ids, empty string for missing text)

    Raises:
        ValueError: If validation fails
    """
    missing = set(RECORD_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    df = df[RECORD_COLUMNS].copy()
    df["text"] = df["text"].fillna("").astype(str)
    for column in ["record_id", "field", "locale"]:
        df[column] = df[column].astype(str).str.strip()

    duplicated = df.duplicated(subset=["record_id", "field", "locale"])
    if duplicated.any():
        raise ValueError(
            f"Duplicate (record_id, field, locale) rows: {df.loc[duplicated, ['record_id', 'field', 'locale']].values.tolist()}"
        )

    if locales is not None:
        unknown = sorted(set(df["locale"]) - set(locales))
        if unknown:
            logger.warning(f"Found locales not in the catalog: {unknown}")

    logger.info(f"Found {df['record_id'].nunique()} records, fields: {sorted(df['field'].unique())}")

    return df
