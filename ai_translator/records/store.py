"""File-backed storage for translatable records."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from ai_translator.translation.models import TranslatableRecord
from ai_translator.utils.helpers import RECORD_COLUMNS, load_data, save_results, validate_record_dataframe


logger = logging.getLogger(__name__)


class RecordFileStore:
    """
    Owner of records kept in a long-format table (record_id, field, locale, text).

    Every save() rewrites the whole file, so a record is committed as soon as
    it is saved and earlier records stay committed if a later one fails.
    """

    def __init__(self, path: Path, output_path: Optional[Path] = None):
        """
        Initialize store.

        Args:
            path: CSV, Excel or JSON file to read records from
            output_path: File to write saved records to (defaults to path)
        """
        self.path = Path(path)
        self.output_path = Path(output_path) if output_path else self.path
        self.finished_ids: List[str] = []
        self._frame = pd.DataFrame(columns=RECORD_COLUMNS)

    def load(self, locales: Optional[Iterable[str]] = None) -> List[TranslatableRecord]:
        """
        Load records from the file.

        Args:
            locales: Known locale codes; every field gets an entry for each

        Returns:
            Records in file order
        """
        locales = list(locales) if locales is not None else None
        df = validate_record_dataframe(load_data(self.path, required_columns=RECORD_COLUMNS), locales)
        self._frame = df.reset_index(drop=True)

        records: Dict[str, TranslatableRecord] = {}
        for row in df.itertuples(index=False):
            record = records.get(row.record_id)
            if record is None:
                record = TranslatableRecord(record_id=row.record_id, store=self)
                records[row.record_id] = record
            record.fields.setdefault(row.field, {})[row.locale] = row.text

        if locales:
            for record in records.values():
                record.ensure_locales(locales)

        logger.info(f"Loaded {len(records)} records from {self.path}")
        return list(records.values())

    def save(self, record: TranslatableRecord) -> None:
        """Write all of the record's field values and rewrite the output file."""
        rows = [
            {"record_id": record.record_id, "field": name, "locale": locale, "text": text}
            for name, translations in record.fields.items()
            for locale, text in translations.items()
        ]

        others = self._frame[self._frame["record_id"] != record.record_id]
        updated = pd.DataFrame(rows, columns=RECORD_COLUMNS)

        # Keep the record where it was in the table
        position = self._first_position(record.record_id)
        self._frame = pd.concat(
            [others.iloc[:position], updated, others.iloc[position:]],
            ignore_index=True
        )

        save_results(self._frame, self.output_path)
        logger.info(f"Saved record {record.record_id} to {self.output_path}")

    def mark_finished(self, record: TranslatableRecord) -> None:
        if record.record_id not in self.finished_ids:
            self.finished_ids.append(record.record_id)
        logger.info(f"Record {record.record_id} marked as finished")

    def to_frame(self) -> pd.DataFrame:
        return self._frame.copy()

    def _first_position(self, record_id: str) -> int:
        """Row index among the other records where this record's rows start."""
        ids = self._frame["record_id"].tolist()
        if record_id not in ids:
            return len(ids)
        return ids.index(record_id)
