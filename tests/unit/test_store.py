"""Tests for the file-backed record store."""

import pandas as pd
import pytest

from ai_translator.records import RecordFileStore
from ai_translator.translation import ProviderError, TranslationOrchestrator
from ai_translator.utils import load_data


RECORDS_CSV = """record_id,field,locale,text
1,title,en,Hello
1,title,fr,
1,body,en,World
1,body,fr,Monde
2,title,en,Bye
2,title,fr,
"""


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text(RECORDS_CSV, encoding="utf-8")
    return path


def test_load_groups_rows_into_records(records_file):
    records = RecordFileStore(records_file).load()

    assert [r.record_id for r in records] == ["1", "2"]
    assert records[0].fields == {
        "title": {"en": "Hello", "fr": ""},
        "body": {"en": "World", "fr": "Monde"},
    }


def test_load_fills_missing_locales(records_file):
    records = RecordFileStore(records_file).load(locales=["en", "fr", "de"])

    assert records[1].fields["title"] == {"en": "Bye", "fr": "", "de": ""}


def test_load_rejects_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("record_id,text\n1,Hello\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Missing required columns"):
        RecordFileStore(path).load()


def test_load_rejects_duplicate_rows(tmp_path):
    path = tmp_path / "dup.csv"
    path.write_text("record_id,field,locale,text\n1,title,en,A\n1,title,en,B\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Duplicate"):
        RecordFileStore(path).load()


def test_save_rewrites_file_in_place(records_file):
    store = RecordFileStore(records_file)
    records = store.load()

    records[0].set_translation("title", "fr", "Bonjour")
    records[0].save()

    df = load_data(records_file)
    row = df[(df["record_id"] == "1") & (df["field"] == "title") & (df["locale"] == "fr")]
    assert row["text"].tolist() == ["Bonjour"]
    # Record order is kept
    assert df["record_id"].tolist()[:4] == ["1", "1", "1", "1"]
    assert len(df) == 6
    assert store.to_frame()["text"].tolist() == df["text"].tolist()


def test_save_to_separate_output(records_file, tmp_path):
    output = tmp_path / "out" / "translated.json"
    store = RecordFileStore(records_file, output_path=output)
    records = store.load()

    records[1].set_translation("title", "fr", "Au revoir")
    records[1].save()

    saved = pd.read_json(output, orient="records", dtype=False)
    assert "Au revoir" in saved["text"].tolist()
    assert load_data(records_file)["text"].tolist().count("Au revoir") == 0


def test_mark_finished(records_file):
    store = RecordFileStore(records_file)
    records = store.load()

    records[0].mark_finished()
    records[0].mark_finished()

    assert store.finished_ids == ["1"]
    assert records[0].finished


def test_orchestrated_run_commits_earlier_records(records_file, catalog, fake_provider_class):
    provider = fake_provider_class(fail_on="Bye")
    store = RecordFileStore(records_file)
    records = store.load(locales=catalog.codes)

    with pytest.raises(ProviderError):
        TranslationOrchestrator(provider, catalog).translate(records, "en", "fr")

    df = load_data(records_file)
    fr_titles = df[(df["field"] == "title") & (df["locale"] == "fr")].set_index("record_id")["text"]
    assert fr_titles["1"] == "[French] Hello"
    assert fr_titles["2"] == ""
    assert store.finished_ids == ["1"]
