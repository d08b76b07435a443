"""
Pytest configuration and fixtures for all tests.

Provides a fake translation provider and small record sets so that no test
talks to the network.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from ai_translator.translation.exceptions import ProviderError
from ai_translator.translation.models import LocaleCatalog, TranslatableRecord
from ai_translator.translation.provider import JobHandle, TranslatedContent, TranslationProvider


class FakeProvider(TranslationProvider):
    """Provider that translates by prefixing the target language name."""

    def __init__(self, configured=True, fail_on=None):
        self.configured = configured
        self.fail_on = fail_on
        self.submissions = []
        self.fetch_timeouts = []
        self._jobs = {}

    def is_configured(self):
        return self.configured

    def submit(self, text, target_language, tone, context):
        if self.fail_on is not None and text == self.fail_on:
            raise ProviderError(f"remote job failed for {text!r}")
        job_id = str(len(self.submissions))
        self.submissions.append({
            "text": text,
            "target_language": target_language,
            "tone": tone,
            "context": context,
        })
        self._jobs[job_id] = f"[{target_language}] {text}"
        return JobHandle(job_id=job_id, status_url=f"fake://jobs/{job_id}")

    def fetch_result(self, handle, timeout=None):
        self.fetch_timeouts.append(timeout)
        return TranslatedContent(content=self._jobs.pop(handle.job_id))

    @property
    def call_count(self):
        return len(self.submissions)


class SavingRecord(TranslatableRecord):
    """Record that counts saves and finish notifications."""

    def __init__(self, record_id, fields):
        super().__init__(record_id=record_id, fields=fields)
        self.save_count = 0
        self.finish_count = 0

    def save(self):
        self.save_count += 1

    def mark_finished(self):
        super().mark_finished()
        self.finish_count += 1


@pytest.fixture
def catalog():
    return LocaleCatalog({"en": "English", "fr": "French"})


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def make_record():
    def _make(record_id="1", **fields):
        return SavingRecord(record_id, {name: dict(values) for name, values in fields.items()})
    return _make


@pytest.fixture
def fake_provider_class():
    return FakeProvider
