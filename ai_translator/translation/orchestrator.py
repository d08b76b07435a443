"""Orchestrates selective translation of multilingual records."""

import time
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Mapping, Union

from .exceptions import (
    ALREADY_TRANSLATED_MESSAGE,
    SAME_LOCALE_MESSAGE,
    UNSUPPORTED_LOCALE_MESSAGE,
    AlreadyTranslated,
    SameLocale,
    TranslationTimeout,
    UnsupportedLocale,
)
from .models import (
    SKIP_SOURCE_BLANK,
    SKIP_TARGET_FILLED,
    TRANSLATE,
    FieldPlan,
    LocaleCatalog,
    RecordPlan,
    Translatable,
    TranslationPlan,
    TranslationRequest,
    TranslationResult,
    VoiceTone,
    is_blank,
)
from .provider import TranslationProvider


logger = logging.getLogger(__name__)


DEFAULT_TIME_BUDGET = 600.0

ABORT = "abort"
SKIP = "skip"
ALREADY_TRANSLATED_POLICIES = (ABORT, SKIP)


class OutcomeStatus(str, Enum):
    """Overall result of a translation run."""

    SUCCESS = "success"
    UNSUPPORTED_LOCALE = "unsupported_locale"
    ALREADY_TRANSLATED = "already_translated"


class RecordStatus(str, Enum):
    TRANSLATED = "translated"
    ALREADY_TRANSLATED = "already_translated"
    SKIPPED = "skipped"


@dataclass
class RecordOutcome:
    record_id: str
    status: RecordStatus
    translated_fields: List[str] = field(default_factory=list)


@dataclass
class OutcomeSummary:
    """Summary returned by TranslationOrchestrator.translate."""

    status: OutcomeStatus
    message: str
    translated_fields: List[str] = field(default_factory=list)
    records: List[RecordOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS


def _record_id(record: Any) -> str:
    return str(getattr(record, "record_id", record))


class TranslationOrchestrator:
    """
    Fills missing target-locale content of records through a provider.

    Target content that is already present is never overwritten. Each
    record is saved once after all of its fields were processed.
    """

    def __init__(
        self,
        provider: TranslationProvider,
        locales: Union[LocaleCatalog, Mapping[str, str], None],
        time_budget: float = DEFAULT_TIME_BUDGET,
        max_workers: int = 1,
        on_already_translated: str = ABORT,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize orchestrator.

        Args:
            provider: Translation provider client
            locales: Locale catalog (code -> display name)
            time_budget: Wall-clock seconds allowed for one translate() call
            max_workers: Fields of one record translated at the same time
            on_already_translated: "abort" stops the batch at the first fully
                translated record, "skip" moves on to the next record
            clock: Monotonic clock, replaceable in tests
        """
        if max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        if on_already_translated not in ALREADY_TRANSLATED_POLICIES:
            raise ValueError(
                f"on_already_translated must be one of: {', '.join(ALREADY_TRANSLATED_POLICIES)}"
            )

        self.provider = provider
        self.locales = locales if isinstance(locales, LocaleCatalog) else LocaleCatalog(locales)
        self.time_budget = time_budget
        self.max_workers = max_workers
        self.on_already_translated = on_already_translated
        self._clock = clock

    def translate(
        self,
        records: Iterable[Any],
        source_locale: str,
        target_locale: str,
        tone: Union[VoiceTone, str, None] = None
    ) -> OutcomeSummary:
        """
        Translate the blank target-locale fields of the given records.

        Args:
            records: Records to process, in order
            source_locale: Locale code to translate from
            target_locale: Locale code to translate into
            tone: Voice tone (defaults to neutral)

        Returns:
            Outcome summary

        Raises:
            ConfigurationMissing: If the catalog or the credential is absent
            ProviderError: If the provider fails for any field
            TranslationTimeout: If the run exceeds its time budget
        """
        self.check_configuration()

        try:
            self._validate_locales(source_locale, target_locale)
        except UnsupportedLocale as e:
            logger.warning(f"Rejected translation {source_locale} -> {target_locale}: {e}")
            return OutcomeSummary(status=OutcomeStatus.UNSUPPORTED_LOCALE, message=str(e))

        tone = VoiceTone.from_value(tone)
        deadline = self._clock() + self.time_budget

        logger.info(
            f"Translating records from {source_locale} to {target_locale} (tone: {tone.value})"
        )

        translated_fields: List[str] = []
        outcomes: List[RecordOutcome] = []

        for record in records:
            record_id = _record_id(record)

            if not isinstance(record, Translatable) or not record.translatable_fields():
                logger.debug(f"Record {record_id} has no translatable fields, skipping")
                outcomes.append(RecordOutcome(record_id, RecordStatus.SKIPPED))
                continue

            fields = record.translatable_fields()

            try:
                self._ensure_needs_translation(record, fields, target_locale)
            except AlreadyTranslated as e:
                outcomes.append(RecordOutcome(record_id, RecordStatus.ALREADY_TRANSLATED))
                if self.on_already_translated == ABORT:
                    logger.warning(f"Record {record_id} is already translated, aborting batch")
                    return OutcomeSummary(
                        status=OutcomeStatus.ALREADY_TRANSLATED,
                        message=str(e),
                        translated_fields=translated_fields,
                        records=outcomes
                    )
                logger.info(f"Record {record_id} is already translated, skipping")
                continue

            done = self._translate_record(
                record, fields, source_locale, target_locale, tone, deadline
            )
            record.mark_finished()

            translated_fields.extend(done)
            outcomes.append(RecordOutcome(record_id, RecordStatus.TRANSLATED, done))

        statuses = {outcome.status for outcome in outcomes}
        if RecordStatus.ALREADY_TRANSLATED in statuses and RecordStatus.TRANSLATED not in statuses:
            return OutcomeSummary(
                status=OutcomeStatus.ALREADY_TRANSLATED,
                message=ALREADY_TRANSLATED_MESSAGE,
                records=outcomes
            )

        unique_fields = list(dict.fromkeys(translated_fields))
        message = f"Translation completed successfully for fields: {', '.join(unique_fields)}."
        logger.info(message)

        return OutcomeSummary(
            status=OutcomeStatus.SUCCESS,
            message=message,
            translated_fields=translated_fields,
            records=outcomes
        )

    def preview(self, records: Iterable[Any], source_locale: str, target_locale: str) -> TranslationPlan:
        """
        Describe what translate() would do, without calling the provider.

        Raises:
            UnsupportedLocale: If either locale is not in the catalog
        """
        self._validate_locales(source_locale, target_locale)

        plan = TranslationPlan(
            source_locale=source_locale,
            target_locale=target_locale,
            source_name=self.locales[source_locale],
            target_name=self.locales[target_locale]
        )

        for record in records:
            if not isinstance(record, Translatable):
                continue

            record_plan = RecordPlan(record_id=_record_id(record))
            for name in record.translatable_fields():
                record_plan.fields.append(
                    FieldPlan(name, self._field_action(record, name, source_locale, target_locale))
                )
            plan.records.append(record_plan)

        return plan

    def check_configuration(self) -> None:
        """Raise ConfigurationMissing unless locales and credential are set."""
        # config.validator imports this module
        from ai_translator.config.validator import ConfigValidator

        ConfigValidator.check_required(self.locales, has_credential=self.provider.is_configured())

    def _validate_locales(self, source_locale: str, target_locale: str) -> None:
        if source_locale not in self.locales or target_locale not in self.locales:
            raise UnsupportedLocale(UNSUPPORTED_LOCALE_MESSAGE, source_locale, target_locale)
        if source_locale == target_locale:
            raise SameLocale(SAME_LOCALE_MESSAGE, source_locale, target_locale)

    @staticmethod
    def _field_action(record: Translatable, name: str, source_locale: str, target_locale: str) -> str:
        if not is_blank(record.get_translation(name, target_locale)):
            return SKIP_TARGET_FILLED
        if is_blank(record.get_translation(name, source_locale)):
            return SKIP_SOURCE_BLANK
        return TRANSLATE

    @staticmethod
    def _ensure_needs_translation(record: Translatable, fields: List[str], target_locale: str) -> None:
        """Raise AlreadyTranslated if every field has target content."""
        for name in fields:
            if is_blank(record.get_translation(name, target_locale)):
                logger.debug(f"Field {name} of record {_record_id(record)} is blank in {target_locale}")
                return

        raise AlreadyTranslated(ALREADY_TRANSLATED_MESSAGE, record)

    def _translate_record(
        self,
        record: Translatable,
        fields: List[str],
        source_locale: str,
        target_locale: str,
        tone: VoiceTone,
        deadline: float
    ) -> List[str]:
        pending: List[TranslationRequest] = []

        for name in fields:
            action = self._field_action(record, name, source_locale, target_locale)
            if action != TRANSLATE:
                logger.debug(f"Field {name} of record {_record_id(record)}: {action}")
                continue

            pending.append(TranslationRequest(
                record=record,
                field_name=name,
                source_locale=source_locale,
                target_locale=target_locale,
                tone=tone,
                text=record.get_translation(name, source_locale)
            ))

        translated: List[str] = []

        if self.max_workers == 1 or len(pending) < 2:
            for request in pending:
                result = self._call_provider(request, deadline)
                record.set_translation(result.field_name, target_locale, result.text)
                translated.append(result.field_name)
        else:
            for result in self._run_concurrently(pending, deadline):
                record.set_translation(result.field_name, target_locale, result.text)
                translated.append(result.field_name)

        record.save()
        return translated

    def _run_concurrently(self, pending: List[TranslationRequest], deadline: float) -> List[TranslationResult]:
        """Translate fields of one record in a bounded pool, keeping field order."""
        workers = min(self.max_workers, len(pending))
        results: List[TranslationResult] = []

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: List[Future] = [
                executor.submit(self._call_provider, request, deadline) for request in pending
            ]
            try:
                for future in futures:
                    results.append(future.result())
            except Exception:
                for future in futures:
                    future.cancel()
                raise

        return results

    def _remaining(self, deadline: float, request: TranslationRequest) -> float:
        remaining = deadline - self._clock()
        if remaining <= 0:
            raise TranslationTimeout(
                f"Translation exceeded its {self.time_budget:.0f}s budget "
                f"before field {request.field_name} of record {_record_id(request.record)}"
            )
        return remaining

    def _call_provider(self, request: TranslationRequest, deadline: float) -> TranslationResult:
        source_name = self.locales[request.source_locale]
        target_name = self.locales[request.target_locale]

        text = self.provider.translate(
            request.text,
            target_name,
            request.tone.value,
            f"Source language is {source_name}",
            timeout=self._remaining(deadline, request)
        )

        return TranslationResult(field_name=request.field_name, text=text)
