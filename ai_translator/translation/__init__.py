"""Translation module for selective translation of multilingual records."""

from .exceptions import (
    AlreadyTranslated,
    ConfigurationMissing,
    ProviderError,
    SameLocale,
    TranslationError,
    TranslationTimeout,
    UnsupportedLocale,
)
from .models import LocaleCatalog, Translatable, TranslatableRecord, TranslationPlan, VoiceTone
from .orchestrator import OutcomeStatus, OutcomeSummary, RecordStatus, TranslationOrchestrator
from .provider import JobHandle, SharpApiProvider, TranslatedContent, TranslationProvider, create_provider

__all__ = [
    "TranslationOrchestrator", "OutcomeSummary", "OutcomeStatus", "RecordStatus",
    "TranslationProvider", "SharpApiProvider", "JobHandle", "TranslatedContent", "create_provider",
    "LocaleCatalog", "Translatable", "TranslatableRecord", "TranslationPlan", "VoiceTone",
    "TranslationError", "ConfigurationMissing", "UnsupportedLocale", "SameLocale",
    "AlreadyTranslated", "ProviderError", "TranslationTimeout",
]
