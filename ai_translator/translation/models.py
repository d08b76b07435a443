"""Data model for translatable records, locales and voice tones."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union


def is_blank(value: Optional[str]) -> bool:
    """Return True when the value is missing or whitespace only."""
    return value is None or not str(value).strip()


class VoiceTone(str, Enum):
    """Voice tone passed to the translation provider."""

    NEUTRAL = "neutral"
    FORMAL = "formal"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    ENTHUSIASTIC = "enthusiastic"
    HUMOROUS = "humorous"
    SERIOUS = "serious"
    EMPATHETIC = "empathetic"
    PERSUASIVE = "persuasive"

    @classmethod
    def default(cls) -> "VoiceTone":
        return cls.NEUTRAL

    @classmethod
    def from_value(cls, value: Union["VoiceTone", str, None]) -> "VoiceTone":
        """Resolve a tone from an enum member, a string or None (default tone)."""
        if value is None:
            return cls.default()
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        if not normalized:
            return cls.default()

        for tone in cls:
            if tone.value == normalized:
                return tone

        raise ValueError(f"Unsupported voice tone: {value}")

    @classmethod
    def options(cls) -> Dict[str, str]:
        """Get tone choices mapping value to a display label."""
        return {tone.value: tone.value.capitalize() for tone in cls}


class LocaleCatalog:
    """Ordered, read-only mapping from locale code to display name."""

    def __init__(self, locales: Optional[Mapping[str, str]] = None):
        self._locales = MappingProxyType(dict(locales or {}))

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "LocaleCatalog":
        locales = config.get("locales") or {}
        if not isinstance(locales, Mapping):
            raise ValueError("locales must be a mapping of locale code to display name")
        return cls(locales)

    @property
    def codes(self) -> List[str]:
        return list(self._locales)

    def display_name(self, code: str) -> str:
        """Get the display name, falling back to the capitalized code."""
        return self._locales.get(code) or code.capitalize()

    def target_options(self, source: Optional[str]) -> Dict[str, str]:
        """Get the locales a text in `source` can be translated into."""
        return {code: name for code, name in self._locales.items() if code != source}

    def __contains__(self, code: object) -> bool:
        return code in self._locales

    def __getitem__(self, code: str) -> str:
        return self._locales[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __bool__(self) -> bool:
        return bool(self._locales)

    def __repr__(self) -> str:
        return f"LocaleCatalog({dict(self._locales)!r})"


class Translatable(ABC):
    """
    Capability of a record whose fields store text per locale.

    Only records that subclass (or are registered with) this class are
    handled by the orchestrator.
    """

    @abstractmethod
    def translatable_fields(self) -> List[str]:
        """Names of the fields that hold per-locale text."""

    @abstractmethod
    def get_translation(self, field_name: str, locale: str) -> str:
        """Get the text stored for a locale, without falling back to other locales."""

    @abstractmethod
    def set_translation(self, field_name: str, locale: str, text: str) -> None:
        """Store the text for one locale of one field."""

    @abstractmethod
    def save(self) -> None:
        """Persist every pending field change at once."""

    @abstractmethod
    def mark_finished(self) -> None:
        """Notify the owner that translation of this record is finished."""


@dataclass
class TranslatableRecord(Translatable):
    """In-memory record with multilingual fields."""

    record_id: str
    fields: Dict[str, Dict[str, str]] = field(default_factory=dict)
    store: Optional[Any] = field(default=None, repr=False, compare=False)
    finished: bool = False

    def translatable_fields(self) -> List[str]:
        return list(self.fields)

    def get_translation(self, field_name: str, locale: str) -> str:
        value = self.fields.get(field_name, {}).get(locale)
        return "" if value is None else value

    def set_translation(self, field_name: str, locale: str, text: str) -> None:
        self.fields.setdefault(field_name, {})[locale] = text

    def ensure_locales(self, codes: Iterable[str]) -> None:
        """Give every field an entry (possibly empty) for every known locale."""
        codes = list(codes)
        for translations in self.fields.values():
            for code in codes:
                translations.setdefault(code, "")

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self)

    def mark_finished(self) -> None:
        self.finished = True
        if self.store is not None:
            self.store.mark_finished(self)


@dataclass(frozen=True)
class TranslationRequest:
    """One field of one record to translate."""

    record: Any
    field_name: str
    source_locale: str
    target_locale: str
    tone: VoiceTone
    text: str


@dataclass(frozen=True)
class TranslationResult:
    """Translated text for one field."""

    field_name: str
    text: str


# Field plan actions
TRANSLATE = "translate"
SKIP_TARGET_FILLED = "skip_target_filled"
SKIP_SOURCE_BLANK = "skip_source_blank"


@dataclass(frozen=True)
class FieldPlan:
    """What a run would do with one field."""

    field_name: str
    action: str

    @property
    def will_translate(self) -> bool:
        return self.action == TRANSLATE


@dataclass
class RecordPlan:
    record_id: str
    fields: List[FieldPlan] = field(default_factory=list)

    @property
    def already_translated(self) -> bool:
        return bool(self.fields) and all(
            plan.action == SKIP_TARGET_FILLED for plan in self.fields
        )

    @property
    def fields_to_translate(self) -> List[str]:
        return [plan.field_name for plan in self.fields if plan.will_translate]


@dataclass
class TranslationPlan:
    """Preview of a translation run, computed without calling the provider."""

    source_locale: str
    target_locale: str
    source_name: str
    target_name: str
    records: List[RecordPlan] = field(default_factory=list)

    @property
    def field_names(self) -> List[str]:
        names: List[str] = []
        for record in self.records:
            for plan in record.fields:
                if plan.field_name not in names:
                    names.append(plan.field_name)
        return names

    def describe(self) -> str:
        """Render the operator-facing summary of the fields to be translated."""
        lines = [f"Fields to be translated from {self.source_name} to {self.target_name}:"]
        lines.extend(f"  - {name}" for name in self.field_names)
        lines.append(
            f"If any field above already contains content in {self.target_name}, "
            "translation for it will be ignored."
        )
        return "\n".join(lines)
