"""Term records as exported by POEditor."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class SingularText:
    """A definition with a single translation."""
    text: str

    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class PluralForms:
    """A pluralized definition: quantity tag -> text, in export order."""
    forms: Dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.forms

    def singular(self) -> str:
        """
        Text to use where only one form fits.

        Prefers the "one" form; languages without a singular/plural
        distinction only export "other", so fall back to the first form.
        """
        if 'one' in self.forms:
            return self.forms['one']
        return next(iter(self.forms.values()))


Definition = Union[SingularText, PluralForms]


def parse_definition(raw: Any) -> Optional[Definition]:
    """Convert a raw JSON definition into its typed form (None if unusable)."""
    if isinstance(raw, str):
        return SingularText(raw)
    if isinstance(raw, Mapping):
        return PluralForms({str(quantity): '' if text is None else str(text)
                            for quantity, text in raw.items()})
    return None


@dataclass
class TermRecord:
    """
    One translatable string.

    Attributes:
        term: Identifier used as key in the generated files
        definition: Translation, singular or pluralized (None when missing)
        comment: Translator note, written above the .strings entry
        context: Destination path carrying an en.lproj segment
        term_plural: Key for the .stringsdict entry, when set
    """
    term: Optional[str]
    definition: Optional[Definition] = None
    comment: str = ""
    context: str = ""
    term_plural: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TermRecord':
        """Build a record from one entry of a POEditor JSON export."""
        return cls(
            term=data.get('term'),
            definition=parse_definition(data.get('definition')),
            comment=data.get('comment') or '',
            context=data.get('context') or '',
            term_plural=data.get('term_plural') or None,
        )

    @property
    def is_incomplete(self) -> bool:
        """Missing or empty term or definition."""
        return not self.term or self.definition is None or self.definition.is_empty()

    @property
    def plural_key(self) -> str:
        """Key used in .stringsdict output."""
        return self.term_plural or self.term


def coerce_record(record: Union[TermRecord, Mapping[str, Any]]) -> TermRecord:
    """Accept either a TermRecord or a raw export dict."""
    if isinstance(record, TermRecord):
        return record
    return TermRecord.from_dict(record)
