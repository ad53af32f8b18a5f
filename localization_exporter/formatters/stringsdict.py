"""Localizable.stringsdict generation."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple

from lxml import etree

from ..core.header import format_timestamp
from ..core.models import PluralForms, SingularText
from ..core.stats import RunStats, StatsCollector
from ..core.text_transform import OutputFormat, transform
from ..utils.validators import ExcludeSpec
from .base import BaseFormatter, EXCLUDE_ANDROID, RecordInput

XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>\n'
PLIST_VERSION = '1.0'
INDENT = '    '

LOCALIZED_FORMAT_KEY = 'NSStringLocalizedFormatKey'
LOCALIZED_FORMAT = '%#@format@'
FORMAT_VARIABLE = 'format'
SPEC_TYPE_KEY = 'NSStringFormatSpecTypeKey'
PLURAL_RULE_TYPE = 'NSStringPluralRuleType'
VALUE_TYPE_KEY = 'NSStringFormatValueTypeKey'
VALUE_TYPE = 'd'

# Anything outside the XML 1.0 Char production; lxml refuses these.
INVALID_XML_CHARS = re.compile(
    '[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]'
)
REPLACEMENT_CHAR = '*'


@dataclass
class StringsDictDocument:
    """A generated plist document."""
    tree: etree._ElementTree

    @property
    def root_dict(self) -> etree._Element:
        return self.tree.getroot()[0]

    def keys(self) -> List[str]:
        """Top-level keys, in output order."""
        return [node.text for node in self.root_dict if node.tag == 'key']

    def to_bytes(self) -> bytes:
        etree.indent(self.tree, space=INDENT)
        body = etree.tostring(self.tree, encoding='UTF-8', xml_declaration=False, pretty_print=True)
        return XML_DECLARATION + body

    def to_string(self) -> str:
        return self.to_bytes().decode('utf-8')

    def save(self, file_path: Path) -> Path:
        """Write the document, creating parent directories."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'wb') as f:
            f.write(self.to_bytes())
        return file_path


def xml_safe(text: str) -> str:
    """Replace characters XML cannot hold with an asterisk."""
    return INVALID_XML_CHARS.sub(REPLACEMENT_CHAR, text)


def _add_pair(parent: etree._Element, key: str, value: str) -> None:
    etree.SubElement(parent, 'key').text = xml_safe(key)
    etree.SubElement(parent, 'string').text = xml_safe(value)


class StringsDictFormatter(BaseFormatter):
    """
    Formatter for Apple's .stringsdict pluralization rules.

    Only pluralized definitions are written. Singular definitions are
    dropped without touching the stats, since they belong in the
    .strings file.
    """

    @staticmethod
    def new_document(print_date: bool = False) -> StringsDictDocument:
        """Empty plist with the export comments."""
        plist = etree.Element('plist', version=PLIST_VERSION)
        etree.SubElement(plist, 'dict')

        comments = [' Exported from POEditor ']
        if print_date:
            comments.append(f' {format_timestamp()} ')
        comments.append(' see https://poeditor.com ')
        for text in comments:
            plist.addprevious(etree.Comment(text))

        return StringsDictDocument(etree.ElementTree(plist))

    def write(
        self,
        records: Iterable[RecordInput],
        substitutions: Optional[Mapping[str, str]] = None,
        print_date: bool = False,
        exclude: ExcludeSpec = EXCLUDE_ANDROID
    ) -> Tuple[StringsDictDocument, RunStats]:
        """
        Build a .stringsdict document.

        Args:
            records: Term records (TermRecord or raw POEditor dicts), in output order
            substitutions: Literal token -> replacement mapping
            print_date: Add a comment with the generation time
            exclude: Filter for terms to leave out (None keeps everything)

        Returns:
            (document, stats) tuple
        """
        document = self.new_document(print_date)
        root_dict = document.root_dict
        stats = StatsCollector()
        is_excluded = self.exclude_predicate(exclude)

        for record in self.iter_records(records):
            if not self.accept(record, stats, is_excluded):
                continue

            definition = record.definition
            if isinstance(definition, SingularText):
                continue
            if not isinstance(definition, PluralForms):
                raise TypeError(f"Unexpected definition for {record.term!r}: {definition!r}")
            stats.record_processed()

            etree.SubElement(root_dict, 'key').text = xml_safe(record.plural_key)
            entry = etree.SubElement(root_dict, 'dict')
            _add_pair(entry, LOCALIZED_FORMAT_KEY, LOCALIZED_FORMAT)

            etree.SubElement(entry, 'key').text = FORMAT_VARIABLE
            format_dict = etree.SubElement(entry, 'dict')
            _add_pair(format_dict, SPEC_TYPE_KEY, PLURAL_RULE_TYPE)
            _add_pair(format_dict, VALUE_TYPE_KEY, VALUE_TYPE)

            for quantity, text in definition.forms.items():
                _add_pair(format_dict, quantity, transform(text, substitutions, OutputFormat.STRINGSDICT))

        return document, stats.snapshot()
