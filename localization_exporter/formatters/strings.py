"""Localizable.strings generation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.header import build_header
from ..core.models import PluralForms, SingularText, TermRecord
from ..core.stats import RunStats, StatsCollector
from ..core.text_transform import OutputFormat, transform
from ..utils.validators import ExcludeSpec
from .base import BaseFormatter, EXCLUDE_ANDROID, RecordInput

SOURCE_LPROJ = 'en.lproj'
DEFAULT_CONTEXT = f'{SOURCE_LPROJ}/Localizable.strings'


@dataclass
class StringsDocument:
    """Generated .strings content: destination path -> lines, in arrival order."""
    files: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def paths(self) -> List[str]:
        return list(self.files)

    def render(self, path: str) -> str:
        """File content for one destination."""
        return '\n'.join(self.files[path])

    def write_file(self, path: str, base_dir: Path = Path('.')) -> Path:
        """
        Write one destination to disk, creating parent directories.

        Args:
            path: Destination as resolved by the formatter
            base_dir: Directory the destination is relative to

        Returns:
            Path of the written file
        """
        file_path = Path(base_dir) / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(self.render(path))
        return file_path

    def save(self, base_dir: Path = Path('.')) -> List[Path]:
        """Write every destination; returns the written paths."""
        return [self.write_file(path, base_dir) for path in self.files]


class StringsFormatter(BaseFormatter):
    """
    Formatter for Apple's key/value .strings files.

    Records are grouped by their context path, with the en.lproj segment
    swapped for the target language. Plural definitions collapse to their
    singular form.
    """

    @staticmethod
    def resolve_path(context: str, language: str) -> str:
        """Swap the en.lproj segment of a context for the target language."""
        return (context or DEFAULT_CONTEXT).replace(SOURCE_LPROJ, f'{language}.lproj', 1)

    @staticmethod
    def singular_text(record: TermRecord) -> str:
        definition = record.definition
        if isinstance(definition, PluralForms):
            return definition.singular()
        if isinstance(definition, SingularText):
            return definition.text
        raise TypeError(f"Unexpected definition for {record.term!r}: {definition!r}")

    def write(
        self,
        records: Iterable[RecordInput],
        language: str,
        substitutions: Optional[Mapping[str, str]] = None,
        print_date: bool = False,
        exclude: ExcludeSpec = EXCLUDE_ANDROID
    ) -> Tuple[StringsDocument, RunStats]:
        """
        Build .strings files for a language.

        Args:
            records: Term records (TermRecord or raw POEditor dicts), in output order
            language: Target language code, used for the <lang>.lproj segment
            substitutions: Literal token -> replacement mapping
            print_date: Print the generation time in each header
            exclude: Filter for terms to leave out (None keeps everything)

        Returns:
            (document, stats) tuple
        """
        document = StringsDocument()
        stats = StatsCollector()
        is_excluded = self.exclude_predicate(exclude)

        for record in self.iter_records(records):
            file_path = self.resolve_path(record.context, language)
            if file_path not in document.files:
                document.files[file_path] = build_header(print_date)
            out_lines = document.files[file_path]

            if not self.accept(record, stats, is_excluded):
                continue
            stats.record_processed()

            definition = transform(self.singular_text(record), substitutions, OutputFormat.STRINGS)

            if record.comment:
                comment = record.comment.replace('\n', '\\n')
                out_lines.append(f'/* {comment} */')
            out_lines.append(f'"{record.term}" = "{definition}";')
            out_lines.append('')

        return document, stats.snapshot()
