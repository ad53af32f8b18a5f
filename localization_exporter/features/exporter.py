"""Write generated localization files to disk."""

import json
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from ..core.models import TermRecord
from ..core.stats import RunStats, log_stats
from ..formatters.base import EXCLUDE_ANDROID, RecordInput
from ..formatters.strings import StringsFormatter
from ..formatters.stringsdict import StringsDictFormatter
from ..utils.logging import get_logger
from ..utils.validators import ExcludeSpec


def load_terms_file(path: Path) -> List[TermRecord]:
    """
    Read a POEditor JSON export from disk.

    Args:
        path: Path of the downloaded export

    Returns:
        Term records in file order

    Raises:
        ValueError: If the file does not hold a list of terms
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of terms")

    return [TermRecord.from_dict(term) for term in data]


def export_strings(
    records: Iterable[RecordInput],
    language: str,
    output_dir: Path = Path('.'),
    substitutions: Optional[Mapping[str, str]] = None,
    print_date: bool = False,
    exclude: ExcludeSpec = EXCLUDE_ANDROID
) -> RunStats:
    """
    Generate and save the .strings files of a language.

    Args:
        records: Term records
        language: Target language code
        output_dir: Directory the record contexts are relative to
        substitutions: Literal token -> replacement mapping
        print_date: Print the generation time in the headers
        exclude: Filter for terms to leave out

    Returns:
        Run statistics
    """
    logger = get_logger()
    document, stats = StringsFormatter().write(
        records,
        language,
        substitutions=substitutions,
        print_date=print_date,
        exclude=exclude,
    )

    for path in document.paths:
        logger.info(f" - Save to file: {path}")
        document.write_file(path, output_dir)

    log_stats(stats, exclude)
    return stats


def export_stringsdict(
    records: Iterable[RecordInput],
    file_path: Path,
    substitutions: Optional[Mapping[str, str]] = None,
    print_date: bool = False,
    exclude: ExcludeSpec = EXCLUDE_ANDROID
) -> RunStats:
    """
    Generate and save a .stringsdict file.

    Args:
        records: Term records
        file_path: Destination file
        substitutions: Literal token -> replacement mapping
        print_date: Add a comment with the generation time
        exclude: Filter for terms to leave out

    Returns:
        Run statistics
    """
    document, stats = StringsDictFormatter().write(
        records,
        substitutions=substitutions,
        print_date=print_date,
        exclude=exclude,
    )

    get_logger().info(f" - Save to file: {file_path}")
    document.save(file_path)

    log_stats(stats, exclude)
    return stats
