"""Base formatter interface shared by the Apple output formats."""

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from ..core.models import TermRecord, coerce_record
from ..core.stats import RunStats, StatsCollector
from ..utils.validators import (
    EXCLUDE_ANDROID_PATTERN,
    EXCLUDE_IOS_PATTERN,
    ExcludeSpec,
    build_exclude_predicate,
)

EXCLUDE_ANDROID = re.compile(EXCLUDE_ANDROID_PATTERN)
EXCLUDE_IOS = re.compile(EXCLUDE_IOS_PATTERN)

RecordInput = Union[TermRecord, Mapping[str, Any]]


class BaseFormatter(ABC):
    """Base class for formatters turning term records into one output format."""

    @abstractmethod
    def write(
        self,
        records: Iterable[RecordInput],
        *args,
        **kwargs
    ) -> Tuple[Any, RunStats]:
        """
        Build the output document for a list of records.

        Returns:
            (document, stats) tuple
        """
        pass

    @staticmethod
    def accept(
        record: TermRecord,
        stats: StatsCollector,
        is_excluded: Optional[Callable[[str], bool]]
    ) -> bool:
        """
        Classify a record, updating stats for skipped records.

        Checked in order: incomplete (term kept as invalid), excluded by
        the filter. A record is skipped for at most one reason.

        Returns:
            True if the record should be written
        """
        if record.is_incomplete:
            stats.record_invalid(record.term)
            return False

        if is_excluded is not None and is_excluded(record.term):
            stats.record_excluded()
            return False

        return True

    @staticmethod
    def iter_records(records: Iterable[RecordInput]) -> Iterable[TermRecord]:
        """Yield typed records from TermRecords or raw export dicts."""
        for record in records:
            yield coerce_record(record)

    @staticmethod
    def exclude_predicate(exclude: ExcludeSpec) -> Optional[Callable[[str], bool]]:
        return build_exclude_predicate(exclude)
