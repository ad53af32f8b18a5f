"""Per-run export statistics."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..utils.logging import get_logger
from ..utils.validators import ExcludeSpec, describe_exclude


@dataclass(frozen=True)
class RunStats:
    """Read-only summary of one formatter run."""
    processed: int = 0
    excluded: int = 0
    invalid: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'processed': self.processed,
            'excluded': self.excluded,
            'invalid': list(self.invalid),
        }


@dataclass
class StatsCollector:
    """Accumulates processed/excluded/invalid counts during one pass."""
    processed: int = 0
    excluded: int = 0
    invalid: List[str] = field(default_factory=list)

    def record_invalid(self, term) -> None:
        self.invalid.append(term)

    def record_excluded(self) -> None:
        self.excluded += 1

    def record_processed(self) -> None:
        self.processed += 1

    def snapshot(self) -> RunStats:
        return RunStats(
            processed=self.processed,
            excluded=self.excluded,
            invalid=tuple(self.invalid),
        )


def log_stats(stats: RunStats, exclude: ExcludeSpec = None) -> None:
    """
    Log a run summary.

    Args:
        stats: Result of a formatter run
        exclude: Filter used for the run (the filtered count is only logged when set)
    """
    logger = get_logger()
    logger.info(f"   [Stats] {stats.processed} strings processed")

    if exclude is not None:
        logger.info(f"   Filtered out {stats.excluded} strings matching {describe_exclude(exclude)}")

    if stats.invalid:
        logger.error(f"   Found {len(stats.invalid)} empty value(s) for the following term(s):")
        for term in stats.invalid:
            logger.error(f"    - {term!r}")
