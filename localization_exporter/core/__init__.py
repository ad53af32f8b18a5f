"""Core modules shared by both output formats."""

from .models import TermRecord, SingularText, PluralForms, Definition
from .stats import StatsCollector, RunStats, log_stats
from .text_transform import OutputFormat, transform
from .header import build_header

__all__ = [
    'TermRecord',
    'SingularText',
    'PluralForms',
    'Definition',
    'StatsCollector',
    'RunStats',
    'log_stats',
    'OutputFormat',
    'transform',
    'build_header',
]
