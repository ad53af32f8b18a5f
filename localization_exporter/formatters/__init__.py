"""Output formatters for Apple localization files."""

from .base import BaseFormatter, EXCLUDE_ANDROID, EXCLUDE_IOS
from .strings import StringsFormatter, StringsDocument
from .stringsdict import StringsDictFormatter, StringsDictDocument

__all__ = [
    'BaseFormatter',
    'EXCLUDE_ANDROID',
    'EXCLUDE_IOS',
    'StringsFormatter',
    'StringsDocument',
    'StringsDictFormatter',
    'StringsDictDocument',
]
