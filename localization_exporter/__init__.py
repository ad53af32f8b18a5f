"""
Localization Exporter
=====================

Generate Apple localization files from POEditor term exports.

Usage:
    from localization_exporter import StringsFormatter, StringsDictFormatter

    document, stats = StringsFormatter().write(terms, language='fr')
    print(document.render('fr.lproj/Localizable.strings'))
    print(f"{stats.processed} strings processed")

CLI:
    localization-exporter init
    localization-exporter export --lang fr de
    localization-exporter export --input terms.json --lang fr
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.models import TermRecord, SingularText, PluralForms
from .core.stats import StatsCollector, RunStats
from .core.text_transform import OutputFormat, transform
from .core.header import build_header

# Formatters
from .formatters.strings import StringsFormatter, StringsDocument
from .formatters.stringsdict import StringsDictFormatter, StringsDictDocument
from .formatters.base import EXCLUDE_ANDROID, EXCLUDE_IOS

# Features
from .features.poeditor import POEditorClient, POEditorError
from .features.exporter import export_strings, export_stringsdict, load_terms_file

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'TermRecord',
    'SingularText',
    'PluralForms',
    'StatsCollector',
    'RunStats',
    'OutputFormat',
    'transform',
    'build_header',
    'StringsFormatter',
    'StringsDocument',
    'StringsDictFormatter',
    'StringsDictDocument',
    'EXCLUDE_ANDROID',
    'EXCLUDE_IOS',
    'POEditorClient',
    'POEditorError',
    'export_strings',
    'export_stringsdict',
    'load_terms_file',
]
