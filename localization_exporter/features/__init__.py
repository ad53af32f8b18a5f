"""Feature modules."""

from .poeditor import POEditorClient, POEditorError
from .exporter import export_strings, export_stringsdict, load_terms_file

__all__ = [
    'POEditorClient',
    'POEditorError',
    'export_strings',
    'export_stringsdict',
    'load_terms_file',
]
