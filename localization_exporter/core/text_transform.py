"""Text normalization applied to every exported translation."""

import re
from enum import Enum
from typing import Mapping, Optional

LINE_SEPARATOR = '\u2028'

# %s and positional %1$s
STRING_SPECIFIER = re.compile(r'%(\d+\$)?s')


class OutputFormat(Enum):
    """Target file format, which decides how newlines and quotes are written."""
    STRINGS = 'strings'
    STRINGSDICT = 'stringsdict'


def apply_substitutions(text: str, substitutions: Optional[Mapping[str, str]]) -> str:
    """Replace every occurrence of each token, in mapping order."""
    if not substitutions:
        return text
    for token, replacement in substitutions.items():
        text = text.replace(token, replacement)
    return text


def transform(
    text: str,
    substitutions: Optional[Mapping[str, str]] = None,
    output_format: OutputFormat = OutputFormat.STRINGS
) -> str:
    """
    Normalize a translation for an Apple localization file.

    Steps:
        1. Literal substitutions
        2. Drop U+2028 (inserted by the POEditor exporter)
        3. .strings: real line breaks -> "\\n"; .stringsdict: "\\n" -> real line breaks
        4. .strings only: escape double quotes
        5. %s -> %@ and %1$s -> %1$@

    Not idempotent: a text holding both a real line break and a literal
    "\\n" does not survive a round trip between the two formats.

    Args:
        text: Raw definition text
        substitutions: Literal token -> replacement mapping
        output_format: Target format

    Returns:
        Transformed text
    """
    text = apply_substitutions(text, substitutions)
    text = text.replace(LINE_SEPARATOR, '')

    if output_format is OutputFormat.STRINGS:
        text = text.replace('\n', '\\n')
        text = text.replace('"', '\\"')
    else:
        text = text.replace('\\n', '\n')

    return STRING_SPECIFIER.sub(r'%\1@', text)
