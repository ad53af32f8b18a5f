"""Validation utilities."""

import re
from typing import Callable, Optional, Pattern, Union

ExcludeSpec = Union[str, Pattern, Callable[[str], bool], None]

# Terms flagged as platform-specific in the POEditor project
EXCLUDE_ANDROID_PATTERN = r'(^android_|_android$)'
EXCLUDE_IOS_PATTERN = r'(^ios_|_ios$)'


def is_valid_language_code(code: str) -> bool:
    """
    Validate a POEditor language code.

    Examples: en, fr, pt-br, zh-Hans, en_US
    """
    if not code or not isinstance(code, str):
        return False
    return bool(re.match(r'^[a-zA-Z]{2,3}([-_][a-zA-Z0-9]{2,4})?$', code))


def is_valid_exclude_pattern(pattern: Optional[str]) -> bool:
    """Check that an exclude pattern is empty or a compilable regex."""
    if pattern is None:
        return True
    if not isinstance(pattern, str):
        return False
    try:
        re.compile(pattern)
    except re.error:
        return False
    return True


def build_exclude_predicate(exclude: ExcludeSpec) -> Optional[Callable[[str], bool]]:
    """
    Normalize an exclude filter into an optional predicate.

    Args:
        exclude: Regex string, compiled pattern, callable or None

    Returns:
        A function returning True for terms to drop, or None when filtering is off

    Raises:
        re.error: If a string pattern does not compile
        TypeError: If the filter has an unsupported type
    """
    if exclude is None:
        return None

    if isinstance(exclude, str):
        exclude = re.compile(exclude)

    if isinstance(exclude, re.Pattern):
        return lambda term: exclude.search(term) is not None

    if callable(exclude):
        return exclude

    raise TypeError(f"Unsupported exclude filter: {exclude!r}")


def describe_exclude(exclude: ExcludeSpec) -> str:
    """Human readable form of an exclude filter for log messages."""
    if isinstance(exclude, re.Pattern):
        return f"/{exclude.pattern}/"
    if isinstance(exclude, str):
        return f"/{exclude}/"
    return getattr(exclude, '__name__', repr(exclude))

