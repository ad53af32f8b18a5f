"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, create_default_config
from .validators import (
    EXCLUDE_ANDROID_PATTERN,
    EXCLUDE_IOS_PATTERN,
    is_valid_language_code,
    is_valid_exclude_pattern,
    build_exclude_predicate,
    describe_exclude,
)

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'create_default_config',
    'EXCLUDE_ANDROID_PATTERN',
    'EXCLUDE_IOS_PATTERN',
    'is_valid_language_code',
    'is_valid_exclude_pattern',
    'build_exclude_predicate',
    'describe_exclude',
]
