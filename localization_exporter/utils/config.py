"""Configuration management for localization exporter."""

import os
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from .validators import (
    EXCLUDE_ANDROID_PATTERN,
    is_valid_exclude_pattern,
    is_valid_language_code,
)

CONFIG_FILE_NAME = '.localization-export.yml'
TOKEN_ENV_VAR = 'POEDITOR_API_TOKEN'


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class POEditorConfig:
    """POEditor API credentials."""
    api_token: str = ""
    project_id: str = ""

    def resolved_token(self) -> str:
        """Token from the config file, falling back to the environment."""
        return self.api_token or os.environ.get(TOKEN_ENV_VAR, '')


@dataclass
class ExportConfig:
    """What to export and how."""
    languages: List[str] = field(default_factory=lambda: ["en"])
    print_date: bool = False
    # None disables term filtering
    exclude: Optional[str] = EXCLUDE_ANDROID_PATTERN
    # Literal token -> replacement, applied in order
    substitutions: Dict[str, str] = field(default_factory=dict)


@dataclass
class OutputConfig:
    """Where generated files go."""
    strings_dir: str = "."
    # Formatted with {language}; None skips .stringsdict generation
    stringsdict: Optional[str] = "{language}.lproj/Localizable.stringsdict"

    def stringsdict_path(self, language: str, strings_dir: Optional[str] = None) -> Optional[Path]:
        """Resolve the .stringsdict destination for a language."""
        if not self.stringsdict:
            return None
        return Path(strings_dir or self.strings_dir) / self.stringsdict.format(language=language)


@dataclass
class Config:
    """Main configuration class."""
    poeditor: POEditorConfig = field(default_factory=POEditorConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            poeditor=POEditorConfig(**data.get('poeditor', {})),
            export=ExportConfig(**data.get('export', {})),
            output=OutputConfig(**data.get('output', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'poeditor': {
                'api_token': self.poeditor.api_token,
                'project_id': self.poeditor.project_id,
            },
            'export': {
                'languages': self.export.languages,
                'print_date': self.export.print_date,
                'exclude': self.export.exclude,
                'substitutions': self.export.substitutions,
            },
            'output': {
                'strings_dir': self.output.strings_dir,
                'stringsdict': self.output.stringsdict,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        if not self.export.languages:
            errors.append("export.languages must list at least one language")

        for lang in self.export.languages:
            if not is_valid_language_code(lang):
                errors.append(
                    f"Invalid language code: '{lang}'. "
                    f"Use POEditor codes (e.g., 'en', 'fr', 'pt-br')"
                )

        if not is_valid_exclude_pattern(self.export.exclude):
            errors.append(f"export.exclude is not a valid regular expression: {self.export.exclude!r}")

        if not isinstance(self.export.substitutions, dict):
            errors.append("export.substitutions must be a mapping of token -> replacement")
        else:
            for token, replacement in self.export.substitutions.items():
                if not isinstance(token, str) or not isinstance(replacement, str):
                    errors.append(
                        f"Substitution {token!r} -> {replacement!r} must map a string to a string"
                    )

        if self.output.stringsdict and '{language}' not in self.output.stringsdict:
            warnings.append(ConfigValidationWarning(
                "output.stringsdict has no {language} placeholder; "
                "every language will overwrite the same file"
            ))

        if not self.poeditor.project_id:
            warnings.append(ConfigValidationWarning(
                "poeditor.project_id is empty; terms can only be read with --input"
            ))

        if not self.poeditor.resolved_token():
            warnings.append(ConfigValidationWarning(
                f"No POEditor API token (set poeditor.api_token or {TOKEN_ENV_VAR})"
            ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def create_default_config(project_id: str = '') -> Config:
    """Create default configuration for a POEditor project."""
    config = Config()
    config.poeditor.project_id = project_id
    return config
