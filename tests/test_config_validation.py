"""Tests for configuration loading and validation."""

import pytest
from pathlib import Path
import tempfile
import yaml

from localization_exporter.utils.config import (
    Config,
    ConfigValidationError,
    ConfigValidationWarning,
    ExportConfig,
    OutputConfig,
    POEditorConfig,
    TOKEN_ENV_VAR,
    create_default_config,
)
from localization_exporter.utils.validators import EXCLUDE_ANDROID_PATTERN


def _valid_config():
    config = Config()
    config.poeditor.api_token = 'token'
    config.poeditor.project_id = '12345'
    return config


class TestConfigValidation:
    """Test cases for Config.validate() method."""

    def test_valid_default_config(self):
        """Default config should pass validation."""
        errors, warnings = Config().validate()
        assert len(errors) == 0

    def test_missing_credentials_warn(self, monkeypatch):
        """Missing project id and token are warnings, not errors."""
        monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
        errors, warnings = Config().validate()

        messages = [str(w) for w in warnings]
        assert errors == []
        assert any('project_id' in m for m in messages)
        assert any('API token' in m for m in messages)

    def test_complete_config_has_no_warnings(self):
        """A configured project validates cleanly."""
        errors, warnings = _valid_config().validate()
        assert errors == []
        assert warnings == []

    def test_invalid_language(self):
        """Invalid language codes cause errors."""
        config = _valid_config()
        config.export.languages = ['fr', 'not a language']
        errors, _ = config.validate()
        assert len(errors) == 1
        assert "Invalid language code" in errors[0]

    def test_valid_language_codes(self):
        """POEditor style codes pass."""
        config = _valid_config()
        config.export.languages = ['en', 'fr', 'pt-br', 'zh-Hans', 'en_US']
        errors, _ = config.validate()
        assert errors == []

    def test_no_languages(self):
        """At least one language is required."""
        config = _valid_config()
        config.export.languages = []
        errors, _ = config.validate()
        assert any('at least one language' in e for e in errors)

    def test_invalid_exclude_pattern(self):
        """Broken regexes are reported."""
        config = _valid_config()
        config.export.exclude = '(unclosed'
        errors, _ = config.validate()
        assert any('export.exclude' in e for e in errors)

    def test_exclude_can_be_disabled(self):
        """None disables filtering and is valid."""
        config = _valid_config()
        config.export.exclude = None
        errors, _ = config.validate()
        assert errors == []

    def test_invalid_substitutions(self):
        """Substitutions must map strings to strings."""
        config = _valid_config()
        config.export.substitutions = {'{APP}': 3}
        errors, _ = config.validate()
        assert any('Substitution' in e for e in errors)

    def test_stringsdict_without_placeholder_warns(self):
        """A fixed stringsdict path gets a warning."""
        config = _valid_config()
        config.output.stringsdict = 'Localizable.stringsdict'
        _, warnings = config.validate()
        assert any('{language}' in str(w) for w in warnings)

    def test_raise_on_error(self):
        """raise_on_error raises ConfigValidationError."""
        config = _valid_config()
        config.export.languages = ['???']
        with pytest.raises(ConfigValidationError) as exc_info:
            config.validate(raise_on_error=True)
        assert len(exc_info.value.errors) == 1

    def test_warning_str(self):
        """Warnings print their message."""
        assert str(ConfigValidationWarning('careful')) == 'careful'


class TestConfigDefaults:
    """Test cases for default values."""

    def test_export_defaults(self):
        """Export defaults match the documented behavior."""
        export = ExportConfig()
        assert export.languages == ['en']
        assert export.print_date is False
        assert export.exclude == EXCLUDE_ANDROID_PATTERN
        assert export.substitutions == {}

    def test_stringsdict_path(self):
        """The stringsdict template is resolved per language."""
        output = OutputConfig(strings_dir='App/Resources')
        assert output.stringsdict_path('fr') == Path('App/Resources/fr.lproj/Localizable.stringsdict')

    def test_stringsdict_disabled(self):
        """None disables the stringsdict output."""
        assert OutputConfig(stringsdict=None).stringsdict_path('fr') is None

    def test_token_from_environment(self, monkeypatch):
        """The environment token is used when the file has none."""
        monkeypatch.setenv(TOKEN_ENV_VAR, 'env-token')
        assert POEditorConfig().resolved_token() == 'env-token'
        assert POEditorConfig(api_token='file-token').resolved_token() == 'file-token'

    def test_create_default_config(self):
        """create_default_config sets the project id."""
        assert create_default_config('999').poeditor.project_id == '999'


class TestConfigFile:
    """Test cases for YAML round trips."""

    def test_save_and_load(self):
        """A saved config loads back identically."""
        config = _valid_config()
        config.export.languages = ['fr', 'de']
        config.export.substitutions = {'{APP}': 'Notes'}
        config.output.stringsdict = None

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / '.localization-export.yml'
            config.save(path)
            loaded = Config.from_file(path)

        assert loaded.to_dict() == config.to_dict()

    def test_partial_file(self):
        """Missing sections fall back to defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'config.yml'
            path.write_text(yaml.dump({'export': {'languages': ['it'], 'exclude': None}}))
            loaded = Config.from_file(path)

        assert loaded.export.languages == ['it']
        assert loaded.export.exclude is None
        assert loaded.poeditor.project_id == ''
        assert loaded.output.strings_dir == '.'

    def test_empty_file(self):
        """An empty file gives the default config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'config.yml'
            path.write_text('')
            assert Config.from_file(path).to_dict() == Config().to_dict()
