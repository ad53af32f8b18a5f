"""Tests for text normalization."""

import pytest

from localization_exporter.core.text_transform import (
    OutputFormat,
    apply_substitutions,
    transform,
)


class TestSubstitutions:
    """Test cases for literal substitutions."""

    def test_no_substitutions(self):
        """None and empty mappings leave text alone."""
        assert apply_substitutions('Hello', None) == 'Hello'
        assert apply_substitutions('Hello', {}) == 'Hello'

    def test_every_occurrence_replaced(self):
        """Each token is replaced everywhere."""
        result = apply_substitutions('{app} and {app}', {'{app}': 'Notes'})
        assert result == 'Notes and Notes'

    def test_literal_not_regex(self):
        """Tokens are not interpreted as regular expressions."""
        assert apply_substitutions('a.c abc', {'a.c': 'X'}) == 'X abc'

    def test_applied_in_order(self):
        """Earlier substitutions win on overlapping tokens."""
        subs = {'...': '…', '..': '‥'}
        assert apply_substitutions('Wait...', subs) == 'Wait…'

        reversed_subs = {'..': '‥', '...': '…'}
        assert apply_substitutions('Wait...', reversed_subs) == 'Wait‥.'


class TestStringsTransform:
    """Test cases for the .strings direction."""

    def test_plain_text_unchanged(self):
        """Text without special characters passes through."""
        assert transform('World') == 'World'

    def test_line_separator_removed(self):
        """U+2028 is dropped."""
        assert transform('a\u2028b') == 'ab'

    def test_real_newline_escaped(self):
        """A real line break becomes a literal backslash-n."""
        assert transform('line1\nline2') == 'line1\\nline2'

    def test_quotes_escaped(self):
        """Double quotes are backslash-escaped."""
        assert transform('Say "hi"') == 'Say \\"hi\\"'

    def test_literal_backslash_n_kept(self):
        """An already escaped newline is left as is."""
        assert transform('a\\nb') == 'a\\nb'

    def test_substitution_before_escaping(self):
        """Substituted text is escaped too."""
        assert transform('[q]', {'[q]': '"'}) == '\\"'


class TestStringsDictTransform:
    """Test cases for the .stringsdict direction."""

    def test_literal_newline_unescaped(self):
        """A literal backslash-n becomes a real line break."""
        result = transform('line1\\nline2', output_format=OutputFormat.STRINGSDICT)
        assert result == 'line1\nline2'

    def test_quotes_not_escaped(self):
        """XML handles quotes itself."""
        result = transform('Say "hi"', output_format=OutputFormat.STRINGSDICT)
        assert result == 'Say "hi"'

    def test_line_separator_removed(self):
        """U+2028 is dropped in both formats."""
        result = transform('a\u2028b', output_format=OutputFormat.STRINGSDICT)
        assert result == 'ab'


class TestFormatSpecifiers:
    """Test cases for %s conversion."""

    @pytest.mark.parametrize('output_format', list(OutputFormat))
    def test_bare_specifier(self, output_format):
        """%s becomes %@."""
        assert transform('Hi %s', output_format=output_format) == 'Hi %@'

    @pytest.mark.parametrize('output_format', list(OutputFormat))
    def test_positional_specifier(self, output_format):
        """%2$s becomes %2$@."""
        result = transform('%2$s by %1$s', output_format=output_format)
        assert result == '%2$@ by %1$@'

    def test_multi_digit_position(self):
        """Positions may have several digits."""
        assert transform('%12$s') == '%12$@'

    def test_other_specifiers_untouched(self):
        """%d and %@ are left alone."""
        assert transform('%d items, %@, %1$d') == '%d items, %@, %1$d'


class TestNonIdempotence:
    """The two directions are only inverses on single-representation input."""

    def test_round_trip_single_representation(self):
        """Text with only real line breaks survives strings -> stringsdict."""
        strings = transform('a\nb')
        assert transform(strings, output_format=OutputFormat.STRINGSDICT) == 'a\nb'

    def test_mixed_representation(self):
        """Mixed input collapses to one representation."""
        text = 'a\nb\\nc'
        assert transform(text, output_format=OutputFormat.STRINGSDICT) == 'a\nb\nc'
