"""Tests for the .strings header banner."""

from datetime import datetime, timedelta, timezone

from localization_exporter.core.header import build_header, format_timestamp


class TestBuildHeader:
    """Test cases for build_header."""

    def test_without_date(self):
        """Banner open, source line, banner close, blank line."""
        lines = build_header()

        assert lines == [
            '/' + '*' * 79,
            ' * Exported from POEditor - https://poeditor.com',
            ' ' + '*' * 79 + '/',
            '',
        ]

    def test_with_date(self):
        """The timestamp goes between the source line and the close line."""
        now = datetime(2024, 5, 2, 14, 3, 11, tzinfo=timezone(timedelta(hours=2)))
        lines = build_header(print_date=True, now=now)

        assert len(lines) == 5
        assert lines[2] == ' * 2024-05-02 14:03:11 +0200'
        assert lines[3].endswith('*/')

    def test_fresh_list_each_call(self):
        """Callers may append to the result."""
        first = build_header()
        first.append('"a" = "b";')
        assert build_header() != first


class TestFormatTimestamp:
    """Test cases for format_timestamp."""

    def test_naive_datetime(self):
        """Naive times have no offset and no trailing space."""
        assert format_timestamp(datetime(2024, 1, 1, 9, 0, 0)) == '2024-01-01 09:00:00'

    def test_default_is_now(self):
        """Without an argument the current time is used."""
        assert format_timestamp().startswith(str(datetime.now().year))
