"""Tests for platform line-terminator handling."""

import pytest

from bottombar.text import (
    POSIX_TERMINATOR,
    WINDOWS_TERMINATOR,
    contains_line,
    line_terminator,
    normalize_line_endings,
    split_lines,
)


class TestLineTerminator:
    def test_windows(self):
        assert line_terminator("win32") == "\r\n"

    @pytest.mark.parametrize("platform", ["linux", "darwin", "freebsd13"])
    def test_everything_else(self, platform):
        assert line_terminator(platform) == "\n"

    def test_defaults_to_running_platform(self, monkeypatch):
        monkeypatch.setattr("bottombar.text.sys.platform", "win32")
        assert line_terminator() == WINDOWS_TERMINATOR


class TestNormalize:
    def test_mixed_breaks_to_posix(self):
        assert normalize_line_endings("a\r\nb\rc\nd", POSIX_TERMINATOR) == "a\nb\nc\nd"

    def test_mixed_breaks_to_windows(self):
        assert normalize_line_endings("a\nb\r\nc", WINDOWS_TERMINATOR) == "a\r\nb\r\nc"

    def test_crlf_is_one_break(self):
        assert normalize_line_endings("\r\n", POSIX_TERMINATOR) == "\n"

    def test_cleared_channel_is_single_terminator(self):
        assert normalize_line_endings("\n", WINDOWS_TERMINATOR) == WINDOWS_TERMINATOR


class TestLines:
    def test_split(self):
        assert split_lines("$ echo hi\r\nhi\r\n$ ", POSIX_TERMINATOR) == ["$ echo hi", "hi", "$ "]

    def test_exact_line_match(self):
        text = 'user@host:~$ echo "hello world"\nhello world\nuser@host:~$ '
        assert contains_line(text, "hello world", POSIX_TERMINATOR)

    def test_substring_is_not_a_match(self):
        text = 'user@host:~$ echo "hello world"\nuser@host:~$ '
        assert not contains_line(text, "hello world", POSIX_TERMINATOR)

    def test_match_across_terminator_styles(self):
        assert contains_line("prompt\r\nhello world\r\n", "hello world", POSIX_TERMINATOR)
        assert contains_line("prompt\nhello world\n", "hello world", WINDOWS_TERMINATOR)
