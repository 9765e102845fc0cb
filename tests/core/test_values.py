"""Tests for core.values - shell splitting and zoom parsing"""

import pytest

from termlaunch import config
from termlaunch.core.values import parse_zoom, shell_parse_argv
from termlaunch.errors import BadValueError, OptionErrorKind


class TestShellParseArgv:
    """Test shell_parse_argv"""

    def test_simple(self):
        assert shell_parse_argv("ls -la") == ["ls", "-la"]

    def test_quotes(self):
        """Quoted words stay together"""
        assert shell_parse_argv("vim 'my file' \"other file\"") == ["vim", "my file", "other file"]

    def test_escaped_space(self):
        assert shell_parse_argv(r"cat a\ b") == ["cat", "a b"]

    def test_unbalanced_quote(self):
        """Unbalanced quotes are a bad value"""
        with pytest.raises(BadValueError) as exc:
            shell_parse_argv("echo 'oops")
        assert exc.value.kind is OptionErrorKind.BAD_VALUE

    def test_empty(self):
        """Whitespace-only text is rejected"""
        with pytest.raises(BadValueError, match="empty"):
            shell_parse_argv("   ")


class TestParseZoom:
    """Test parse_zoom"""

    @pytest.mark.parametrize(
        "value, expected",
        [("1", 1.0), ("1.5", 1.5), (".5", 0.5), ("2.", 2.0), (" 1.25", 1.25), ("+3", 3.0), ("3e0", 3.0)],
    )
    def test_in_range_stored_exactly(self, value, expected):
        """Values inside the range are kept as given"""
        assert parse_zoom(value) == expected

    def test_bounds_are_inclusive(self):
        """The range limits themselves are not clamped"""
        assert parse_zoom(repr(config.SCALE_MINIMUM)) == config.SCALE_MINIMUM
        assert parse_zoom(repr(config.SCALE_MAXIMUM)) == config.SCALE_MAXIMUM

    def test_too_small_clamped(self, diagnostics):
        """Small values are clamped with a warning"""
        assert parse_zoom("0.01", diagnostics) == config.SCALE_MINIMUM
        assert any("too small" in m for m in diagnostics.messages)

    def test_too_large_clamped(self, diagnostics):
        """Large values are clamped with a warning"""
        assert parse_zoom("100", diagnostics) == config.SCALE_MAXIMUM
        assert any("too large" in m for m in diagnostics.messages)

    def test_negative_clamped(self):
        assert parse_zoom("-2") == config.SCALE_MINIMUM

    @pytest.mark.parametrize("value", ["", "abc", "1,5", "1.5x", "nan", "inf", "1e400", "0x10", "\u0661.\u0665"])
    def test_invalid(self, value):
        """Non-numbers, non-ASCII digits and non-finite values are rejected"""
        with pytest.raises(BadValueError, match="is not a valid zoom factor"):
            parse_zoom(value)
