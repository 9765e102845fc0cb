"""Tests for options.tokens - prescan and tokenizer"""

import pytest

from termlaunch.errors import UnknownOptionError, UsageError
from termlaunch.options import LONG_OPTIONS, OPTIONS, SHORT_OPTIONS, OptionAction, prescan, tokenize


def events(argv):
    return [(e.spec.action, e.value, e.spelled) for e in tokenize(argv)]


class TestOptionTable:
    """Option table consistency"""

    def test_names_unique(self):
        assert len(LONG_OPTIONS) == len(OPTIONS)

    def test_short_aliases(self):
        assert {k: v.name for k, v in SHORT_OPTIONS.items()} == {
            "p": "print-environment",
            "v": "verbose",
            "q": "quiet",
            "e": "command",
            "t": "title",
        }

    def test_every_action_reachable(self):
        """Each action has at least one option"""
        assert {spec.action for spec in OPTIONS} == set(OptionAction)


class TestPrescan:
    """Test prescan"""

    def test_no_switch(self):
        result = prescan(["--window", "--title=x"])
        assert result.options == ["--window", "--title=x"]
        assert result.command is None
        assert result.switch is None
        assert result.execute is False

    def test_double_dash(self):
        """Everything after "--" is taken verbatim"""
        result = prescan(["--tab", "--", "ls", "-la", "--window", "-x"])
        assert result.options == ["--tab"]
        assert result.command == ["ls", "-la", "--window", "-x"]
        assert result.execute is False

    @pytest.mark.parametrize("switch", ["-x", "--execute"])
    def test_execute(self, switch):
        result = prescan(["--window", switch, "vim", "file"])
        assert result.options == ["--window"]
        assert result.command == ["vim", "file"]
        assert result.switch == switch
        assert result.execute is True

    def test_trailing_switch(self):
        """A switch with nothing after it leaves the command unset"""
        assert prescan(["--"]).command is None
        result = prescan(["-x"])
        assert result.command is None
        assert result.execute is True

    def test_first_switch_wins(self):
        result = prescan(["--", "-x", "a"])
        assert result.switch == "--"
        assert result.command == ["-x", "a"]


class TestTokenize:
    """Test tokenize"""

    def test_long_forms(self):
        assert events(["--title=a", "--title", "b", "--title="]) == [
            (OptionAction.TITLE, "a", "--title"),
            (OptionAction.TITLE, "b", "--title"),
            (OptionAction.TITLE, "", "--title"),
        ]

    def test_short_forms(self):
        assert events(["-t", "a", "-tb", "-e", "ls -l"]) == [
            (OptionAction.TITLE, "a", "-t"),
            (OptionAction.TITLE, "b", "-t"),
            (OptionAction.COMMAND, "ls -l", "-e"),
        ]

    def test_bundled_flags(self):
        """Flags bundle; a value option ends the bundle"""
        assert events(["-vqp", "-vt", "x"]) == [
            (OptionAction.VERBOSE, None, "-v"),
            (OptionAction.QUIET, None, "-q"),
            (OptionAction.PRINT_ENVIRONMENT, None, "-p"),
            (OptionAction.VERBOSE, None, "-v"),
            (OptionAction.TITLE, "x", "-t"),
        ]

    def test_optional_value(self):
        """--window/--tab take a value only with '='"""
        assert events(["--window", "--tab=Work", "--window=Work"]) == [
            (OptionAction.WINDOW, None, "--window"),
            (OptionAction.TAB, "Work", "--tab"),
            (OptionAction.WINDOW, "Work", "--window"),
        ]

    def test_optional_value_not_taken_from_next(self):
        with pytest.raises(UsageError, match="Unexpected argument"):
            list(tokenize(["--window", "Work"]))

    def test_aliases_share_action(self):
        assert events(["--window-with-profile", "Work", "--sm-disable"]) == [
            (OptionAction.WINDOW, "Work", "--window-with-profile"),
            (OptionAction.SM_CLIENT_DISABLE, None, "--sm-disable"),
        ]

    def test_value_may_look_like_option(self):
        assert events(["--title", "--wait"]) == [(OptionAction.TITLE, "--wait", "--title")]

    def test_unknown_long(self):
        with pytest.raises(UnknownOptionError, match="Unknown option --bogus"):
            list(tokenize(["--bogus"]))

    def test_unknown_short(self):
        with pytest.raises(UnknownOptionError, match="Unknown option -Z"):
            list(tokenize(["-vZ"]))

    def test_flag_with_value(self):
        with pytest.raises(UsageError, match="does not take an argument"):
            list(tokenize(["--wait=1"]))

    @pytest.mark.parametrize("argv", [["--title"], ["-t"], ["-vt"]])
    def test_missing_value(self, argv):
        with pytest.raises(UsageError, match="Missing argument"):
            list(tokenize(argv))

    @pytest.mark.parametrize("token", ["stray", "-"])
    def test_positional(self, token):
        with pytest.raises(UsageError):
            list(tokenize([token]))

    def test_lazy(self):
        """Events before a bad token are still produced"""
        stream = tokenize(["--wait", "--bogus"])
        assert next(stream).spec.action is OptionAction.WAIT
        with pytest.raises(UnknownOptionError):
            next(stream)
