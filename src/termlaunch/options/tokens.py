"""Option token source

Splits an argument list (without the program name) into option events
using the arity recorded in the option table.

Accepted spellings:
- --name=value, --name value
- -e value, -evalue
- bundled short flags (-vq, -pe value)
- --window / --tab with an optional value, only as --window=PROFILE

Before tokenizing, prescan() cuts the argument list at the first -x,
--execute or "--"; everything after that switch is the command to run.
"""

from dataclasses import dataclass
from typing import Iterator

from ..errors import UnknownOptionError, UsageError
from ..telemetry import get_logger
from .table import EXECUTE_SWITCHES, LONG_OPTIONS, SHORT_OPTIONS, TERMINATOR, Arity, OptionSpec

logger = get_logger(__name__)


@dataclass(frozen=True)
class OptionEvent:
    """One recognised option occurrence

    Attributes:
        spec: table entry
        value: argument, None for flags and a bare --window/--tab
        spelled: the option as written (--title, -t)
    """

    spec: OptionSpec
    value: str | None
    spelled: str


@dataclass
class PrescanResult:
    """Argument list split at the command switch

    Attributes:
        options: arguments before the switch
        command: arguments after the switch (None when absent or empty)
        switch: the switch as written (None when absent)
    """

    options: list[str]
    command: list[str] | None = None
    switch: str | None = None

    @property
    def execute(self) -> bool:
        """The switch was -x/--execute (deprecated)."""
        return self.switch in EXECUTE_SWITCHES


def prescan(argv: list[str]) -> PrescanResult:
    """Split argv at the first -x, --execute or "--".

    "-x" followed by nothing leaves the command unset; the finaliser
    reports it. A trailing "--" is accepted silently.
    """
    for i, arg in enumerate(argv):
        is_execute = arg in EXECUTE_SWITCHES
        if not is_execute and arg != TERMINATOR:
            continue

        tail = list(argv[i + 1:])
        logger.debug(f"[Prescan] {arg!r} at position {i}, command={tail!r}")
        return PrescanResult(options=list(argv[:i]), command=tail or None, switch=arg)

    return PrescanResult(options=list(argv))


def _long_option(token: str, rest: list[str]) -> OptionEvent:
    name, eq, value = token[2:].partition("=")
    spelled = f"--{name}"
    spec = LONG_OPTIONS.get(name)
    if spec is None:
        raise UnknownOptionError(f"Unknown option {spelled}")

    if eq:
        if spec.arity is Arity.NONE:
            raise UsageError(f"Option {spelled} does not take an argument")
        return OptionEvent(spec, value, spelled)

    if spec.arity is Arity.REQUIRED:
        if not rest:
            raise UsageError(f"Missing argument for {spelled}")
        return OptionEvent(spec, rest.pop(0), spelled)

    return OptionEvent(spec, None, spelled)


def _short_options(token: str, rest: list[str]) -> Iterator[OptionEvent]:
    letters = token[1:]
    for i, letter in enumerate(letters):
        spelled = f"-{letter}"
        spec = SHORT_OPTIONS.get(letter)
        if spec is None:
            raise UnknownOptionError(f"Unknown option {spelled}")

        if spec.arity is not Arity.REQUIRED:
            yield OptionEvent(spec, None, spelled)
            continue

        # Remaining letters are the value (-tTITLE)
        attached = letters[i + 1:]
        if attached:
            yield OptionEvent(spec, attached, spelled)
        elif rest:
            yield OptionEvent(spec, rest.pop(0), spelled)
        else:
            raise UsageError(f"Missing argument for {spelled}")
        return


def tokenize(argv: list[str]) -> Iterator[OptionEvent]:
    """Yield option events in command-line order.

    Raises:
        UnknownOptionError: option not in the table
        UsageError: missing/unexpected argument or a stray positional argument
    """
    rest = list(argv)
    while rest:
        token = rest.pop(0)
        if token.startswith("--") and len(token) > 2:
            yield _long_option(token, rest)
        elif token.startswith("-") and len(token) > 1:
            yield from _short_options(token, rest)
        else:
            raise UsageError(f"Unexpected argument “{token}”")
