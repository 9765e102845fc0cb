"""Option and config-file errors.

Every failure surfaced by option parsing or config merging is an
``OptionError`` carrying an ``OptionErrorKind`` so callers can tell a bad
value from an incompatible document without matching on messages.
"""

from enum import Enum


class OptionErrorKind(Enum):
    """Error kind."""

    BAD_VALUE = "bad_value"
    UNKNOWN_OPTION = "unknown_option"
    FAILED = "failed"
    INVALID_CONFIG_FILE = "invalid_config_file"
    INCOMPATIBLE_CONFIG_FILE = "incompatible_config_file"


class OptionError(Exception):
    """Base class for all parse and merge failures."""

    kind = OptionErrorKind.FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def prefixed(self, prefix: str) -> "OptionError":
        """Return a copy of this error with ``prefix`` prepended to the message."""
        return type(self)(f"{prefix}{self.message}")


class BadValueError(OptionError):
    """Malformed option value (fd, zoom, command, application id ...)."""

    kind = OptionErrorKind.BAD_VALUE


class UnknownOptionError(OptionError):
    """Unknown option, or a retired option that is no longer accepted."""

    kind = OptionErrorKind.UNKNOWN_OPTION


class UsageError(OptionError):
    """Conflicting or incomplete option usage."""

    kind = OptionErrorKind.FAILED


class ProfileNotFoundError(OptionError):
    """Profile lookup failed."""

    kind = OptionErrorKind.FAILED


class InvalidConfigFileError(OptionError):
    """Document is not a terminal config file at all."""

    kind = OptionErrorKind.INVALID_CONFIG_FILE


class IncompatibleConfigFileError(OptionError):
    """Document version cannot be read by this implementation."""

    kind = OptionErrorKind.INCOMPATIBLE_CONFIG_FILE
