"""Group-structured key/value documents

Reads the saved-terminal configuration format:

    [Terminal Configuration]
    Version=1
    CompatVersion=1
    Windows=Window0;

    [Window0]
    Tabs=Terminal0;Terminal1;
    ActiveTab=Terminal1

Conventions (differences from plain INI):
- keys are case-sensitive, '#' starts a comment line, '=' is the only delimiter
- leading whitespace on a line is ignored, so there are no continuation lines
- strings use backslash escapes: \\s \\n \\t \\r \\\\
- lists are ';'-separated, '\\;' escapes a literal separator, a trailing ';' is allowed
- booleans are "true"/"false" (or "1"/"0")
"""

import configparser
import os
import re
from pathlib import Path
from urllib.parse import unquote, urlparse

from ..errors import BadValueError, InvalidConfigFileError

LIST_SEPARATOR = ";"

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*\Z", re.ASCII)

_STRING_ESCAPES = {"s": " ", "n": "\n", "t": "\t", "r": "\r", "\\": "\\"}
_C_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}

# Never matches a real group name, so no group gets configparser's DEFAULT semantics
_NO_DEFAULT_SECTION = "\x00"


def _unescape(value: str, separator: str | None = None) -> list[str]:
    """Decode key-file string escapes, splitting on unescaped ``separator``.

    Returns:
        Decoded pieces (a single piece when ``separator`` is None)

    Raises:
        BadValueError: invalid or dangling escape
    """
    pieces: list[str] = []
    current: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                raise BadValueError("Key file contains escape character at end of line")
            if escaped in _STRING_ESCAPES:
                current.append(_STRING_ESCAPES[escaped])
            elif separator is not None and escaped == separator:
                current.append(separator)
            else:
                raise BadValueError(f"Key file contains invalid escape sequence “\\{escaped}”")
        elif separator is not None and ch == separator:
            pieces.append("".join(current))
            current = []
        else:
            current.append(ch)

    if separator is None or current:
        pieces.append("".join(current))
    return pieces


def compress(value: str) -> str:
    """Decode C string escapes (\\n, \\t, \\\\, \\", octal \\NNN ...).

    Unknown escapes yield the escaped character; a trailing lone backslash
    is dropped.
    """
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        i += 1
        if ch != "\\":
            out.append(ch)
            continue
        if i >= len(value):
            break
        ch = value[i]
        i += 1
        if ch in "01234567":
            digits = ch
            while len(digits) < 3 and i < len(value) and value[i] in "01234567":
                digits += value[i]
                i += 1
            out.append(chr(int(digits, 8) & 0xFF))
        else:
            out.append(_C_ESCAPES.get(ch, ch))
    return "".join(out)


def commandline_path(arg: str) -> Path:
    """Turn a command-line file argument (path or file:// URI) into an absolute path."""
    if arg.startswith("file://"):
        return Path(unquote(urlparse(arg).path))
    return Path(os.path.abspath(arg))


class KeyFile:
    """Parsed key-file document (read-only)."""

    def __init__(self, groups: dict[str, dict[str, str]] | None = None):
        self._groups: dict[str, dict[str, str]] = {
            name: dict(keys) for name, keys in (groups or {}).items()
        }

    # === Loading ===

    @classmethod
    def from_string(cls, text: str, source: str = "<string>") -> "KeyFile":
        """Parse document text.

        Raises:
            InvalidConfigFileError: syntax error
        """
        parser = configparser.RawConfigParser(
            delimiters=("=",),
            comment_prefixes=("#",),
            inline_comment_prefixes=None,
            strict=False,
            empty_lines_in_values=False,
            interpolation=None,
            default_section=_NO_DEFAULT_SECTION,
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        try:
            parser.read_string("\n".join(line.lstrip() for line in text.splitlines()), source=source)
        except configparser.Error as e:
            raise InvalidConfigFileError(f"{source}: {e.message}") from e

        return cls({name: dict(parser.items(name)) for name in parser.sections()})

    @classmethod
    def load_from_file(cls, path: str | Path) -> "KeyFile":
        """Read and parse a document.

        Raises:
            InvalidConfigFileError: unreadable file or syntax error
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise InvalidConfigFileError(f"Failed to open file “{path}”: {reason}") from e
        return cls.from_string(text, source=str(path))

    # === Access ===

    @property
    def groups(self) -> list[str]:
        return list(self._groups)

    def has_group(self, group: str) -> bool:
        return group in self._groups

    def get_value(self, group: str, key: str) -> str | None:
        """Raw value, None if the group or key is absent."""
        return self._groups.get(group, {}).get(key)

    def get_string(self, group: str, key: str) -> str | None:
        """Unescaped string value.

        Raises:
            BadValueError: invalid escape sequence
        """
        raw = self.get_value(group, key)
        if raw is None:
            return None
        return _unescape(raw)[0]

    def get_string_list(self, group: str, key: str) -> list[str] | None:
        """';'-separated list of unescaped strings.

        Raises:
            BadValueError: invalid escape sequence
        """
        raw = self.get_value(group, key)
        if raw is None:
            return None
        return _unescape(raw, LIST_SEPARATOR)

    def get_integer(self, group: str, key: str) -> int | None:
        """Integer value.

        Raises:
            BadValueError: value is not an integer
        """
        raw = self.get_value(group, key)
        if raw is None:
            return None
        if not _INTEGER_RE.match(raw):
            raise BadValueError(f"Value “{raw}” cannot be interpreted as a number.")
        return int(raw)

    def get_boolean(self, group: str, key: str) -> bool | None:
        """Boolean value.

        Raises:
            BadValueError: value is not true/false/1/0
        """
        raw = self.get_value(group, key)
        if raw is None:
            return None
        return parse_boolean(raw)


def parse_boolean(raw: str) -> bool:
    """Parse a key-file boolean.

    Raises:
        BadValueError: value is not true/false/1/0
    """
    value = raw.strip()
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise BadValueError(f"Value “{raw}” cannot be interpreted as a boolean.")
