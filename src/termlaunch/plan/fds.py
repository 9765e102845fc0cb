"""FD pass registry

Per-tab table of forwarded descriptors, keyed by target fd number.

Accepting a request:
1. the target must not be stdin/stdout/stderr
2. the target must not already be registered on this tab
3. the transport assigns an index
4. (index, fd) is appended

The table only grows; it is discarded together with its tab.
"""

import re
from dataclasses import dataclass
from typing import Iterator

from ..adapters.base import FdTransport
from ..errors import BadValueError

STDIN: int = 0
STDOUT: int = 1
STDERR: int = 2

_STREAM_NAMES = {STDIN: "stdin", STDOUT: "stdout", STDERR: "stderr"}

FD_MAX = 2**31 - 1

_FD_RE = re.compile(r"\s*\+?\d+\Z", re.ASCII)


@dataclass(frozen=True)
class PassedFd:
    """One forwarded descriptor.

    Attributes:
        index: slot assigned by the transport
        fd: descriptor number the child will see
    """

    index: int
    fd: int


def parse_fd(value: str) -> int:
    """Parse a base-10 descriptor number.

    Leading whitespace and a '+' sign are accepted; anything else that is
    not a non-negative integer within int range is rejected.

    Raises:
        BadValueError: value is not a usable descriptor number
    """
    if not _FD_RE.match(value):
        raise BadValueError(f'Failed to parse "{value}" as file descriptor number')
    fd = int(value)
    if fd > FD_MAX:
        raise BadValueError(f'Failed to parse "{value}" as file descriptor number')
    return fd


def validate_fd_target(fd: int) -> None:
    """Reject the three standard streams."""
    if fd in _STREAM_NAMES:
        raise BadValueError(f"FD passing of {_STREAM_NAMES[fd]} is not supported")


class FdPassRegistry:
    """Append-only (index, fd) table of one tab."""

    def __init__(self, transport: FdTransport):
        self._transport = transport
        self._entries: list[PassedFd] = []

    @property
    def transport(self) -> FdTransport:
        return self._transport

    def add(self, fd: int) -> PassedFd:
        """Register ``fd`` for forwarding.

        Raises:
            BadValueError: standard stream, duplicate target, or the
                transport refused the descriptor (message prefixed "fd: ")
        """
        validate_fd_target(fd)
        if fd in self:
            raise BadValueError(f"Cannot pass FD {fd} twice")

        try:
            index = self._transport.append(fd)
        except OSError as e:
            raise BadValueError(f"{fd}: {e.strerror or e}") from e

        entry = PassedFd(index=index, fd=fd)
        self._entries.append(entry)
        return entry

    def close(self) -> None:
        self._transport.close()

    def __contains__(self, fd: int) -> bool:
        return any(entry.fd == fd for entry in self._entries)

    def __iter__(self) -> Iterator[PassedFd]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
