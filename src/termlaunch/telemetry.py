"""Telemetry - logging, user diagnostics and metrics

Provides the logger factory, the verbosity-gated diagnostics channel and an
in-memory metrics facade.

Diagnostic format: "# message" (never mistaken for --print-environment output)
Metric examples: options.deprecated, fd.passed, config.merge.ok/fail
"""

import logging
import sys
from typing import TextIO

from . import config

_LOG_FORMAT = "# [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    Args:
        name: module name (usually __name__)
    """
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None, stream: TextIO | None = None) -> None:
    """Install a stderr handler on the package logger (CLI use)."""
    root = logging.getLogger("termlaunch")
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.handlers[:] = [handler]
    root.setLevel(level or config.LOG_LEVEL)
    root.propagate = False


class Diagnostics:
    """User-facing diagnostic channel gated by a verbosity counter.

    Replaces a process-global verbosity: the builder owns one instance and
    passes it to everything that reports to the user.

    Levels:
        0: quiet, nothing printed
        1: warnings (deprecations, clamped values, ignored duplicates)
        2+: details (tolerated duplicate flags, missing startup id)
    """

    def __init__(
        self,
        verbosity: int = config.DEFAULT_VERBOSITY,
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
    ):
        self.verbosity = verbosity
        self._stream = stream
        self._logger = logger or get_logger(__name__)
        self.messages: list[str] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def increase(self) -> None:
        self.verbosity += 1

    def silence(self) -> None:
        self.verbosity = 0

    def warn(self, message: str) -> None:
        """Print at normal verbosity."""
        self._logger.debug(message)
        self._emit(1, message)

    def detail(self, message: str) -> None:
        """Print only when running verbose."""
        self._logger.debug(message)
        self._emit(2, message)

    def _emit(self, level: int, message: str) -> None:
        if self.verbosity < level:
            return
        self.messages.append(message)
        for line in message.splitlines() or [""]:
            self.stream.write(f"# {line}\n")


class Metrics:
    """In-memory counters (tests and debugging)."""

    def __init__(self):
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Counter value (for tests)"""
        return self._counters.get(self._make_key(name, labels), 0)

    def reset(self) -> None:
        """Reset all counters (for tests)"""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"


# global metrics instance
metrics = Metrics()
