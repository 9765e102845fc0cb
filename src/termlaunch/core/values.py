"""Option value parsers shared by the builder and the config merger."""

import math
import re
import shlex

from .. import config
from ..errors import BadValueError
from ..telemetry import Diagnostics

_DECIMAL_RE = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\Z", re.ASCII)


def shell_parse_argv(text: str) -> list[str]:
    """Split a command line the way a POSIX shell would (no expansion).

    Raises:
        BadValueError: unbalanced quotes, dangling escape, or empty text
    """
    try:
        argv = shlex.split(text, posix=True)
    except ValueError as e:
        raise BadValueError(str(e)) from e
    if not argv:
        raise BadValueError("Text was empty (or contained only whitespace)")
    return argv


def parse_zoom(value: str, diagnostics: Diagnostics | None = None) -> float:
    """Parse a zoom factor and clamp it to [SCALE_MINIMUM, SCALE_MAXIMUM].

    Only plain decimal notation is accepted ("1.5", ".5", "2e-1"); the
    decimal separator is always '.'. Values outside the range are clamped
    with a warning rather than rejected.

    Raises:
        BadValueError: not a number, or not finite
    """
    if not _DECIMAL_RE.match(value):
        raise BadValueError(f"“{value}” is not a valid zoom factor")
    zoom = float(value)
    if not math.isfinite(zoom):
        raise BadValueError(f"“{value}” is not a valid zoom factor")

    if zoom < config.SCALE_MINIMUM:
        if diagnostics is not None:
            diagnostics.warn(f"Zoom factor “{zoom:g}” is too small, using {config.SCALE_MINIMUM:g}")
        zoom = config.SCALE_MINIMUM

    if zoom > config.SCALE_MAXIMUM:
        if diagnostics is not None:
            diagnostics.warn(f"Zoom factor “{zoom:g}” is too large, using {config.SCALE_MAXIMUM:g}")
        zoom = config.SCALE_MAXIMUM

    return zoom
