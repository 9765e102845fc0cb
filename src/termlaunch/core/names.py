"""Message-bus name validators

The terminal server is reached over the session bus, so names handed to us
through options or private environment variables must follow the bus
naming rules:

- application id: "org.example.Terminal" (well-known name rules)
- unique name:    ":1.42" (connection name assigned by the bus)
- object path:    "/org/example/Terminal/screen/0"
"""

import re

MAX_NAME_LENGTH = 255

_ELEMENT_RE = re.compile(r"[A-Za-z0-9_-]+\Z")
_OBJECT_PATH_RE = re.compile(r"/\Z|(/[A-Za-z0-9_]+)+\Z")


def _split_elements(name: str) -> list[str] | None:
    """Split a dotted name, returning None if any element is malformed."""
    elements = name.split(".")
    if len(elements) < 2:
        return None
    if not all(_ELEMENT_RE.match(element) for element in elements):
        return None
    return elements


def is_valid_app_id(app_id: str) -> bool:
    """Check an application id.

    At least two non-empty elements separated by '.', only [A-Za-z0-9_-],
    no element starting with a digit, at most 255 characters.

    Args:
        app_id: candidate id, e.g. "org.example.Terminal"

    Returns:
        True if the id is usable as a bus name
    """
    if not app_id or len(app_id) > MAX_NAME_LENGTH:
        return False
    elements = _split_elements(app_id)
    if elements is None:
        return False
    return not any(element[0].isdigit() for element in elements)


def is_unique_name(name: str) -> bool:
    """Check a bus unique connection name such as ":1.42".

    Elements of unique names may start with a digit.
    """
    if not name or len(name) > MAX_NAME_LENGTH or not name.startswith(":"):
        return False
    return _split_elements(name[1:]) is not None


def is_object_path(path: str) -> bool:
    """Check an object path: "/" or "/seg/seg" with [A-Za-z0-9_] segments."""
    return bool(path) and _OBJECT_PATH_RE.match(path) is not None
