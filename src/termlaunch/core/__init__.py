"""Core utilities shared by option parsing and config merging."""

from .names import is_object_path, is_unique_name, is_valid_app_id
from .values import parse_zoom, shell_parse_argv

__all__ = [
    # Bus names
    "is_valid_app_id",
    "is_unique_name",
    "is_object_path",
    # Values
    "parse_zoom",
    "shell_parse_argv",
]
