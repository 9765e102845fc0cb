"""Saved terminal configuration

- document: key-file reader
- schema: pydantic models for root/window/tab groups
- merge: appends the document's windows to a launch plan
"""

from .document import KeyFile, commandline_path, compress
from .merge import load_config_file, merge_config
from .schema import ConfigRoot, TabGroup, WindowGroup

__all__ = [
    "KeyFile",
    "commandline_path",
    "compress",
    "ConfigRoot",
    "WindowGroup",
    "TabGroup",
    "merge_config",
    "load_config_file",
]
