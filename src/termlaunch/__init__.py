"""termlaunch - build terminal launch plans from command-line options and saved configs."""

from .config import VERSION

__version__ = VERSION
