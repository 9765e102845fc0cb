"""Launch plan

- types: WindowSpec, TabSpec, ResolvedTab, WindowSource, MenubarState
- fds: per-tab FD pass registry
- defaults: pending defaults
- plan: LaunchPlan root
- builder: PlanBuilder state machine
- finalize: post-parse digestion and window fallback
"""

from .builder import PlanBuilder
from .defaults import Defaults
from .fds import STDERR, STDIN, STDOUT, FdPassRegistry, PassedFd, parse_fd, validate_fd_target
from .finalize import ensure_window, finalize
from .plan import LaunchPlan
from .types import MenubarState, ResolvedTab, TabSpec, WindowSource, WindowSpec

__all__ = [
    # Types
    "WindowSource",
    "MenubarState",
    "TabSpec",
    "WindowSpec",
    "ResolvedTab",
    "LaunchPlan",
    "Defaults",
    # FD registry
    "FdPassRegistry",
    "PassedFd",
    "parse_fd",
    "validate_fd_target",
    "STDIN",
    "STDOUT",
    "STDERR",
    # Builder
    "PlanBuilder",
    "finalize",
    "ensure_window",
]
