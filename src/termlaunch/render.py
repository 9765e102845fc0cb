"""Launch plan rendering

- render_plan: rich Tree of windows and tabs (tab values resolved against
  the pending defaults)
- render_environment: KEY=VALUE lines for --print-environment
"""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from . import config
from .plan.plan import LaunchPlan
from .plan.types import MenubarState, TabSpec, WindowSpec


def _window_label(index: int, window: WindowSpec) -> Text:
    label = Text(f"Window {index}", style="bold")
    details = [f"source={window.source.value}"]
    if window.implicit:
        details.append("implicit")
    if window.role is not None:
        details.append(f"role={window.role}")
    if window.geometry is not None:
        details.append(f"geometry={window.geometry}")
    if window.start_maximized:
        details.append("maximized")
    if window.start_fullscreen:
        details.append("fullscreen")
    if window.menubar is not MenubarState.UNSET:
        details.append(f"menubar={window.menubar.value}")
    label.append(f" ({', '.join(details)})", style="dim")
    return label


def _tab_label(plan: LaunchPlan, index: int, tab: TabSpec) -> Text:
    resolved = plan.resolve_tab(tab)
    label = Text(f"Tab {index}", style="bold cyan" if resolved.active else "cyan")
    if resolved.active:
        label.append(" *")

    fields = [
        ("profile", resolved.profile),
        ("title", resolved.title),
        ("cwd", resolved.working_dir),
    ]
    for name, value in fields:
        if value is not None:
            label.append(f" {name}={value}")
    if resolved.zoom != config.DEFAULT_ZOOM:
        label.append(f" zoom={resolved.zoom:g}")
    if resolved.exec_argv is not None:
        label.append(f" command={resolved.exec_argv!r}", style="green")
    if resolved.wait:
        label.append(" wait", style="yellow")
    if resolved.fds:
        fds = ", ".join(f"{e.fd}->{e.index}" for e in resolved.fds)
        label.append(f" fds=[{fds}]", style="magenta")
    return label


def render_plan(plan: LaunchPlan) -> Tree:
    """Build a tree view of ``plan``."""
    tree = Tree(Text("Launch plan", style="bold"))
    if not plan.windows:
        tree.add(Text("(no windows)", style="dim"))

    for w_index, window in enumerate(plan.windows, start=1):
        branch = tree.add(_window_label(w_index, window))
        for t_index, tab in enumerate(window.tabs, start=1):
            branch.add(_tab_label(plan, t_index, tab))

    return tree


def render_environment(plan: LaunchPlan) -> list[str]:
    """Environment lines a child could use to reach the same terminal server."""
    lines = []
    if plan.server_unique_name is not None:
        lines.append(f"{config.SERVICE_NAME_ENV}={plan.server_unique_name}")
    if plan.parent_screen_object_path is not None:
        lines.append(f"{config.SCREEN_ENV}={plan.parent_screen_object_path}")
    return lines


def print_plan(plan: LaunchPlan, console: Console | None = None) -> None:
    (console or Console()).print(render_plan(plan))
