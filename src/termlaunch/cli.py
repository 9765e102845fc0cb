"""Command-line entry point

termlaunch [OPTIONS] [-- COMMAND ...]

Builds the launch plan, makes sure it opens at least one window and
prints it (or the environment block for --print-environment).
"""

import sys
from typing import Mapping

from rich.console import Console

from .adapters.base import ProfileLookup, SettingsReader
from .adapters.fdlist import UnixFdList
from .adapters.profiles import ProfileList
from .adapters.settings import EnvSettings
from .errors import OptionError
from .options.parser import parse_options
from .plan.builder import FdTransportFactory, PlanBuilder
from .plan.finalize import ensure_window
from .render import render_environment, render_plan
from .telemetry import Diagnostics, configure_logging, get_logger

logger = get_logger(__name__)


def main(
    argv: list[str] | None = None,
    profiles: ProfileLookup | None = None,
    settings: SettingsReader | None = None,
    environ: Mapping[str, str] | None = None,
    fd_transport_factory: FdTransportFactory = UnixFdList,
    console: Console | None = None,
    error_console: Console | None = None,
) -> int:
    """Entry point; returns the exit status."""
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    profiles = profiles if profiles is not None else ProfileList.with_default()
    settings = settings if settings is not None else EnvSettings()
    console = console or Console()
    error_console = error_console or Console(stderr=True)

    diagnostics = Diagnostics(stream=error_console.file)
    try:
        plan = parse_options(
            argv,
            profiles=profiles,
            settings=settings,
            environ=environ,
            diagnostics=diagnostics,
            fd_transport_factory=fd_transport_factory,
            console=console,
        )
    except OptionError as e:
        logger.debug(f"[CLI] {e.kind.value}: {e.message}")
        error_console.print(f"Error parsing arguments: {e.message}", markup=False, highlight=False)
        return 1

    try:
        ensure_window(PlanBuilder(profiles, plan=plan, diagnostics=diagnostics), settings)
        if plan.print_environment:
            for line in render_environment(plan):
                console.print(line, markup=False, highlight=False)
        else:
            console.print(render_plan(plan))
    finally:
        plan.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
