"""Launch plan finaliser

Runs once after all option events and config merges:
- finalize: checks -x/--execute got a command and moves the pending
  legacy command onto the plan's first tab
- ensure_window: guarantees at least one window, consulting the
  new-terminal mode setting
"""

from ..adapters.base import SettingsReader
from ..errors import BadValueError
from ..telemetry import get_logger
from .builder import PlanBuilder
from .plan import LaunchPlan

logger = get_logger(__name__)


def finalize(builder: PlanBuilder) -> LaunchPlan:
    """Digest the pending legacy command.

    Raises:
        BadValueError: -x/--execute was given without a command
    """
    plan = builder.plan
    if plan.execute and plan.exec_argv is None:
        raise BadValueError(
            "Option “--execute/-x” requires specifying the command to run"
            " on the rest of the command line"
        )

    if plan.exec_argv is not None:
        builder.ensure_window(implicit_if_first=True)
        first_tab = plan.windows[0].tabs[0]
        first_tab.exec_argv = plan.exec_argv
        plan.exec_argv = None
        logger.debug(f"[Finalize] Command {first_tab.exec_argv!r} applied to first tab")

    plan.verbosity = builder.diagnostics.verbosity
    return plan


def ensure_window(builder: PlanBuilder, settings: SettingsReader) -> LaunchPlan:
    """Make sure the plan opens at least one window.

    The fallback window is implicit when the new-terminal mode is "tab".
    """
    mode = settings.get_new_terminal_mode()
    builder.ensure_window(implicit_if_first=mode == "tab")
    return builder.plan
