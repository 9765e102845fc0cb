"""Tests for render - plan tree and environment block"""

import io

from rich.console import Console

from termlaunch.plan import LaunchPlan
from termlaunch.render import print_plan, render_environment, render_plan


def to_text(renderable) -> str:
    out = io.StringIO()
    Console(file=out, width=200, color_system=None).print(renderable)
    return out.getvalue()


class TestRenderPlan:
    """Test render_plan"""

    def test_windows_and_tabs(self, parse):
        plan = parse(["--role=main", "--window", "--title=logs", "--fd=5", "--tab", "--active", "--", "top"])
        text = to_text(render_plan(plan))

        assert "Window 1" in text
        assert "role=main" in text
        assert "Tab 1" in text and "Tab 2 *" in text
        assert "title=logs" in text
        assert "5->0" in text
        assert "['top']" in text

    def test_resolved_defaults_shown(self, parse):
        plan = parse(["--title=from-default", "--window"])
        assert "title=from-default" in to_text(render_plan(plan))

    def test_empty_plan(self):
        assert "(no windows)" in to_text(render_plan(LaunchPlan()))

    def test_print_plan(self, parse):
        out = io.StringIO()
        print_plan(parse(["--window"]), Console(file=out, width=200, color_system=None))
        assert "Window 1" in out.getvalue()


class TestRenderEnvironment:
    """Test render_environment"""

    def test_lines(self, parse):
        plan = parse([], environ={"TERMLAUNCH_SERVICE": ":1.7", "TERMLAUNCH_SCREEN": "/screen/3"})
        assert render_environment(plan) == ["TERMLAUNCH_SERVICE=:1.7", "TERMLAUNCH_SCREEN=/screen/3"]

    def test_nothing_known(self):
        assert render_environment(LaunchPlan()) == []
