"""Tests for plan.defaults - pending defaults"""

import pytest

from termlaunch import config
from termlaunch.plan import Defaults, LaunchPlan, MenubarState, TabSpec, WindowSpec


def new_window() -> WindowSpec:
    return WindowSpec(tabs=[TabSpec()])


class TestApplyTo:
    """Test Defaults.apply_to"""

    def test_role_consumed_once(self):
        """The pending role goes to the next window only"""
        defaults = Defaults(role="main")
        first, second = new_window(), new_window()

        defaults.apply_to(first)
        defaults.apply_to(second)

        assert first.role == "main"
        assert second.role is None
        assert defaults.role is None

    def test_geometry_copied_to_every_window(self):
        """Geometry persists and never overwrites a window's own value"""
        defaults = Defaults(geometry="80x24")
        first, second = new_window(), WindowSpec(tabs=[TabSpec()], geometry="100x40")

        defaults.apply_to(first)
        defaults.apply_to(second)

        assert first.geometry == "80x24"
        assert second.geometry == "100x40"
        assert defaults.geometry == "80x24"

    def test_menubar_consumed_once(self):
        defaults = Defaults(menubar=MenubarState.HIDDEN)
        first, second = new_window(), new_window()

        defaults.apply_to(first)
        defaults.apply_to(second)

        assert first.menubar is MenubarState.HIDDEN
        assert first.menubar_from_option is False
        assert second.menubar is MenubarState.UNSET
        assert defaults.menubar is MenubarState.UNSET

    def test_flags_ored(self):
        """Fullscreen and maximize reach every window and never clear"""
        defaults = Defaults(fullscreen=True)
        maximized = WindowSpec(tabs=[TabSpec()], start_maximized=True)

        defaults.apply_to(maximized)

        assert maximized.start_fullscreen is True
        assert maximized.start_maximized is True
        assert defaults.fullscreen is True


class TestResolveTab:
    """Test Defaults.resolve_tab"""

    def test_falls_back_to_defaults(self):
        defaults = Defaults(profile="p", title="t", working_dir="/w", zoom=1.5, zoom_set=True)

        resolved = defaults.resolve_tab(TabSpec())

        assert resolved.profile == "p"
        assert resolved.title == "t"
        assert resolved.working_dir == "/w"
        assert resolved.zoom == 1.5

    def test_tab_values_win(self):
        defaults = Defaults(profile="p", title="t", working_dir="/w", zoom=1.5, zoom_set=True)
        tab = TabSpec(profile="q", title="own", working_dir="/own", zoom=1.0, zoom_set=True)

        resolved = defaults.resolve_tab(tab)

        assert (resolved.profile, resolved.title, resolved.working_dir) == ("q", "own", "/own")
        assert resolved.zoom == 1.0

    def test_zoom_default(self):
        assert Defaults().resolve_tab(TabSpec()).zoom == config.DEFAULT_ZOOM

    def test_through_plan(self):
        """LaunchPlan.resolve_tab uses the plan's defaults"""
        plan = LaunchPlan(defaults=Defaults(title="from defaults"))
        plan.windows.append(new_window())
        assert plan.resolve_tab(plan.first_tab).title == "from defaults"


class TestWindowSpec:
    """WindowSpec invariants"""

    def test_needs_a_tab(self):
        with pytest.raises(ValueError):
            WindowSpec(tabs=[])

    def test_active_tab_last_wins(self):
        """With several active tabs the later one is reported"""
        first, second, third = TabSpec(active=True), TabSpec(), TabSpec(active=True)
        window = WindowSpec(tabs=[first, second, third])
        assert window.active_tab is third

    def test_no_active_tab(self):
        assert new_window().active_tab is None
