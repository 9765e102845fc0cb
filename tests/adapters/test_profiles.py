"""Tests for adapters.profiles and adapters.settings"""

import pytest

from termlaunch.adapters import (
    DEFAULT_PROFILE_UUID,
    EnvSettings,
    Profile,
    ProfileList,
    StaticSettings,
)
from termlaunch.errors import ProfileNotFoundError


class TestProfileList:
    """Profile lookup"""

    def test_default_profile(self, profiles):
        assert profiles.dup_uuid_or_name(None) == DEFAULT_PROFILE_UUID

    def test_first_profile_without_default(self):
        profiles = ProfileList([Profile("u1", "One"), Profile("u2", "Two")])
        assert profiles.dup_uuid_or_name(None) == "u1"

    def test_empty_list(self):
        with pytest.raises(ProfileNotFoundError, match="No profiles available"):
            ProfileList().dup_uuid_or_name(None)

    def test_by_uuid_and_name(self, profiles, work_uuid):
        assert profiles.dup_uuid_or_name(work_uuid) == work_uuid
        assert profiles.dup_uuid_or_name("Work") == work_uuid

    def test_uuid_before_name(self):
        """A UUID match wins over a profile named like that UUID"""
        profiles = ProfileList([Profile("u1", "u2"), Profile("u2", "Other")])
        assert profiles.dup_uuid_or_name("u2") == "u2"

    def test_ambiguous_name(self, profiles):
        with pytest.raises(ProfileNotFoundError, match="ambiguous"):
            profiles.dup_uuid_or_name("Dup")

    def test_unknown(self, profiles):
        with pytest.raises(ProfileNotFoundError, match="No profile with UUID or name “Nope” exists"):
            profiles.dup_uuid_or_name("Nope")

    def test_dup_uuid_strict(self, profiles):
        with pytest.raises(ProfileNotFoundError):
            profiles.dup_uuid("Work")

    def test_with_default(self):
        assert ProfileList.with_default().dup_uuid_or_name("Default") == DEFAULT_PROFILE_UUID


class TestSettings:
    """new-terminal-mode readers"""

    def test_static(self):
        assert StaticSettings().get_new_terminal_mode() == "window"
        assert StaticSettings("tab").get_new_terminal_mode() == "tab"

    @pytest.mark.parametrize("value, expected", [("tab", "tab"), ("window", "window"), ("bogus", "window")])
    def test_env(self, monkeypatch, value, expected):
        monkeypatch.setenv(EnvSettings.ENV_VAR, value)
        assert EnvSettings().get_new_terminal_mode() == expected
