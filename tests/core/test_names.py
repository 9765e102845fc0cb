"""Tests for core.names - bus name validators"""

import pytest

from termlaunch.core.names import MAX_NAME_LENGTH, is_object_path, is_unique_name, is_valid_app_id


class TestIsValidAppId:
    """Test is_valid_app_id"""

    @pytest.mark.parametrize(
        "app_id",
        ["org.example.Terminal", "com.example_app.Term", "org.ex-ample.App", "a.b"],
    )
    def test_valid(self, app_id):
        """Dotted names with at least two elements are accepted"""
        assert is_valid_app_id(app_id) is True

    @pytest.mark.parametrize(
        "app_id",
        ["", "org", "org..example", ".org.example", "org.example.", "org.1example", "org.exa mple", ":1.42"],
    )
    def test_invalid(self, app_id):
        """Malformed names are rejected"""
        assert is_valid_app_id(app_id) is False

    def test_too_long(self):
        """Names longer than the bus limit are rejected"""
        app_id = "org." + "a" * MAX_NAME_LENGTH
        assert is_valid_app_id(app_id) is False


class TestIsUniqueName:
    """Test is_unique_name"""

    def test_valid(self):
        """Unique names start with ':' and may have digit elements"""
        assert is_unique_name(":1.42") is True
        assert is_unique_name(":abc.def.0") is True

    def test_missing_colon(self):
        """A well-known name is not a unique name"""
        assert is_unique_name("1.42") is False
        assert is_unique_name("org.example.Terminal") is False

    def test_single_element(self):
        """At least two elements are required"""
        assert is_unique_name(":1") is False
        assert is_unique_name(":") is False


class TestIsObjectPath:
    """Test is_object_path"""

    @pytest.mark.parametrize("path", ["/", "/org", "/org/example/Terminal/screen/0", "/a_b/C9"])
    def test_valid(self, path):
        """Root and slash-separated segments are accepted"""
        assert is_object_path(path) is True

    @pytest.mark.parametrize("path", ["", "org", "/org/", "//", "/org//example", "/a-b", "/a.b"])
    def test_invalid(self, path):
        """Empty segments, trailing slashes and odd characters are rejected"""
        assert is_object_path(path) is False
