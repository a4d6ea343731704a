"""Tests for key qualification and name validation."""

import pytest

from s3_file_manager.core.exceptions import InvalidNameError, ValidationError
from s3_file_manager.objectstorage.keys import (
    is_folder_key,
    qualify_key,
    qualify_prefix,
    require_file_name,
    require_folder_name,
)


class TestQualifyKey:
    """Test root folder key qualification."""

    def test_leading_separator_kept(self):
        assert qualify_key("root", "/a/b") == "root/a/b"

    def test_missing_separator_inserted(self):
        assert qualify_key("root", "a/b") == "root/a/b"

    def test_empty_root_leaves_key_unchanged(self):
        assert qualify_key("", "a/b") == "a/b"
        assert qualify_key("", "/a/b") == "/a/b"

    def test_root_trailing_separator_not_corrected(self):
        """A root given with a trailing slash produces a double slash."""
        assert qualify_key("root/", "a") == "root//a"

    def test_empty_key_under_root(self):
        assert qualify_key("root", "") == "root/"


class TestQualifyPrefix:
    """Test folder prefix normalisation for listing."""

    def test_adds_leading_and_trailing_separator(self):
        assert qualify_prefix("root", "cas/2021") == "root/cas/2021/"

    def test_folder_path_unchanged(self):
        assert qualify_prefix("root", "/cas/2021/") == "root/cas/2021/"

    def test_empty_path_lists_root(self):
        assert qualify_prefix("root", "") == "root/"

    def test_no_root(self):
        assert qualify_prefix("", "") == ""
        assert qualify_prefix("", "cas") == "cas/"


class TestNameValidation:
    """Test trailing-slash folder/file convention."""

    def test_is_folder_key(self):
        assert is_folder_key("a/")
        assert not is_folder_key("a")

    def test_folder_name_requires_trailing_slash(self):
        require_folder_name("reports/")
        with pytest.raises(InvalidNameError, match="Invalid folder name: reports"):
            require_folder_name("reports")

    def test_empty_folder_name(self):
        require_folder_name("", allow_empty=True)
        with pytest.raises(InvalidNameError):
            require_folder_name("")

    def test_file_name_rejects_trailing_slash(self):
        require_file_name("reports/a.txt")
        with pytest.raises(InvalidNameError, match="Invalid file name: reports/"):
            require_file_name("reports/")

    def test_invalid_name_is_status_400(self):
        with pytest.raises(ValidationError) as exc_info:
            require_file_name("x/")
        assert exc_info.value.status == 400
        assert exc_info.value.message == "Invalid file name: x/"
