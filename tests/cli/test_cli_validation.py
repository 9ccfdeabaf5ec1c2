"""
Test suite for CLI validation functions.

Tests all validation functions with edge cases and the must_exist parameter.
"""

from pathlib import Path

import pytest

from quickreact.cli.errors import CLIValidationError
from quickreact.cli.validation import (
    TREE_FORMATS,
    validate_choice,
    validate_output_dir,
    validate_path,
)


class TestValidatePath:
    """Test validate_path() function."""

    def test_valid_string_path(self):
        """Test converting string to Path."""
        result = validate_path("/tmp/site.qr")
        assert isinstance(result, Path)
        assert str(result) == "/tmp/site.qr"

    def test_valid_path_object(self):
        """Test passing Path object directly."""
        input_path = Path("/tmp/site.qr")
        assert validate_path(input_path) == input_path

    def test_none_without_allow_none(self):
        """Test that None raises error by default."""
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(None)
        assert "cannot be None" in str(exc_info.value)

    def test_none_with_allow_none(self):
        assert validate_path(None, allow_none=True) is None

    def test_must_exist_with_existing_file(self, tmp_path):
        """Test must_exist=True with a file that exists."""
        markup = tmp_path / "site.qr"
        markup.write_text("<App></App>")
        assert validate_path(str(markup), must_exist=True) == markup

    def test_must_exist_with_missing_file(self, tmp_path):
        """Test must_exist=True with a missing file."""
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(tmp_path / "missing.qr", must_exist=True)
        assert "does not exist" in str(exc_info.value)
        assert exc_info.value.hint

    def test_invalid_type(self):
        with pytest.raises(CLIValidationError, match="Expected path-like value, got int"):
            validate_path(123)


class TestValidateChoice:
    """Test validate_choice() function."""

    @pytest.mark.parametrize("value,expected", [("text", "text"), ("JSON", "json"), (" json ", "json")])
    def test_valid(self, value, expected):
        assert validate_choice(value, TREE_FORMATS, name="format") == expected

    def test_invalid(self):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_choice("yaml", TREE_FORMATS, name="format")
        assert "Invalid format: yaml" in str(exc_info.value)
        assert exc_info.value.hint == "Use one of: text, json"


class TestValidateOutputDir:
    """Test validate_output_dir() function."""

    def test_missing_dir_is_allowed(self, tmp_path):
        target = tmp_path / "new"
        assert validate_output_dir(target) == target

    def test_existing_dir(self, tmp_path):
        assert validate_output_dir(tmp_path) == tmp_path

    def test_file_is_rejected(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(CLIValidationError, match="not a directory"):
            validate_output_dir(target)
