"""
Unit tests for output option validation.

Tests the OutputOptions schema and build_options().
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from core.validation import OutputOptions, build_options
from core.exceptions import ConfigurationError


class TestOutputOptions:
    """Test output option validation."""

    def test_defaults(self):
        options = OutputOptions()
        assert options.container_tag == "code"
        assert options.comment_override is None

    def test_custom_values(self):
        options = OutputOptions(container_tag="demo", comment_override=";")
        assert options.container_tag == "demo"
        assert options.comment_override == ";"

    def test_empty_comment_override_allowed(self):
        """An empty override is kept verbatim, not treated as unset."""
        options = OutputOptions(comment_override="")
        assert options.comment_override == ""

    def test_empty_tag_rejected(self):
        with pytest.raises(PydanticValidationError, match="must not be empty"):
            OutputOptions(container_tag="")

    @pytest.mark.parametrize("tag", ["a<b", "code>", "x\ny", "x\ry"])
    def test_malformed_tag_rejected(self, tag):
        with pytest.raises(PydanticValidationError, match="invalid character"):
            OutputOptions(container_tag=tag)

    def test_tag_with_attributes_allowed(self):
        options = OutputOptions(container_tag="doc id=1")
        assert options.container_tag == "doc id=1"

    def test_multiline_comment_rejected(self):
        with pytest.raises(PydanticValidationError, match="line break"):
            OutputOptions(comment_override="#\n")

    def test_unknown_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            OutputOptions(container_tag="code", encoding="latin1")

    def test_frozen(self):
        options = OutputOptions()
        with pytest.raises(PydanticValidationError):
            options.container_tag = "other"


class TestBuildOptions:
    """Test build_options error wrapping."""

    def test_valid(self):
        options = build_options("demo", "--")
        assert options == OutputOptions(container_tag="demo", comment_override="--")

    def test_invalid_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_options("", "#\n")

        errors = exc_info.value.context["errors"]
        assert len(errors) == 2
        assert any(e.startswith("container_tag:") for e in errors)
        assert any(e.startswith("comment_override:") for e in errors)
