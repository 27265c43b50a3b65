"""Unit tests for the vbcode exception hierarchy."""

import pytest

from vbcode.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
    VBCodeError,
)
from vbcode.options import BaseRendererOptions, BBCodeRendererOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for exception classes and their attributes."""

    @pytest.mark.parametrize(
        "error_class, parent",
        [
            (ValidationError, VBCodeError),
            (InvalidOptionsError, ValidationError),
            (RenderingError, VBCodeError),
            (OutputWriteError, RenderingError),
        ],
    )
    def test_inheritance(self, error_class, parent):
        """Test each error derives from its parent."""
        assert issubclass(error_class, parent)

    def test_base_error_keeps_original(self):
        """Test the base error stores message and cause."""
        cause = KeyError("k")
        error = VBCodeError("boom", original_error=cause)
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.original_error is cause

    def test_invalid_options_default_message(self):
        """Test the generated message names both option classes."""
        error = InvalidOptionsError("bbcode", BBCodeRendererOptions, BaseRendererOptions)
        assert "bbcode" in error.message
        assert "BBCodeRendererOptions" in error.message
        assert "BaseRendererOptions" in error.message
        assert error.parameter_name == "options"

    def test_output_write_error_message(self):
        """Test the default message includes target and cause."""
        error = OutputWriteError("post.txt", original_error=OSError("disk full"))
        assert error.message == "Failed to write rendered output to post.txt: disk full"
        assert error.rendering_stage == "output_write"
        assert error.target == "post.txt"

    def test_output_write_error_without_cause(self):
        """Test the default message without a cause."""
        assert OutputWriteError("<StringIO>").message == "Failed to write rendered output to <StringIO>"
