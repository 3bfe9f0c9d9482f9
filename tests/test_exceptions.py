"""Tests for exception implementations.

This module contains unit tests for all exception classes to verify
inheritance, error messages, and context handling.
"""

import pytest

from kra_docgen.exceptions import (
    DocumentGenerationError,
    MalformedInputError,
    MissingFileError,
    RenderError,
)


class TestDocumentGenerationError:
    """Tests for DocumentGenerationError."""
    
    def test_base_error_creation(self) -> None:
        """Test that DocumentGenerationError can be created with a message."""
        error = DocumentGenerationError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.context == {}
    
    def test_base_error_with_context(self) -> None:
        """Test that DocumentGenerationError can include context."""
        context = {"template_path": "p9.html", "count": 2}
        error = DocumentGenerationError("Test error", context=context)
        assert error.context == context
        assert error.context["count"] == 2
    
    def test_base_error_repr_representation(self) -> None:
        """Test detailed representation includes class name and context."""
        error = DocumentGenerationError("Test message", context={"key": "value"})
        repr_str = repr(error)
        assert "DocumentGenerationError" in repr_str
        assert "Test message" in repr_str
        assert "context" in repr_str
    
    def test_repr_omits_empty_context(self) -> None:
        """Test repr without context has no context section."""
        assert repr(DocumentGenerationError("x")) == "DocumentGenerationError('x')"


@pytest.mark.parametrize(
    "error_cls", [MissingFileError, MalformedInputError, RenderError]
)
class TestErrorSubclasses:
    """Shared behaviour of the concrete error types."""
    
    def test_inherits_from_base(self, error_cls: type) -> None:
        """Test that each error inherits from DocumentGenerationError."""
        assert issubclass(error_cls, DocumentGenerationError)
        assert issubclass(error_cls, Exception)
    
    def test_message_and_context(self, error_cls: type) -> None:
        """Test that message and context are kept."""
        error = error_cls("Failed", context={"path": "x.json"})
        assert str(error) == "Failed"
        assert error.context["path"] == "x.json"
    
    def test_can_be_caught_by_base(self, error_cls: type) -> None:
        """Test that each error can be caught by the base exception."""
        with pytest.raises(DocumentGenerationError) as exc_info:
            raise error_cls("boom")
        assert isinstance(exc_info.value, error_cls)
