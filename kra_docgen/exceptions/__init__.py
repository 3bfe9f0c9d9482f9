"""Custom exception classes for the document generator.

This package contains the exception hierarchy:
- DocumentGenerationError: Base exception for all generation errors
- MissingFileError: Raised when a template, data file or asset is absent
- MalformedInputError: Raised when JSON data is invalid or incomplete
- RenderError: Raised when PDF rendering fails
"""

from kra_docgen.exceptions.base import DocumentGenerationError
from kra_docgen.exceptions.missing_file_error import MissingFileError
from kra_docgen.exceptions.malformed_input_error import MalformedInputError
from kra_docgen.exceptions.render_error import RenderError

__all__ = [
    "DocumentGenerationError",
    "MissingFileError",
    "MalformedInputError",
    "RenderError",
]
