"""Malformed input error exception.

This module defines the MalformedInputError exception raised when the JSON
data cannot be parsed or lacks a field the document needs.
"""

from kra_docgen.exceptions.base import DocumentGenerationError


class MalformedInputError(DocumentGenerationError):
    """Raised when input data is unparseable or missing an expected field.
    
    The context should name the data path or the offending entry index so
    the broken part of the JSON file can be located quickly.
    """
    
    pass
