"""Render error exception."""

from kra_docgen.exceptions.base import DocumentGenerationError


class RenderError(DocumentGenerationError):
    """Raised when the PDF backend fails to produce or write a document."""
    
    pass
