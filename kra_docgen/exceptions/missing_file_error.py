"""Missing file error exception.

This module defines the MissingFileError exception raised when a template,
data file or asset cannot be found on disk.
"""

from kra_docgen.exceptions.base import DocumentGenerationError


class MissingFileError(DocumentGenerationError):
    """Raised when a required input file does not exist.
    
    Missing templates and data files abort the request. A missing logo is
    reported by the asset embedder but never raised out of a generation run.
    """
    
    pass
