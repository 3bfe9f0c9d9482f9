"""Base exception class for all document generation errors.

This module defines the DocumentGenerationError class that serves as the base
for all custom exceptions in the system. Every failure raised while loading
templates, reading data or rendering PDFs inherits from this class so callers
can handle a whole generation request with a single except clause.
"""


class DocumentGenerationError(Exception):
    """Base exception for all document generation errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize document generation error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., file paths, data paths, entry indexes)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        """Return string representation of the error.
        
        Returns:
            Error message string
        """
        return self.message
    
    def __repr__(self) -> str:
        """Return detailed representation of the error.
        
        Returns:
            Detailed error representation including context
        """
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
