"""
Security-related exceptions.
"""


class SecurityError(Exception):
    """Base exception for rejected user input."""

    pass


class ValidationError(SecurityError):
    """Raised when input validation fails."""

    pass


class FileValidationError(SecurityError):
    """Raised when file validation fails."""

    pass
