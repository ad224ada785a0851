"""
Security module for message sanitization and upload validation.
"""

from .exceptions import SecurityError, ValidationError, FileValidationError
from .input_validator import InputValidator
from .file_validator import FileValidator

__all__ = [
    "SecurityError",
    "ValidationError",
    "FileValidationError",
    "InputValidator",
    "FileValidator",
]
