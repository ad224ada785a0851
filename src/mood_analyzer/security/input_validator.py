"""
Input validation and sanitization for chat messages.
"""

import html

from .exceptions import ValidationError


class InputValidator:
    """
    Validates and sanitizes user messages before they reach the classifier.
    """

    MAX_MESSAGE_LENGTH = 500

    @staticmethod
    def sanitize_message(message: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
        """
        Sanitize a chat message.
        
        Blank messages pass through as "" (sending one is a no-op, not an error).
        
        :param message: User's message
        :param max_length: Maximum accepted length
        :return: Sanitized message
        :raises ValidationError: If message is not a string or is too long
        """
        if not isinstance(message, str):
            raise ValidationError("Message must be a string")

        if len(message) > max_length:
            raise ValidationError(
                f"Message exceeds maximum length of {max_length} characters"
            )

        sanitized = message.replace("\x00", "")
        sanitized = html.escape(sanitized, quote=False)
        return sanitized.strip()

    @staticmethod
    def validate_length(text: str, max_length: int, field_name: str = "Input") -> str:
        """
        Validate text length.
        
        :param text: Text to validate
        :param max_length: Maximum allowed length
        :param field_name: Name of the field for error messages
        :return: Validated text
        :raises ValidationError: If text exceeds maximum length
        """
        if not isinstance(text, str):
            raise ValidationError(f"{field_name} must be a string")

        if len(text) > max_length:
            raise ValidationError(
                f"{field_name} exceeds maximum length of {max_length} characters"
            )

        return text
