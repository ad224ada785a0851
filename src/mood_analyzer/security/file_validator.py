"""
Uploaded image validation.
"""

from pathlib import Path
from typing import Tuple, Optional

from PIL import Image, UnidentifiedImageError

from .exceptions import FileValidationError


class FileValidator:
    """
    Validates uploaded images by type, size and content.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    MAX_DIMENSION = 10000
    ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png"}
    ALLOWED_FORMATS = {"JPEG": "image/jpeg", "PNG": "image/png"}

    @staticmethod
    def validate_image_file(file_path: str) -> Tuple[bool, Optional[str]]:
        """
        Validate image file.
        
        :param file_path: Path to the file to validate
        :return: Tuple of (is_valid, error_message)
        """
        path = Path(file_path)

        if not path.exists():
            return False, "File does not exist"

        if path.suffix.lower() not in FileValidator.ALLOWED_EXTENSIONS:
            allowed = ", ".join(sorted(FileValidator.ALLOWED_EXTENSIONS))
            return False, f"File extension '{path.suffix}' not allowed. Allowed: {allowed}"

        try:
            file_size = path.stat().st_size
        except OSError as e:
            return False, f"Cannot read file size: {str(e)}"

        if file_size > FileValidator.MAX_FILE_SIZE:
            return False, f"File size {file_size} bytes exceeds maximum {FileValidator.MAX_FILE_SIZE} bytes"

        if file_size == 0:
            return False, "File is empty"

        try:
            with Image.open(file_path) as img:
                img.verify()
                detected_format = img.format

            if detected_format not in FileValidator.ALLOWED_FORMATS:
                return False, f"Image type '{detected_format}' not allowed. Allowed: JPEG, PNG"

            with Image.open(file_path) as img:
                if img.width > FileValidator.MAX_DIMENSION or img.height > FileValidator.MAX_DIMENSION:
                    return False, "Image dimensions too large (max 10000x10000)"

                if img.width == 0 or img.height == 0:
                    return False, "Image has invalid dimensions"

        except UnidentifiedImageError:
            return False, "File is not a valid image"
        except (OSError, SyntaxError, ValueError) as e:
            return False, f"Image validation failed: {str(e)}"

        return True, None

    @staticmethod
    def content_type(file_path: str) -> str:
        """
        MIME type of a validated image.
        
        :raises FileValidationError: If the file is not a readable JPEG/PNG
        """
        try:
            with Image.open(file_path) as img:
                detected_format = img.format
        except (OSError, UnidentifiedImageError) as e:
            raise FileValidationError(f"Cannot read image: {e}")

        if detected_format not in FileValidator.ALLOWED_FORMATS:
            raise FileValidationError(f"Image type '{detected_format}' not allowed")
        return FileValidator.ALLOWED_FORMATS[detected_format]
