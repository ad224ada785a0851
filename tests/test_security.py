"""
Tests for security module.

Validates message sanitization and uploaded image validation.
"""
import pytest
from PIL import Image

from mood_analyzer.security import (
    InputValidator,
    FileValidator,
    FileValidationError,
    ValidationError,
)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "selfie.png"
    Image.new("RGB", (32, 32), color="red").save(path, format="PNG")
    return path


class TestInputValidator:
    """Test message validation and sanitization."""

    def test_sanitize_message_valid(self):
        assert InputValidator.sanitize_message("You're amazing!") == "You're amazing!"

    def test_sanitize_message_strips_and_escapes(self):
        assert InputValidator.sanitize_message("  <3 you\x00  ") == "&lt;3 you"

    def test_blank_message_passes_through_empty(self):
        assert InputValidator.sanitize_message("   ") == ""

    def test_sanitize_message_too_long(self):
        with pytest.raises(ValidationError, match="exceeds maximum length"):
            InputValidator.sanitize_message("a" * 501)

    def test_custom_limit(self):
        with pytest.raises(ValidationError):
            InputValidator.sanitize_message("hello", max_length=3)

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            InputValidator.sanitize_message(42)

    def test_validate_length(self):
        assert InputValidator.validate_length("abc", 3) == "abc"
        with pytest.raises(ValidationError, match="Draft"):
            InputValidator.validate_length("abcd", 3, "Draft")


class TestFileValidator:
    """Test uploaded image validation."""

    def test_valid_png(self, png_file):
        assert FileValidator.validate_image_file(str(png_file)) == (True, None)
        assert FileValidator.content_type(str(png_file)) == "image/png"

    def test_valid_jpeg(self, tmp_path):
        path = tmp_path / "selfie.jpg"
        Image.new("RGB", (16, 16)).save(path, format="JPEG")
        
        assert FileValidator.validate_image_file(str(path)) == (True, None)
        assert FileValidator.content_type(str(path)) == "image/jpeg"

    def test_missing_file(self, tmp_path):
        is_valid, error = FileValidator.validate_image_file(str(tmp_path / "nope.png"))
        
        assert not is_valid
        assert "does not exist" in error

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "selfie.gif"
        Image.new("RGB", (16, 16)).save(path, format="GIF")
        
        is_valid, error = FileValidator.validate_image_file(str(path))
        assert not is_valid
        assert "not allowed" in error

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.png"
        path.write_bytes(b"")
        
        assert FileValidator.validate_image_file(str(path)) == (False, "File is empty")

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "fake.png"
        path.write_text("definitely not a png")
        
        is_valid, error = FileValidator.validate_image_file(str(path))
        assert not is_valid
        assert error == "File is not a valid image"

    def test_disguised_format(self, tmp_path):
        path = tmp_path / "actually_gif.png"
        Image.new("RGB", (16, 16)).save(path, format="GIF")
        
        is_valid, error = FileValidator.validate_image_file(str(path))
        assert not is_valid
        assert "GIF" in error

    def test_content_type_rejects_non_image(self, tmp_path):
        path = tmp_path / "fake.png"
        path.write_text("nope")
        
        with pytest.raises(FileValidationError):
            FileValidator.content_type(str(path))
