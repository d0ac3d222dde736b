"""
Upload validation for images submitted for pagination.

Checks run in order, cheapest first:
1. Size limits
2. Magic byte detection (file signature)
3. PIL decode verification

Files are rejected unless every check passes.
"""

import logging
from pathlib import Path
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


# Magic byte signatures of raster formats PIL can decode
IMAGE_SIGNATURES = (
    b"\xff\xd8\xff",  # JPEG
    b"\x89PNG\r\n\x1a\n",  # PNG
    b"GIF87a",
    b"GIF89a",
    b"BM",  # BMP
    b"II*\x00",  # TIFF (little-endian)
    b"MM\x00*",  # TIFF (big-endian)
)


class ValidationError(Exception):
    """Raised when file validation fails."""

    pass


def is_image_signature(header: bytes) -> bool:
    """
    Check whether the leading bytes look like a supported image.

    Args:
        header: First bytes of the file.

    Returns:
        True if a known image signature matches.
    """
    if header.startswith(b"RIFF"):
        return len(header) >= 12 and header[8:12] == b"WEBP"
    return header.startswith(IMAGE_SIGNATURES)


def validate_image(file_obj: BinaryIO, max_size_mb: int = 50) -> None:
    """
    Validate an uploaded image.

    Args:
        file_obj: File object to validate (left positioned at start).
        max_size_mb: Maximum file size in MB.

    Raises:
        ValidationError: If the file fails any check.
    """
    file_obj.seek(0, 2)
    file_size = file_obj.tell()
    file_obj.seek(0)

    if file_size == 0:
        raise ValidationError("File is empty")

    max_size_bytes = max_size_mb * 1024 * 1024
    if file_size > max_size_bytes:
        raise ValidationError(
            f"File too large: {file_size / 1024 / 1024:.1f}MB "
            f"(max {max_size_mb}MB)"
        )

    header = file_obj.read(32)
    file_obj.seek(0)

    if not is_image_signature(header):
        raise ValidationError("Unknown or unsupported file type")

    try:
        with Image.open(file_obj) as img:
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        logger.debug(f"PIL validation failed: {e}")
        raise ValidationError("File is not a valid image") from e
    finally:
        file_obj.seek(0)

    logger.info(f"Image validated successfully: {file_size / 1024:.1f}KB")


def validate_filename(filename: str) -> str:
    """
    Sanitize an upload filename.

    Args:
        filename: Original filename from upload.

    Returns:
        Filename with any path components removed.

    Raises:
        ValidationError: If filename is invalid or malicious.
    """
    if not filename:
        raise ValidationError("Filename cannot be empty")

    safe_filename = Path(filename).name

    if not safe_filename:
        raise ValidationError("Invalid filename")

    if ".." in safe_filename or safe_filename.startswith("."):
        raise ValidationError("Invalid filename pattern")

    if len(safe_filename) > 255:
        raise ValidationError("Filename too long (max 255 characters)")

    return safe_filename
