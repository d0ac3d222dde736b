"""Utility modules for the pagination service."""

from canvas_pager.utils.file_validation import (
    ValidationError,
    validate_filename,
    validate_image,
)

__all__ = [
    "ValidationError",
    "validate_filename",
    "validate_image",
]
