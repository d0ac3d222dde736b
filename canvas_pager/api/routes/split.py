import logging

import numpy as np
from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from PIL import Image

from canvas_pager.config import settings
from canvas_pager.pagination import InvalidConfigurationError, PageSplitter
from canvas_pager.schemas.split import SplitResponse
from canvas_pager.utils.file_validation import ValidationError, validate_filename, validate_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/split", tags=["Split"])


@router.post("", response_model=SplitResponse)
def split_image(
    file: UploadFile = File(..., description="Rendered image to paginate"),
    page_height: int | None = Form(default=None, description="Page height in pixels (default: from config)"),
    padding_left: int | None = Form(default=None, description="Left margin excluded from comparison"),
    padding_right: int | None = Form(default=None, description="Right margin excluded from comparison"),
    step: int | None = Form(default=None, description="Column stride when sampling rows"),
    split_line_pixels: int | None = Form(default=None, description="Uniform rows required for a split band"),
):
    """
    Compute page boundaries for an uploaded image.

    Each boundary falls inside a blank horizontal band when one exists
    within the page, otherwise exactly one page height below the last.
    """
    try:
        safe_filename = validate_filename(file.filename or "image.png")
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid filename: {e}",
        )

    try:
        validate_image(file.file, max_size_mb=settings.max_upload_mb)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid image file: {e}",
        )

    try:
        config = settings.pagination.to_scan_config(
            page_height=page_height,
            padding_left=padding_left,
            padding_right=padding_right,
            step=step,
            split_line_pixels=split_line_pixels,
        )
        with Image.open(file.file) as img:
            pixels = np.array(img.convert("RGBA"))
        result = PageSplitter(config).paginate(pixels)
    except InvalidConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid pagination settings: {e}",
        )

    width, height = result.original_size
    logger.info(f"Computed {result.num_pages} pages for {safe_filename} ({width}x{height})")

    return SplitResponse(
        filename=safe_filename,
        width=width,
        height=height,
        page_height=config.page_height,
        split_heights=result.split_heights,
        page_count=result.num_pages,
        band_splits=result.metadata["band_splits"],
        fallback_splits=result.metadata["fallback_splits"],
    )
