from pydantic import BaseModel, Field


class SplitResponse(BaseModel):
    """Page boundaries computed for an uploaded image."""

    filename: str = Field(description="Sanitized name of the uploaded file")
    width: int = Field(description="Image width in pixels")
    height: int = Field(description="Image height in pixels")
    page_height: int = Field(description="Page height the split was computed with")
    split_heights: list[int] = Field(description="Row offsets where each page ends; the last is the image height")
    page_count: int = Field(description="Number of non-empty pages")
    band_splits: int = Field(default=0, description="Boundaries placed inside a blank band")
    fallback_splits: int = Field(default=0, description="Boundaries cut at exactly one page height")
