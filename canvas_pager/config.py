from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from canvas_pager.pagination.base import ScanConfig


class PaginationConfig(BaseModel):
    """Default scan parameters for page splitting."""

    page_height: int = Field(default=1123, gt=0, description="Ideal page height in pixels (A4 at 96 DPI)")
    padding_left: int = Field(default=0, ge=0, description="Left margin excluded from colour comparison")
    padding_right: int = Field(default=0, ge=0, description="Right margin excluded from colour comparison")
    step: int = Field(default=2, ge=1, description="Column stride when sampling a row")
    split_line_pixels: int = Field(default=6, ge=1, description="Uniform rows required for a split band")

    def to_scan_config(self, **overrides) -> ScanConfig:
        """Build a ScanConfig, replacing any field given in overrides that is not None."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ScanConfig(**values)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # Upload limits
    max_upload_mb: int = 50

    # Default pagination settings
    pagination: PaginationConfig = PaginationConfig()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"


settings = Settings()
