"""Split tall rendered images into pages without cutting through content."""

__version__ = "1.0.0"
