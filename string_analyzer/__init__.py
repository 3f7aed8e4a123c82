"""In-memory string analysis service."""

__version__ = "1.0.0"
