"""VitaApp backend: JSON-file-backed REST API for the life-admin dashboard."""

__version__ = "1.0.0"
