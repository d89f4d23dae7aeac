"""
Persistence adapters.

Today every resource is a flat JSON file; services depend on JsonFileStore
rather than touching the files themselves.
"""

from .json_storage import JsonFileStore

__all__ = ["JsonFileStore"]
