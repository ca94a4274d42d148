"""Data models."""

from epubdoc.models.config import DocConfig
from epubdoc.models.package import Package, ResourceEntry

__all__ = [
    "DocConfig",
    "Package",
    "ResourceEntry",
]
