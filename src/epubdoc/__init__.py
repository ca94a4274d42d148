"""Read EPUB packages: resources, spine, metadata and chapter navigation."""

from epubdoc.core.doc import EpubDoc
from epubdoc.core.errors import (
    AttributeMissing,
    CoverNotFound,
    ElementNotFound,
    EntryDecodeError,
    EntryNotFound,
    EntryReadError,
    EpubError,
    FileOpenError,
    FirstPage,
    InvalidPageIndex,
    LastPage,
    MalformedInput,
    NavigationBroken,
    NavigationError,
    ResourceIdNotFound,
    ResourcePathNotFound,
)
from epubdoc.models import DocConfig, Package, ResourceEntry

__version__ = "0.1.0"

__all__ = [
    "EpubDoc",
    "DocConfig",
    "Package",
    "ResourceEntry",
    # Errors
    "EpubError",
    "FileOpenError",
    "EntryNotFound",
    "EntryDecodeError",
    "EntryReadError",
    "MalformedInput",
    "ElementNotFound",
    "AttributeMissing",
    "ResourceIdNotFound",
    "ResourcePathNotFound",
    "CoverNotFound",
    "NavigationError",
    "LastPage",
    "FirstPage",
    "InvalidPageIndex",
    "NavigationBroken",
]
