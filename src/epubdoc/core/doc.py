"""Open an EPUB and move through its reading order."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Mapping

from epubdoc.core.archive import EpubArchive
from epubdoc.core.container import get_root_base, get_root_file
from epubdoc.core.errors import (
    CoverNotFound,
    FirstPage,
    InvalidPageIndex,
    LastPage,
    NavigationBroken,
    ResourceIdNotFound,
    ResourcePathNotFound,
)
from epubdoc.core.package_builder import PackageBuilder
from epubdoc.models.config import DocConfig
from epubdoc.models.package import Package, ResourceEntry

log = logging.getLogger(__name__)


class EpubDoc:
    """An opened EPUB: resource table, spine, metadata and a chapter cursor.

    Everything except the cursor is computed once when the document is opened
    and is read-only afterwards. The cursor starts at page 0 and only moves
    through :meth:`go_next`, :meth:`go_prev` and :meth:`set_current_page`.
    A failed move leaves it where it was.

    Example::

        with EpubDoc("book.epub") as doc:
            title = doc.metadata.get("title")
            while True:
                html = doc.get_current_str()
                ...
                try:
                    doc.go_next()
                except LastPage:
                    break
    """

    def __init__(self, source: str | Path | BinaryIO, config: DocConfig | None = None):
        """Open the EPUB at ``source`` and read its package file.

        Raises:
            FileOpenError: If the file can't be opened as a zip archive
            EntryNotFound: If the container or package file is missing
            EntryReadError: If one of them is corrupt or encrypted
            MalformedInput: If either XML file is not well-formed
            ElementNotFound: If a required element is absent
            AttributeMissing: If a required attribute is absent
        """
        self.config = config or DocConfig()
        self._archive = EpubArchive(source, encoding=self.config.encoding)
        try:
            self._package = self._load_package()
        except Exception:
            self._archive.close()
            raise

        self._paths: dict[str, str] = {}
        for resource_id, entry in self._package.resources.items():
            self._paths.setdefault(entry.path, resource_id)
        self._current = 0

    @classmethod
    def open(
        cls, source: str | Path | BinaryIO, config: DocConfig | None = None
    ) -> EpubDoc:
        return cls(source, config)

    def _load_package(self) -> Package:
        container = self._archive.get_container_file(self.config.container_path)
        root_file = get_root_file(container)
        root_base = get_root_base(root_file)
        log.debug("Root file %s, root base %r", root_file, root_base)

        data = self._archive.get_entry(root_file)
        return PackageBuilder(data, root_file, root_base).build()

    def __enter__(self) -> EpubDoc:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._archive.close()

    # Package views

    @property
    def package(self) -> Package:
        """A copy of the parsed package; changing it doesn't affect the doc."""
        return self._package.model_copy(deep=True)

    @property
    def root_file(self) -> str:
        """Archive path of the package file."""
        return self._package.root_file

    @property
    def root_base(self) -> str:
        return self._package.root_base

    @property
    def resources(self) -> Mapping[str, ResourceEntry]:
        """Manifest id -> (path, media type)."""
        return MappingProxyType(self._package.resources)

    @property
    def spine(self) -> tuple[str, ...]:
        """Resource ids in reading order."""
        return self._package.spine

    @property
    def metadata(self) -> Mapping[str, str]:
        return MappingProxyType(self._package.metadata)

    # Resources

    def get_resource_by_path(self, path: str) -> bytes:
        return self._archive.get_entry(path)

    def get_resource_str_by_path(self, path: str) -> str:
        return self._archive.get_entry_as_str(path)

    def _resource(self, resource_id: str) -> ResourceEntry:
        try:
            return self._package.resources[resource_id]
        except KeyError:
            raise ResourceIdNotFound(resource_id) from None

    def get_resource(self, resource_id: str) -> bytes:
        """Return the content of the manifest item ``resource_id``.

        Raises:
            ResourceIdNotFound: If the id is not in the manifest
            EntryNotFound: If the manifest points at a missing entry
        """
        return self.get_resource_by_path(self._resource(resource_id).path)

    def get_resource_str(self, resource_id: str) -> str:
        return self.get_resource_str_by_path(self._resource(resource_id).path)

    def get_resource_mime(self, resource_id: str) -> str:
        return self._resource(resource_id).media_type

    def get_resource_mime_by_path(self, path: str) -> str:
        """Return the media type of the manifest item stored at ``path``.

        ``path`` is the full archive path, e.g. ``"OEBPS/Images/cover.png"``.
        """
        try:
            resource_id = self._paths[path]
        except KeyError:
            raise ResourcePathNotFound(path) from None
        return self._package.resources[resource_id].media_type

    def get_cover_id(self) -> str:
        """Return the resource id named by ``<meta name="cover" content="...">``."""
        try:
            return self._package.metadata["cover"]
        except KeyError:
            raise CoverNotFound() from None

    def get_cover(self) -> bytes:
        return self.get_resource(self.get_cover_id())

    # Navigation

    def get_num_pages(self) -> int:
        return len(self._package.spine)

    def get_current_page(self) -> int:
        """Current position in the spine, starting from 0."""
        return self._current

    def go_next(self) -> None:
        """Move to the next spine item.

        Raises:
            LastPage: If already on the last item (the cursor doesn't move)
        """
        if self._current + 1 >= len(self._package.spine):
            raise LastPage()
        self._current += 1
        log.debug("Moved to page %d", self._current)

    def go_prev(self) -> None:
        """Move to the previous spine item.

        Raises:
            FirstPage: If already on the first item (the cursor doesn't move)
        """
        if self._current < 1:
            raise FirstPage()
        self._current -= 1
        log.debug("Moved to page %d", self._current)

    def set_current_page(self, n: int) -> None:
        """Jump to spine position ``n``.

        Raises:
            InvalidPageIndex: If ``n`` is negative or past the end
        """
        if n < 0 or n >= len(self._package.spine):
            raise InvalidPageIndex(n)
        self._current = n
        log.debug("Moved to page %d", self._current)

    def get_current_id(self) -> str:
        if not 0 <= self._current < len(self._package.spine):
            raise NavigationBroken(self._current)
        return self._package.spine[self._current]

    def get_current_path(self) -> str:
        return self._resource(self.get_current_id()).path

    def get_current_mime(self) -> str:
        return self.get_resource_mime(self.get_current_id())

    def get_current(self) -> bytes:
        """Content of the current spine item."""
        return self.get_resource(self.get_current_id())

    get_current_content = get_current

    def get_current_str(self) -> str:
        return self.get_resource_str(self.get_current_id())
