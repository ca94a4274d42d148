"""Byte-level access to the entries of an EPUB zip container."""

from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO

from epubdoc.core.errors import (
    EntryDecodeError,
    EntryNotFound,
    EntryReadError,
    FileOpenError,
)

log = logging.getLogger(__name__)


class EpubArchive:
    """Read-only view over the zip archive backing an EPUB."""

    CONTAINER_PATH = "META-INF/container.xml"

    def __init__(self, source: str | Path | BinaryIO, encoding: str = "utf-8"):
        """Open the archive.

        Args:
            source: Path to the EPUB file or a seekable binary file object
            encoding: Encoding used by :meth:`get_entry_as_str`

        Raises:
            FileOpenError: If the source is missing, unreadable or not a zip
        """
        self.path = str(source) if isinstance(source, (str, Path)) else "<stream>"
        self.encoding = encoding
        try:
            self._zip = zipfile.ZipFile(source)
        except (OSError, zipfile.BadZipFile) as e:
            raise FileOpenError(self.path, str(e)) from e
        log.debug("Opened %s (%d entries)", self.path, len(self._zip.infolist()))

    def __enter__(self) -> EpubArchive:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def list_entries(self) -> list[str]:
        """Entry names in archive order."""
        return self._zip.namelist()

    def get_entry(self, path: str) -> bytes:
        """Return the raw bytes stored at ``path``."""
        try:
            return self._zip.read(path)
        except KeyError:
            raise EntryNotFound(path) from None
        except (zipfile.BadZipFile, zlib.error, RuntimeError) as e:
            # bad CRC, broken deflate stream, encrypted entry
            raise EntryReadError(path, str(e)) from e

    def get_entry_as_str(self, path: str) -> str:
        """Return the entry at ``path`` decoded as text, without a BOM."""
        data = self.get_entry(path)
        try:
            text = data.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise EntryDecodeError(path, self.encoding) from e
        return text.removeprefix("\ufeff")

    def get_container_file(self, path: str | None = None) -> bytes:
        """Return the bytes of the container descriptor.

        Args:
            path: Descriptor location (default: ``META-INF/container.xml``)
        """
        return self.get_entry(path or self.CONTAINER_PATH)
