"""Options for opening a document."""

from dataclasses import dataclass

from epubdoc.core.archive import EpubArchive


@dataclass(frozen=True)
class DocConfig:
    """Configuration for :class:`epubdoc.core.doc.EpubDoc`."""

    encoding: str = "utf-8"  # used by the *_str accessors
    container_path: str = EpubArchive.CONTAINER_PATH
