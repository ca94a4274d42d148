"""Shared fixtures: small EPUB archives written with zipfile."""

from pathlib import Path

import pytest

from tests.helpers import book_files, write_epub


@pytest.fixture
def make_epub(tmp_path):
    """Factory writing an EPUB from a dict of entries."""
    counter = iter(range(1000))

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_epub(tmp_path / f"book{next(counter)}.epub", files)

    return _make


@pytest.fixture
def epub_path(make_epub) -> Path:
    """The default sample book, package file at OEBPS/content.opf."""
    return make_epub(book_files())
