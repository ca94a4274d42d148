"""Locate the package file through META-INF/container.xml."""

from epubdoc.core.xmlutils import XMLReader

PATH_SEPARATOR = "/"


def get_root_file(container: bytes) -> str:
    """Return the ``full-path`` of the first ``rootfile`` in the container.

    Raises:
        MalformedInput: If the container is not well-formed XML
        ElementNotFound: If there is no ``rootfile`` element
        AttributeMissing: If the ``rootfile`` has no ``full-path``
    """
    tree = XMLReader(container).parse_xml()
    return tree.find("rootfile").get_attr("full-path")


def get_root_base(root_file: str) -> str:
    """Directory prefix that manifest hrefs are appended to.

    Only the package file's immediate parent directory is kept:
    ``"a/b/content.opf"`` gives ``"b/"`` and ``"content.opf"`` gives ``"/"``.
    """
    parts = root_file.split(PATH_SEPARATOR)
    base = parts[-2] if len(parts) >= 2 else ""
    return base + PATH_SEPARATOR
