"""Builders for small EPUB archives used across the test suite."""

from __future__ import annotations

import zipfile
from pathlib import Path

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{root_file}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

CONTENT_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" unique-identifier="BookId" version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/"
            xmlns:opf="http://www.idpf.org/2007/opf">
    <dc:title>Todo es mío</dc:title>
    <dc:creator opf:role="aut">Daniel García</dc:creator>
    <dc:language>es</dc:language>
    <dc:identifier id="BookId">urn:uuid:0001</dc:identifier>
    <dc:description/>
    <meta name="cover" content="cover-image"/>
  </metadata>
  <manifest>
    <item id="ncx" href="toc.ncx" media-type="application/x-dtbncx+xml"/>
    <item id="cover-image" href="images/cover.png" media-type="image/png"/>
    <item id="style" href="styles/book.css" media-type="text/css"/>
    <item id="titlepage.xhtml" href="text/titlepage.xhtml" media-type="application/xhtml+xml"/>
    <item id="000.xhtml" href="text/000.xhtml" media-type="application/xhtml+xml"/>
    <item id="001.xhtml" href="text/001.xhtml" media-type="application/xhtml+xml"/>
    <item id="002.xhtml" href="text/002.xhtml" media-type="application/xhtml+xml"/>
  </manifest>
  <spine toc="ncx">
    <itemref idref="titlepage.xhtml"/>
    <itemref idref="000.xhtml"/>
    <itemref idref="001.xhtml"/>
    <itemref idref="002.xhtml"/>
  </spine>
</package>
"""

COVER_PNG = b"\x89PNG\r\n\x1a\nfake-cover-bytes"


def chapter(title: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">'
        f"<head><title>{title}</title></head>"
        f"<body><h1>{title}</h1><p>Capítulo {title}.</p></body></html>"
    )


def write_epub(path: Path, files: dict[str, str | bytes]) -> Path:
    """Write ``files`` (archive path -> content) into a zip at ``path``."""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        for name, content in files.items():
            zf.writestr(name, content)
    return path


def book_files(
    root_file: str = "OEBPS/content.opf",
    opf: str = CONTENT_OPF,
) -> dict[str, str | bytes]:
    """Container, package file and every entry the default manifest names."""
    base = root_file.rsplit("/", 1)[0] + "/" if "/" in root_file else ""
    files: dict[str, str | bytes] = {
        "META-INF/container.xml": CONTAINER_XML.format(root_file=root_file),
        root_file: opf,
        f"{base}toc.ncx": "<ncx/>",
        f"{base}images/cover.png": COVER_PNG,
        f"{base}styles/book.css": "body { margin: 0; }",
    }
    for name in ("titlepage", "000", "001", "002"):
        files[f"{base}text/{name}.xhtml"] = chapter(name)
    return files


def opf_with(metadata: str = "", manifest: str = "", spine: str = "") -> str:
    """Minimal package file with the given section bodies."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">{metadata}</metadata>
  <manifest>{manifest}</manifest>
  <spine>{spine}</spine>
</package>
"""


def corrupt_entry(path: Path, marker: bytes) -> Path:
    """Flip one byte of a stored entry's payload so its CRC no longer matches."""
    data = bytearray(path.read_bytes())
    offset = data.index(marker)
    data[offset] ^= 0x01
    path.write_bytes(bytes(data))
    return path
