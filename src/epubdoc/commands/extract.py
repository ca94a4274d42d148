"""Write resource content out of the archive."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from epubdoc.core.doc import EpubDoc


def read_selected(
    doc: EpubDoc,
    resource_id: str | None,
    path: str | None,
    page: int | None,
    as_text: bool = False,
) -> bytes | str:
    """Return the content chosen by exactly one of id, path or spine page."""
    chosen = [v for v in (resource_id, path, page) if v is not None]
    if len(chosen) != 1:
        raise ValueError("Give exactly one of --id, --path or --page")

    if resource_id is not None:
        if as_text:
            return doc.get_resource_str(resource_id)
        return doc.get_resource(resource_id)
    if path is not None:
        if as_text:
            return doc.get_resource_str_by_path(path)
        return doc.get_resource_by_path(path)

    doc.set_current_page(page)
    return doc.get_current_str() if as_text else doc.get_current()


def write_output(data: bytes | str, output: Path | None, console: Console) -> None:
    """Write to ``output``, or unformatted to stdout when no file is given."""
    if isinstance(data, str):
        data = data.encode("utf-8")

    if output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    console.print(f"[green]Wrote {len(data):,} bytes to {escape(str(output))}[/]")


def execute_cat(
    doc: EpubDoc,
    resource_id: str | None,
    path: str | None,
    page: int | None,
    as_text: bool,
    output: Path | None,
    console: Console,
) -> None:
    data = read_selected(doc, resource_id, path, page, as_text)
    write_output(data, output, console)


def execute_cover(doc: EpubDoc, output: Path, console: Console) -> None:
    cover_id = doc.get_cover_id()
    data = doc.get_cover()
    mime = doc.get_resource_mime(cover_id)
    console.print(f"[dim]Cover {escape(cover_id)} ({escape(mime)})[/]")
    write_output(data, output, console)
