"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from epubdoc.commands.extract import execute_cat, execute_cover
from epubdoc.commands.info import execute_info, execute_resources, execute_spine
from epubdoc.core.doc import EpubDoc
from epubdoc.core.errors import EpubError
from epubdoc.models.config import DocConfig

app = typer.Typer(
    name="epubdoc",
    help="Inspect EPUB packages: metadata, manifest, spine and resources.",
    add_completion=False,
)

console = Console()

BookPath = Annotated[
    Path,
    typer.Argument(
        help="Path to the EPUB file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
Encoding = Annotated[
    str,
    typer.Option("--encoding", help="Text encoding of the book's entries"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Inspect EPUB packages: metadata, manifest, spine and resources."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def open_doc(book_path: Path, encoding: str = "utf-8") -> EpubDoc:
    """Open the book or exit with the error printed."""
    try:
        return EpubDoc(book_path, DocConfig(encoding=encoding))
    except EpubError as e:
        console.print(f"[red]Error reading file: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def info(
    book_path: BookPath,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the package as JSON"),
    ] = False,
) -> None:
    """Display the package file location and metadata."""
    with open_doc(book_path) as doc:
        execute_info(doc, as_json, console)


@app.command()
def spine(book_path: BookPath) -> None:
    """List the reading order."""
    with open_doc(book_path) as doc:
        execute_spine(doc, console)


@app.command()
def resources(book_path: BookPath) -> None:
    """List the manifest."""
    with open_doc(book_path) as doc:
        execute_resources(doc, console)


@app.command()
def cat(
    book_path: BookPath,
    resource_id: Annotated[
        Optional[str],
        typer.Option("--id", help="Manifest id of the resource"),
    ] = None,
    path: Annotated[
        Optional[str],
        typer.Option("--path", help="Full archive path of the entry"),
    ] = None,
    page: Annotated[
        Optional[int],
        typer.Option("--page", help="Spine position, starting from 0"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    as_text: Annotated[
        bool,
        typer.Option("--text", help="Decode the entry and re-encode it as UTF-8"),
    ] = False,
    encoding: Encoding = "utf-8",
) -> None:
    """Write the content of one resource, raw by default."""
    with open_doc(book_path, encoding) as doc:
        try:
            execute_cat(doc, resource_id, path, page, as_text, output, console)
        except (EpubError, ValueError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/]")
            raise typer.Exit(1)


@app.command()
def cover(
    book_path: BookPath,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="File to write the cover image to"),
    ],
) -> None:
    """Extract the cover image."""
    with open_doc(book_path) as doc:
        try:
            execute_cover(doc, output, console)
        except EpubError as e:
            console.print(f"[red]Error: {escape(str(e))}[/]")
            raise typer.Exit(1)


if __name__ == "__main__":
    app()
