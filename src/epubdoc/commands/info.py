"""Info, spine and resources command implementations."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from epubdoc.core.doc import EpubDoc
from epubdoc.core.errors import CoverNotFound


def execute_info(doc: EpubDoc, as_json: bool, console: Console) -> None:
    """Display package overview and metadata."""
    if as_json:
        console.print_json(doc.package.model_dump_json())
        return

    try:
        cover = escape(doc.get_cover_id())
    except CoverNotFound:
        cover = "[dim]none[/]"

    info_lines = [
        f"[bold]{escape(doc.metadata.get('title', 'Unknown Title'))}[/]",
        "",
        f"[dim]Package file:[/] {escape(doc.root_file)}",
        f"[dim]Root base:[/] {escape(doc.root_base)}",
        f"[dim]Resources:[/] {len(doc.resources)}",
        f"[dim]Spine items:[/] {doc.get_num_pages()}",
        f"[dim]Cover:[/] {cover}",
    ]
    console.print()
    console.print(
        Panel("\n".join(info_lines), title="Book Information", border_style="green")
    )

    console.print()
    table = Table(title="Metadata", show_header=True, header_style="bold cyan")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in doc.metadata.items():
        table.add_row(escape(key), escape(value))
    console.print(table)
    console.print()


def execute_spine(doc: EpubDoc, console: Console) -> None:
    """Display the reading order with each item's resolved resource."""
    table = Table(title="Spine", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Id", style="white")
    table.add_column("Path", style="green")
    table.add_column("Type", style="dim")

    for i, resource_id in enumerate(doc.spine):
        entry = doc.resources.get(resource_id)
        if entry is None:
            table.add_row(
                str(i), escape(resource_id), "[red]missing from manifest[/]", ""
            )
        else:
            table.add_row(
                str(i),
                escape(resource_id),
                escape(entry.path),
                escape(entry.media_type),
            )

    console.print(table)


def execute_resources(doc: EpubDoc, console: Console) -> None:
    """Display the manifest."""
    table = Table(title="Resources", show_header=True, header_style="bold cyan")
    table.add_column("Id", style="white")
    table.add_column("Path", style="green")
    table.add_column("Type", style="dim")

    for resource_id, entry in doc.resources.items():
        table.add_row(
            escape(resource_id), escape(entry.path), escape(entry.media_type)
        )

    console.print(table)
