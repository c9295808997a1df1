"""
Human-readable output formatting.

Centralizes all CLI output formatting to enable easy addition of JSON mode
in future stages while keeping CLI commands thin and focused.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..data_object import DataObject

_console = Console()


def print_object_stat(obj: DataObject, verbose: bool = False) -> None:
    """
    Print object metadata as a two-column table.

    Args:
        obj: Object with metadata loaded
        verbose: Also show custom metadata
    """
    rows: List[Tuple[str, Optional[str]]] = [
        ("Container", obj.container.name),
        ("Object", obj.name),
        ("Content-Type", obj.content_type),
        ("Content-Length", _format_bytes(obj.content_length) if obj.content_length is not None else None),
        ("ETag", obj.etag),
        ("Content-Encoding", obj.content_encoding),
        ("Content-Disposition", obj.content_disposition),
        ("Manifest", obj.manifest),
        ("Delete-At", obj.get_delete_at_time().isoformat() if obj.get_delete_at_time() else None),
    ]
    if verbose:
        rows.extend((f"Meta {key}", value) for key, value in sorted(obj.metadata.items()))

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for field, value in rows:
        if value is not None:
            table.add_row(field, Text(value))
    _console.print(table)


def print_temp_url(url: str) -> None:
    """Print a temporary URL unwrapped so it can be piped."""
    typer.echo(url)


def print_status(message: str) -> None:
    """Print a one-line status message."""
    typer.echo(message)


def _format_bytes(size_bytes: int) -> str:
    """
    Format byte count as human-readable string.

    Returns:
        Formatted string (e.g., "1.5 MB", "42 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"
