"""
swift-objects CLI

Implements object-level verbs with Operations facade integration:
- stat: Show object metadata
- temp-url: Print a signed temporary URL
- expire: Schedule deletion (relative or absolute)
- symlink: Link an object to another via its manifest header
- copy: Server-side copy
- delete: Delete an object
- set-meta: Merge custom metadata
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

import typer

from .cli_context import CLIContext
from .operations import Operations, OpsConfig, run_and_exit
from .operations.printers import print_object_stat, print_status, print_temp_url

app = typer.Typer(name="swift-objects", help="Swift object store CLI")


def _operations(verbose: bool = False) -> Operations:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx = CLIContext.from_env()
    return Operations(ctx.account, OpsConfig(verbose=verbose))


@app.command()
def stat(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    verbose: bool = typer.Option(False, "--verbose", help="Show custom metadata and debug logs"),
):
    """Show object metadata."""
    def _run():
        obj = _operations(verbose).stat(container, name)
        print_object_stat(obj, verbose=verbose)

    run_and_exit(_run)


@app.command("temp-url")
def temp_url(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    method: str = typer.Option("GET", "--method", help="HTTP method: GET, PUT, HEAD or POST"),
    ttl: int = typer.Option(3600, "--ttl", help="Lifetime in seconds"),
    public: bool = typer.Option(False, "--public", help="Force the public endpoint"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Print a signed temporary URL."""
    def _run():
        url = _operations(verbose).temp_url(
            container, name, method=method, expires_in=ttl, force_public=public
        )
        print_temp_url(url)

    run_and_exit(_run)


@app.command()
def expire(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    after: Optional[int] = typer.Option(None, "--after", help="Delete after N seconds"),
    at: Optional[datetime] = typer.Option(None, "--at", help="Delete at this time"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Schedule deletion of an object."""
    def _run():
        obj = _operations(verbose).expire(container, name, after=after, at=at)
        print_status(f"{container}/{name} will be deleted at {obj.get_delete_at_time().isoformat()}")

    run_and_exit(_run)


@app.command()
def symlink(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name that becomes the link"),
    target: str = typer.Argument(..., help="Target path (container/object)"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Link an object to TARGET."""
    def _run():
        obj = _operations(verbose).symlink(container, name, target)
        print_status(f"{container}/{name} -> {obj.manifest}")

    run_and_exit(_run)


@app.command()
def copy(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    destination: str = typer.Argument(..., help="Destination path (container/object)"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Copy an object on the server."""
    def _run():
        _operations(verbose).copy(container, name, destination)
        print_status(f"Copied {container}/{name} to {destination}")

    run_and_exit(_run)


@app.command()
def delete(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Delete an object."""
    def _run():
        _operations(verbose).delete(container, name)
        print_status(f"Deleted {container}/{name}")

    run_and_exit(_run)


@app.command("set-meta")
def set_meta(
    container: str = typer.Argument(..., help="Container name"),
    name: str = typer.Argument(..., help="Object name"),
    pairs: List[str] = typer.Argument(..., help="KEY=VALUE metadata pairs"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
):
    """Merge custom metadata into an object."""
    def _run():
        obj = _operations(verbose).set_metadata(container, name, pairs)
        print_status(f"Saved {len(obj.metadata)} metadata keys on {container}/{name}")

    run_and_exit(_run)


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
