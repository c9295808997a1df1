"""
Object path parsing utilities.

Provides consistent parsing of ``container/object`` paths used by copy
destinations and symlink manifests, and per-segment URL encoding of object
names.
"""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from .errors import MissingNameError

__all__ = ["ObjectPath", "parse_object_path", "quote_object_name"]


@dataclass(frozen=True)
class ObjectPath:
    """
    Parsed components of a ``container/object`` path.

    Attributes:
        container: Container name
        name: Object name within the container (may contain '/')
        original: Original path string for error messages
    """
    container: str
    name: str
    original: str

    def __str__(self) -> str:
        return f"{self.container}/{self.name}"

    @property
    def destination(self) -> str:
        """Value for the ``Destination`` header of a COPY request."""
        return f"/{self.container}/{self.name}"


def parse_object_path(path: str | None) -> ObjectPath:
    """
    Parse and validate a ``container/object`` path.

    A single leading slash is accepted (``/container/object``), matching the
    form Swift uses for the ``Destination`` header.

    Args:
        path: Path to parse

    Returns:
        ObjectPath with validated components

    Raises:
        MissingNameError: If the path is empty or None
        ValueError: If the path lacks a container or object part

    Examples:
        >>> parse_object_path("images/cat.png")
        ObjectPath(container='images', name='cat.png', original='images/cat.png')

        >>> parse_object_path("/backups/2024/db.sql").name
        '2024/db.sql'
    """
    if not path:
        raise MissingNameError("Object path cannot be empty")

    remainder = path[1:] if path.startswith("/") else path

    if "/" not in remainder:
        raise ValueError(f"Object path missing object part, expected container/object: {path}")

    container, name = remainder.split("/", 1)

    if not container:
        raise ValueError(f"Container name cannot be empty: {path}")
    if not name:
        raise MissingNameError(f"Object name cannot be empty: {path}")

    return ObjectPath(container=container, name=name, original=path)


def quote_object_name(name: str) -> str:
    """URL-encode an object name one path segment at a time."""
    return "/".join(quote(segment, safe="") for segment in name.split("/"))
