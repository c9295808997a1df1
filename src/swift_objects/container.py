"""
Container context for data objects.

A container scopes object names, resolves container URLs and answers the
size check used when linking objects.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import httpx

from .storage.base import CdnCollaborator
from .storage.cdn import CdnContainer
from .storage.errors import ObjectNotFoundError
from .storage.headers import CONTENT_LENGTH

if TYPE_CHECKING:
    from .account import Account
    from .data_object import DataObject

__all__ = ["Container"]

logger = logging.getLogger(__name__)


class Container:
    """Named container within an account."""

    def __init__(self, account: Account, name: str, cdn: Optional[CdnCollaborator] = None):
        self.account = account
        self.name = name
        if cdn is None and account.cdn_url:
            cdn = CdnContainer(account.transport, account.cdn_url, name)
        self.cdn = cdn

    def __repr__(self) -> str:
        return f"Container({self.name!r})"

    def url(self, internal: Optional[bool] = None) -> str:
        if internal is None:
            internal = self.account.uses_internal_url
        return self.account.resolver.resolve(self.name, internal=internal)

    def object_url(self, name: str, internal: Optional[bool] = None) -> str:
        if internal is None:
            internal = self.account.uses_internal_url
        return self.account.resolver.resolve(self.name, name, internal=internal)

    def object_size(self, name: str) -> int:
        """
        Return an object's content length with one HEAD request.

        Raises:
            ObjectNotFoundError: If the object does not exist
            TransportError: For other failures
        """
        response = self.account.transport.send(httpx.Request("HEAD", self.object_url(name)))
        length = response.headers.get(CONTENT_LENGTH)
        size = int(length) if length else 0
        logger.debug(f"Object {self.name}/{name} is {size} bytes")
        return size

    def object_exists(self, name: str) -> bool:
        try:
            self.object_size(name)
        except ObjectNotFoundError:
            return False
        return True

    def is_cdn_enabled(self) -> bool:
        return self.cdn is not None and self.cdn.is_cdn_enabled()

    def data_object(self, name: Optional[str] = None, *, refresh: bool = True) -> DataObject:
        """
        Return a handle for an object in this container.

        Args:
            name: Object name; an unnamed handle can be named later
            refresh: Load the object's metadata with one HEAD request

        Returns:
            DataObject bound to this container
        """
        from .data_object import DataObject

        obj = DataObject(self, name)
        if name and refresh:
            obj.retrieve_metadata()
        return obj
