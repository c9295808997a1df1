"""
Operations Facade - Application service layer.

Provides a clean interface between the CLI and the object resources,
centralizing command orchestration and policy decisions while keeping CLI
commands thin and testable.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Optional

import httpx

from ..account import Account
from ..data_object import DataObject


def parse_metadata_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """
    Parse ``KEY=VALUE`` arguments into a metadata mapping.

    Raises:
        ValueError: If an argument has no '=' or an empty key
    """
    result: Dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid metadata pair '{pair}', expected KEY=VALUE")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid metadata pair '{pair}', key cannot be empty")
        result[key] = value
    return result


@dataclass(frozen=True)
class OpsConfig:
    """
    Configuration for Operations facade.

    Carries output options chosen on the command line.
    """
    verbose: bool = False         # Show detailed output


class Operations:
    """
    Application service facade for object operations.

    Each method resolves the object through the account and performs one
    resource operation; errors propagate to the CLI error mapper.
    """

    def __init__(self, account: Account, config: Optional[OpsConfig] = None):
        self.account = account
        self.config = config or OpsConfig()

    def _object(self, container: str, name: str, refresh: bool = False) -> DataObject:
        return self.account.container(container).data_object(name, refresh=refresh)

    def stat(self, container: str, name: str) -> DataObject:
        return self._object(container, name, refresh=True)

    def temp_url(self, container: str, name: str, *, method: str = "GET",
                 expires_in: int = 3600, force_public: bool = False) -> str:
        obj = self._object(container, name)
        return obj.get_temporary_url(expires_in, method, force_public=force_public)

    def expire(self, container: str, name: str, *, after: Optional[int] = None,
               at: Optional[datetime] = None) -> DataObject:
        """
        Schedule deletion either ``after`` seconds from now or ``at`` a time.

        The object is loaded first so its custom metadata travels with the
        POST, which replaces custom metadata on the server.
        """
        if (after is None) == (at is None):
            raise ValueError("Specify exactly one of --after or --at")
        obj = self._object(container, name, refresh=True)
        if after is not None:
            obj.set_delete_after(after)
        else:
            obj.set_delete_at_time(at)
        return obj.update()

    def symlink(self, container: str, name: str, target: str) -> DataObject:
        obj = self._object(container, name)
        obj.create_symlink_to(target)
        return obj

    def copy(self, container: str, name: str, destination: str) -> httpx.Response:
        return self._object(container, name).copy(destination)

    def delete(self, container: str, name: str) -> httpx.Response:
        return self._object(container, name).delete()

    def set_metadata(self, container: str, name: str, pairs: Iterable[str]) -> DataObject:
        """Merge ``KEY=VALUE`` pairs into the object's current custom metadata."""
        metadata = parse_metadata_pairs(pairs)
        obj = self._object(container, name, refresh=True)
        obj.save_metadata(metadata)
        return obj
