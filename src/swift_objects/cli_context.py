"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings and the
account handle, avoiding global state and enabling dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .account import Account
from .settings import Settings, create_settings_from_env
from .storage.base import Transport


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Manages application-level dependencies (settings, account) that are
    initialized once and shared across a CLI command execution.
    """
    settings: Settings
    transport: Optional[Transport] = None
    _account: Optional[Account] = None

    @classmethod
    def from_env(cls) -> CLIContext:
        """Create CLI context from environment variables."""
        return cls(settings=create_settings_from_env())

    @property
    def account(self) -> Account:
        """Get or create the account handle (lazy initialization)."""
        if self._account is None:
            self._account = Account.from_settings(self.settings, transport=self.transport)
        return self._account
