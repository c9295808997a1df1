"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

from ..storage.errors import ErrorKind, ObjectNotFoundError, ObjectStoreError

T = TypeVar('T')

EXIT_CODES = {
    ErrorKind.MISSING_NAME: 2,
    ErrorKind.UNSUPPORTED_METHOD: 2,
    ErrorKind.PSEUDO_DIRECTORY: 2,
    ErrorKind.CDN_NOT_AVAILABLE: 2,
    ErrorKind.TRANSPORT: 3,
    ErrorKind.OBJECT_NOT_EMPTY: 4,
    ErrorKind.SIGNING_SECRET_UNAVAILABLE: 5,
}

NOT_FOUND_EXIT_CODE = 1
VALIDATION_EXIT_CODE = 2
FALLBACK_EXIT_CODE = 3


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 1: Object, container or account not found (ObjectNotFoundError)
    - 2: Validation error (missing name, unsupported method, ValueError)
    - 3: Transport error or unknown error
    - 4: Object not empty
    - 5: Signing secret unavailable
    """
    if isinstance(exc, ObjectNotFoundError):
        return NOT_FOUND_EXIT_CODE
    if isinstance(exc, ObjectStoreError):
        return EXIT_CODES.get(exc.kind, FALLBACK_EXIT_CODE)
    if isinstance(exc, ValueError):
        return VALIDATION_EXIT_CODE
    return FALLBACK_EXIT_CODE


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit, printing the error message to stderr.

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
