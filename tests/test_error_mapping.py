"""
Test error mapping and CLI exit code functionality.

Validates that exceptions are correctly mapped to exit codes and that
the run_and_exit wrapper handles errors appropriately for CLI commands.
"""
from __future__ import annotations

import httpx
import pytest
import typer

from swift_objects.operations.mappers import EXIT_CODES, exit_code_for, run_and_exit
from swift_objects.storage.errors import (
    CdnNotAvailableError,
    ErrorKind,
    HttpStatusError,
    MissingNameError,
    ObjectNotEmptyError,
    ObjectNotFoundError,
    PseudoDirectoryError,
    SigningSecretUnavailableError,
    TransportError,
    UnsupportedMethodError,
)


def _status_error(cls, status_code: int):
    return cls(f"HTTP {status_code}", httpx.Response(status_code))


class TestExitCodeMapping:
    """Test exception to exit code mapping."""

    def test_known_exceptions_mapped_correctly(self):
        """Test that object store errors map to their exit codes."""
        assert exit_code_for(_status_error(ObjectNotFoundError, 404)) == 1
        assert exit_code_for(MissingNameError("no name")) == 2
        assert exit_code_for(UnsupportedMethodError("DELETE")) == 2
        assert exit_code_for(PseudoDirectoryError("dir/")) == 2
        assert exit_code_for(CdnNotAvailableError("no cdn")) == 2
        assert exit_code_for(TransportError("reset")) == 3
        assert exit_code_for(_status_error(HttpStatusError, 409)) == 3
        assert exit_code_for(ObjectNotEmptyError("c/o", 10)) == 4
        assert exit_code_for(SigningSecretUnavailableError("no key")) == 5

    def test_standard_exceptions_use_fallback(self):
        """Test that standard Python exceptions use fallback code."""
        assert exit_code_for(ValueError("test")) == 2  # ValueError maps to validation error
        assert exit_code_for(RuntimeError("test")) == 3
        assert exit_code_for(FileNotFoundError("test")) == 3
        assert exit_code_for(PermissionError("test")) == 3

    def test_exit_code_completeness(self):
        """Test that every error kind is mapped."""
        assert set(EXIT_CODES) == set(ErrorKind)


class TestRunAndExit:
    """Test run_and_exit wrapper functionality."""

    def test_successful_function_returns_result(self):
        """Test that successful function execution returns result."""
        assert run_and_exit(lambda: "success result") == "success result"

    def test_function_exception_raises_typer_exit(self):
        """Test that function exceptions are converted to typer.Exit."""
        def failing_func():
            raise _status_error(ObjectNotFoundError, 404)

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(failing_func)

        assert exc_info.value.exit_code == 1

    def test_exception_chaining_preserved(self):
        """Test that original exception is preserved as cause."""
        original_error = ObjectNotEmptyError("photos/cat.jpg", 2048)

        def failing_func():
            raise original_error

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(failing_func)

        assert exc_info.value.__cause__ is original_error
        assert exc_info.value.exit_code == 4

    def test_error_message_printed_to_stderr(self, capsys):
        def failing_func():
            raise SigningSecretUnavailableError("Account has no key")

        with pytest.raises(typer.Exit):
            run_and_exit(failing_func)

        assert "Error: Account has no key" in capsys.readouterr().err

    def test_nested_exceptions_use_outer_type(self):
        """Test that nested exceptions use the outer exception type."""
        def nested_func():
            try:
                raise ValueError("inner error")
            except ValueError as e:
                raise TransportError("outer error") from e

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(nested_func)

        assert exc_info.value.exit_code == 3

    def test_error_boundary_isolation(self):
        """Test that errors don't leak between command invocations."""
        def first_command():
            raise MissingNameError("no name")

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(first_command)
        assert exc_info.value.exit_code == 2

        assert run_and_exit(lambda: "success") == "success"
