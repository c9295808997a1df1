"""
CLI smoke tests with a fake transport.

Tests basic CLI functionality and command wiring without a real object
store. Validates that all commands can be invoked, produce the expected
output and map failures onto exit codes.
"""
from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
from typer.testing import CliRunner

from swift_objects.cli import app
from swift_objects.cli_context import CLIContext
from tests.conftest import PUBLIC_URL


@pytest.fixture
def cli_transport(monkeypatch, settings, transport):
    """Route every CLI command through the recording fake transport."""
    monkeypatch.setattr(
        "swift_objects.cli.CLIContext.from_env",
        lambda: CLIContext(settings=settings, transport=transport),
    )
    return transport


class TestCLISmokeTests:
    """Smoke tests for CLI commands."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_stat_command(self, cli_transport):
        cli_transport.add_response(200, {
            "Content-Type": "text/html",
            "Content-Length": "2048",
            "ETag": "abc123",
        })

        result = self.runner.invoke(app, ["stat", "photos", "index.html"])

        assert result.exit_code == 0
        assert "text/html" in result.stdout
        assert "2.0 KB" in result.stdout
        assert cli_transport.methods() == ["HEAD"]

    def test_stat_not_found(self, cli_transport):
        cli_transport.add_response(404)

        result = self.runner.invoke(app, ["stat", "photos", "missing.jpg"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_temp_url_command(self, cli_transport):
        cli_transport.add_response(204, {"X-Account-Meta-Temp-URL-Key": "secret"})

        result = self.runner.invoke(app, ["temp-url", "photos", "cat.jpg", "--ttl", "60"])

        assert result.exit_code == 0
        url = result.stdout.strip()
        assert url.startswith(f"{PUBLIC_URL}/photos/cat.jpg?")
        assert set(parse_qs(urlsplit(url).query)) == {"temp_url_sig", "temp_url_expires"}

    def test_temp_url_rejects_delete(self, cli_transport):
        result = self.runner.invoke(app, ["temp-url", "photos", "cat.jpg", "--method", "DELETE"])

        assert result.exit_code == 2
        assert cli_transport.requests == []

    def test_temp_url_without_secret(self, cli_transport):
        cli_transport.add_response(204)

        result = self.runner.invoke(app, ["temp-url", "photos", "cat.jpg"])

        assert result.exit_code == 5

    def test_expire_after(self, cli_transport):
        result = self.runner.invoke(app, ["expire", "photos", "cat.jpg", "--after", "3600"])

        assert result.exit_code == 0
        assert "will be deleted at" in result.stdout
        request = cli_transport.last_request
        assert request.method == "POST"
        assert "X-Delete-At" in request.headers

    def test_expire_requires_one_option(self, cli_transport):
        result = self.runner.invoke(app, ["expire", "photos", "cat.jpg"])

        assert result.exit_code == 2
        assert cli_transport.requests == []

    def test_symlink_command(self, cli_transport):
        cli_transport.add_response(404)
        cli_transport.add_response(200, {"Content-Length": "0"})
        cli_transport.add_response(201)

        result = self.runner.invoke(app, ["symlink", "photos", "latest.jpg", "archive/cat.jpg"])

        assert result.exit_code == 0
        assert "photos/latest.jpg -> archive/cat.jpg" in result.stdout
        assert cli_transport.methods() == ["HEAD", "HEAD", "PUT"]

    def test_symlink_not_empty(self, cli_transport):
        cli_transport.add_response(200, {"Content-Length": "10"})

        result = self.runner.invoke(app, ["symlink", "photos", "latest.jpg", "archive/cat.jpg"])

        assert result.exit_code == 4
        assert cli_transport.methods() == ["HEAD"]

    def test_copy_command(self, cli_transport):
        cli_transport.add_response(201)

        result = self.runner.invoke(app, ["copy", "photos", "cat.jpg", "backup/cat.jpg"])

        assert result.exit_code == 0
        assert cli_transport.last_request.headers["Destination"] == "/backup/cat.jpg"

    def test_delete_command(self, cli_transport):
        cli_transport.add_response(204)

        result = self.runner.invoke(app, ["delete", "photos", "cat.jpg"])

        assert result.exit_code == 0
        assert "Deleted photos/cat.jpg" in result.stdout

    def test_delete_server_error(self, cli_transport):
        cli_transport.add_response(503)

        result = self.runner.invoke(app, ["delete", "photos", "cat.jpg"])

        assert result.exit_code == 3

    def test_set_meta_command(self, cli_transport):
        cli_transport.add_response(200, {"X-Object-Meta-Owner": "alice"})

        result = self.runner.invoke(app, ["set-meta", "photos", "cat.jpg", "color=red"])

        assert result.exit_code == 0
        assert "Saved 2 metadata keys" in result.stdout
        request = cli_transport.last_request
        assert request.method == "POST"
        assert request.headers["X-Object-Meta-Color"] == "red"
        assert request.headers["X-Object-Meta-Owner"] == "alice"

    def test_set_meta_invalid_pair(self, cli_transport):
        result = self.runner.invoke(app, ["set-meta", "photos", "cat.jpg", "novalue"])

        assert result.exit_code == 2
        assert cli_transport.requests == []


class TestCLIConfiguration:
    """CLI behavior when configuration is missing."""

    def test_missing_storage_url(self, monkeypatch):
        monkeypatch.delenv("SWIFT_STORAGE_URL")

        result = CliRunner().invoke(app, ["stat", "photos", "cat.jpg"])

        assert result.exit_code == 2
        assert "SWIFT_STORAGE_URL" in result.output
