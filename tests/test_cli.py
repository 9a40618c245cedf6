"""Tests for the command-line interface."""

import importlib.util
import json
import os

import pytest

CLI_PATH = os.path.join(os.path.dirname(__file__), "..", "scripts", "cli", "shortlinks_cli.py")


@pytest.fixture(scope="module")
def cli_module():
    spec = importlib.util.spec_from_file_location("shortlinks_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCLI:
    """Run CLI commands against an in-memory service."""

    async def test_shorten(self, cli_module, service, capsys):
        exit_code = await cli_module.main(["shorten", "https://example.com/cli"], service=service)

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"]
        assert data["original_url"] == "https://example.com/cli"
        assert data["clicks"] == 0
        assert len(data["short_code"]) == 7

    async def test_shorten_invalid(self, cli_module, service, capsys):
        exit_code = await cli_module.main(["shorten", "ftp://x"], service=service)

        assert exit_code == 1
        data = json.loads(capsys.readouterr().err)
        assert not data["success"]
        assert "HTTP or HTTPS" in data["error"]

    async def test_resolve_and_info(self, cli_module, service, capsys):
        link = await service.submit("https://example.com/cli")
        capsys.readouterr()

        assert await cli_module.main(["resolve", link.short_code], service=service) == 0
        resolved = json.loads(capsys.readouterr().out)
        assert resolved["original_url"] == "https://example.com/cli"

        assert await cli_module.main(["info", link.short_code], service=service) == 0
        info = json.loads(capsys.readouterr().out)
        assert info["clicks"] == 1

    async def test_resolve_unknown(self, cli_module, service, capsys):
        assert await cli_module.main(["resolve", "nope123"], service=service) == 1
        assert "URL not found" in capsys.readouterr().err

    async def test_list(self, cli_module, service, capsys, sample_urls):
        for url in sample_urls:
            await service.submit(url)
        capsys.readouterr()

        assert await cli_module.main(["list", "--limit", "2"], service=service) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["count"] == 2

    async def test_health(self, cli_module, service, capsys):
        assert await cli_module.main(["health"], service=service) == 0
        assert json.loads(capsys.readouterr().out)["health"]["overall"]

    async def test_requires_database_url(self, cli_module, monkeypatch, capsys):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        assert await cli_module.main(["--db-url", "", "health"]) == 1
        assert "database URL is required" in capsys.readouterr().err

    async def test_no_command(self, cli_module, service):
        assert await cli_module.main([], service=service) == 1
