"""CLI tests for the customer group and init command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from invoicectl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestCustomerCommands:
    def test_add_and_list(self, cli_runner: CliRunner) -> None:
        added = cli_runner.invoke(cli, ["--json", "customer", "add", "Amy Burns", "amy@burns.com"])
        assert added.exit_code == 0, added.output
        customer_id = json.loads(added.output)["id"]

        listed = cli_runner.invoke(cli, ["--json", "customer", "list"])
        data = json.loads(listed.output)
        assert data["count"] == 1
        assert data["items"][0] == {"id": customer_id, "name": "Amy Burns", "email": "amy@burns.com"}

    def test_duplicate_email(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["customer", "add", "Amy Burns", "amy@burns.com"])
        result = cli_runner.invoke(cli, ["customer", "add", "Other", "amy@burns.com"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_human_list(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["customer", "add", "Amy Burns", "amy@burns.com"])
        result = cli_runner.invoke(cli, ["customer", "list"])
        assert "Amy Burns <amy@burns.com>" in result.output

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["customer", "--examples"])
        assert result.exit_code == 0
        assert "invoicectl customer add" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestInitCommand:
    def test_creates_database(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "init"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert Path(data["database"]).is_file()
        assert Path(data["database"]).name == "invoices.db"

    def test_respects_toml_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "invoicectl.toml").write_text('[database]\npath = "store/custom.db"\n')
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "store" / "custom.db").is_file()
