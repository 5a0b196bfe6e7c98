"""Tests for the split CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from gigtags.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestSplitCommand:
    def test_split(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "split", "~20220625"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["prefix"] == ""
        assert data["data"]["date"] == "2022-06-25"

    def test_whitespace_preserved(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "split", "abc ~19700230"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["prefix"] == "abc "
        assert data["data"]["date_suffix"] == "~19700230"
        assert data["data"]["date"] is None

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["split", "gig~20220625"])
        assert result.exit_code == 0
        assert "prefix: 'gig'" in result.stdout

    def test_too_short(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["split", "gig"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert result.stdout == ""
