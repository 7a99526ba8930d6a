"""Tests for the ``txnguard check`` commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import flip_char
from txnguard.cli import cli


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TXNGUARD_CONFIG", raising=False)


class TestCheckPubkey:
    def test_valid(self, cli_runner: CliRunner, account: str) -> None:
        result = cli_runner.invoke(cli, ["check", "pubkey", account])
        assert result.exit_code == 0
        assert "check_public_key" in result.output
        assert account in result.output

    def test_invalid_exits_1(self, cli_runner: CliRunner, account: str) -> None:
        result = cli_runner.invoke(cli, ["check", "pubkey", flip_char(account, 8)])
        assert result.exit_code == 1
        assert "is not a valid stellar public key" in result.output

    def test_json(self, cli_runner: CliRunner, account: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "pubkey", account])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["public_key"] == account


class TestCheckSigner:
    def test_pre_auth(self, cli_runner: CliRunner, pre_auth_tx: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "signer", pre_auth_tx])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["type"] == "pre_auth_tx"


class TestCheckAmount:
    def test_decimal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "amount", "10.1234567"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["scaled"] == 101234567

    def test_stroops(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "amount", "--stroops", "25"])
        assert json.loads(result.output)["data"]["amount"] == "0.0000025"

    def test_stroops_not_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "amount", "--stroops", "2.5"])
        assert result.exit_code == 2

    def test_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "amount", "--", "-1"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "RANGE"

    def test_very_long_amount_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "amount", "1" * 5000])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "PARSE"

    def test_very_long_stroops_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "amount", "--stroops", "1" * 5000])
        assert result.exit_code == 2

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "amount", "1"])
        assert result.output.strip() == "OK: check_amount"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "amount", "--examples"])
        assert result.exit_code == 0
        assert "--stroops" in result.output


class TestCheckAsset:
    def test_native(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "asset", "native"])
        assert result.exit_code == 0
        assert "type: native" in result.output

    def test_native_code_policy(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "asset", "native", "--policy", "code"])
        assert result.exit_code == 1
        assert "native (XLM) asset type is not allowed" in result.output

    def test_trustline(self, cli_runner: CliRunner, issuer: str) -> None:
        args = ["--json", "check", "asset", f"USD:{issuer}", "--policy", "trustline"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["type"] == "credit_alphanum4"

    def test_bad_policy(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "asset", "native", "--policy", "nope"])
        assert result.exit_code == 2

    def test_toml_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "txnguard.toml").write_text("[output]\njson = true\n")
        result = cli_runner.invoke(cli, ["check", "asset", "native"])
        assert json.loads(result.output)["data"]["canonical"] == "native"

    def test_toml_unknown_key_exits_cleanly(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "txnguard.toml").write_text("[output]\njson_output = true\n")
        result = cli_runner.invoke(cli, ["check", "asset", "native"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--examples"])
        assert result.exit_code == 0
        assert "txnguard check asset native" in result.output
