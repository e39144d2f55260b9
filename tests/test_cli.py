"""Tests for the pachost CLI."""

import pytest
from click.testing import CliRunner
from pachost import cli
from pachost.functions import PRIMITIVE_NAMES


@pytest.fixture
def runner(monkeypatch, tmp_path, context) -> CliRunner:
    """CLI runner whose primitives use the fixed test context."""
    config = tmp_path / "config.yaml"
    config.write_text("")
    monkeypatch.setenv("PACHOST_CONFIG", str(config))
    monkeypatch.setattr(cli.PacContext, "from_config", classmethod(lambda cls, cfg: context))
    return CliRunner()


class TestCli:
    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["list"])
        assert result.exit_code == 0
        assert result.output.split() == list(PRIMITIVE_NAMES)

    def test_call_boolean(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "dnsDomainIs", "www.example.com", "example.com"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

        result = runner.invoke(cli.main, ["call", "isPlainHostName", "www.example.com"])
        assert result.output.strip() == "false"

    def test_call_string(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "dnsResolve", "www.example.com"])
        assert result.exit_code == 0
        assert result.output.strip() == '"93.184.216.34"'

    def test_call_integer(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "dnsDomainLevels", "a.b.c"])
        assert result.output.strip() == "2"

    def test_call_numeric_arguments(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "timeRange", "9", "17"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_call_digit_only_host_stays_a_string(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "dnsDomainLevels", "10"])
        assert result.exit_code == 0
        assert result.output.strip() == "0"

        result = runner.invoke(cli.main, ["call", "isPlainHostName", "10"])
        assert result.output.strip() == "true"

    def test_call_digit_only_dns_name(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "dnsResolve", "12345"])
        assert result.exit_code == 0
        assert result.output.strip() == '""'

    def test_call_digit_only_shexp_value(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "shExpMatch", "123", "1*"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_call_bad_argument_count(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "timeRange", "1", "2", "3"])
        assert result.exit_code == 1
        assert "bad number of arguments" in result.output

    def test_call_wrong_arity(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "isInNet", "10.0.0.1"])
        assert result.exit_code == 1

    def test_call_unknown_primitive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["call", "FindProxyForURL", "x", "y"])
        assert result.exit_code == 1
        assert "Unknown primitive" in result.output

    def test_myip(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["myip"])
        assert result.exit_code == 0
        assert 'myIpAddress: "10.0.0.5"' in result.output
        assert "192.168.1.10" in result.output
        assert "Override: (none)" in result.output

    def test_bad_config(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("unknown: 1\n")
        result = CliRunner().invoke(cli.main, ["--config", str(path), "list"])
        assert result.exit_code != 0
        assert "Unknown config field" in result.output


class TestFormat:
    def test_undefined(self) -> None:
        from pachost.local_address import UNDEFINED

        assert cli._format(UNDEFINED) == "undefined"

    def test_values(self) -> None:
        assert cli._format(True) == "true"
        assert cli._format("a") == '"a"'
        assert cli._format(3) == "3"


def test_functions_object_is_built_from_config(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("myipaddress:\n  address: 172.16.0.9\n")
    result = CliRunner().invoke(cli.main, ["--config", str(path), "call", "myIpAddress"])
    assert result.exit_code == 0
    assert result.output.strip() == '"172.16.0.9"'
