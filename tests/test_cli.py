"""Tests for the mockobject command line."""

import json

import pytest
from click.testing import CliRunner

from mockobject import __version__
from mockobject.__main__ import cli

FIXTURES = """
mocks:
  - package: Apache2::RequestRec
    methods:
      uri: !read_only /foo/bar
      status: null
    method_chains:
      - [foo, bar, 42]
"""


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def fixture_file(tmp_path):
    """Fixture file with one mock."""
    path = tmp_path / "mocks.yaml"
    path.write_text(FIXTURES)
    return path


class TestCli:
    """Tests for the CLI group."""

    def test_version(self, runner):
        """Test --version prints the package version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        """Test the help output lists every command."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "config" in result.output


class TestInspect:
    """Tests for the inspect command."""

    def test_inspect_table(self, runner, fixture_file):
        """Test the table lists the declared methods."""
        result = runner.invoke(cli, ["inspect", str(fixture_file)])

        assert result.exit_code == 0
        assert "Apache2::RequestRec" in result.output
        assert "uri" in result.output
        assert "read-only" in result.output
        assert "chain" in result.output

    def test_inspect_json(self, runner, fixture_file):
        """Test JSON output describes each mock."""
        result = runner.invoke(cli, ["inspect", str(fixture_file), "--json"])

        assert result.exit_code == 0
        report = json.loads(result.output)
        assert len(report) == 1
        assert report[0]["package"] == "Apache2::RequestRec"
        assert report[0]["identity"].startswith("Apache2_RequestRec#")

        methods = {m["name"]: m for m in report[0]["methods"]}
        assert methods["uri"]["read_only"] is True
        assert methods["status"]["kind"] == "value"
        assert methods["foo"]["kind"] == "chain"
        assert methods["__dispose__"]["tracked"] is False

    def test_inspect_default_path(self, runner, fixture_file, monkeypatch):
        """Test the configured fixture path is used without an argument."""
        monkeypatch.setenv("MOCKOBJECT_FIXTURES", str(fixture_file))

        result = runner.invoke(cli, ["inspect", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["package"] == "Apache2::RequestRec"

    def test_inspect_missing_file(self, runner, tmp_path):
        """Test a missing fixture file exits with an error."""
        result = runner.invoke(cli, ["inspect", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_inspect_collision(self, runner, tmp_path):
        """Test a colliding chain is reported as an error."""
        path = tmp_path / "mocks.yaml"
        path.write_text(
            "mocks:\n"
            "  - package: Foo\n"
            "    methods: {name: Ovid}\n"
            "    method_chains: [[name, reversed, divO]]\n"
        )

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "name" in result.output

    def test_inspect_empty(self, runner, tmp_path):
        """Test an empty fixture file is reported."""
        path = tmp_path / "mocks.yaml"
        path.write_text("mocks: []\n")

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code == 0
        assert "No mocks declared" in result.output


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_prints_yaml(self, runner):
        """Test the effective configuration is printed."""
        result = runner.invoke(cli, ["config"])

        assert result.exit_code == 0
        assert "mockobject:" in result.output
        assert "suppress_real_load: false" in result.output


class TestInspectErrors:
    """Tests for fixture files the inspect command cannot use."""

    def test_yaml_keyword_method_name(self, runner, tmp_path):
        """Test a method name YAML reads as a bool exits with an error."""
        path = tmp_path / "mocks.yaml"
        path.write_text("mocks:\n  - package: Foo\n    methods:\n      on: 1\n")

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, TypeError)

    def test_directory_path(self, runner, tmp_path):
        """Test a directory path exits with an error."""
        result = runner.invoke(cli, ["inspect", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_shadowed_method_name(self, runner, tmp_path):
        """Test a method named after a Mock attribute exits with an error."""
        path = tmp_path / "mocks.yaml"
        path.write_text("mocks:\n  - package: Foo\n    methods:\n      __str__: x\n")

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "__str__" in result.output
