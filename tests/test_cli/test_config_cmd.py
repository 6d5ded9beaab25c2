"""Tests for config subcommand group."""

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from oxlint_x.cli.config_cmd import app

runner = CliRunner()

CONFIG_NAME = ".oxlintrc-oxlint-x-cli-test.json"


@pytest.fixture(autouse=True)
def settings():
    mock = MagicMock()
    mock.files.config_file_name = CONFIG_NAME
    with patch("oxlint_x.cli.config_cmd.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def project(tmp_path):
    (tmp_path / CONFIG_NAME).write_text(json.dumps({"rules": {"eqeqeq": "error"}}), encoding="utf-8")
    return tmp_path


def test_show_json(project):
    """--json prints the merged config."""
    result = runner.invoke(
        app, ["show", str(project / "a.js"), "--json", "-o", '{"rules": {"no-var": "warn"}}']
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"rules": {"no-var": "warn", "eqeqeq": "error"}}


def test_show_panel(project):
    """Default output is a panel naming the config file."""
    result = runner.invoke(app, ["show", str(project / "a.js")])

    assert result.exit_code == 0
    assert "eqeqeq" in result.stdout


def test_show_invalid_options(project):
    """Malformed --options is a usage error."""
    result = runner.invoke(app, ["show", str(project / "a.js"), "-o", "{bad"])

    assert result.exit_code == 2


def test_locate_found(project):
    """locate prints the nearest config path."""
    nested = project / "src"
    nested.mkdir()

    result = runner.invoke(app, ["locate", str(nested / "a.js")])

    assert result.exit_code == 0
    assert CONFIG_NAME in result.stdout


def test_locate_missing(tmp_path):
    """locate exits 1 when no config applies."""
    result = runner.invoke(app, ["locate", str(tmp_path / "a.js")])

    assert result.exit_code == 1
    assert "No" in result.stdout
