from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from package_builder import composer
from package_builder.cli import app
from package_builder.config import load_settings


@pytest.fixture()
def cli() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def composer_status(monkeypatch):
    calls = []
    status = {"code": 0}

    def fake_run(self, args):
        calls.append(list(args))
        return status["code"]

    monkeypatch.setattr(composer.SubprocessRunner, "run", fake_run)
    status["calls"] = calls
    return status


def test_build_success(cli: CliRunner, tmp_path: Path, answers, composer_status) -> None:
    answers.queue(["acme/widget", "", "", "", ""])
    result = cli.invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "Package created" in result.output
    assert (tmp_path / "acme-widget" / ".php_cs").exists()
    assert composer_status["calls"][0][:2] == ["composer", "init"]


def test_build_initializer_failure_exit_code(cli: CliRunner, tmp_path: Path, answers, composer_status) -> None:
    composer_status["code"] = 1
    answers.queue(["acme/widget", "", "n", "n"])
    result = cli.invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 2
    assert "WARNING" in result.output
    assert (tmp_path / "acme-widget" / "README.md").exists()


def test_build_invalid_names_exit_code(cli: CliRunner, tmp_path: Path, answers, composer_status) -> None:
    answers.queue(["bad"] * 5)
    result = cli.invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 3
    assert "5 attempts" in result.output
    assert not list(tmp_path.iterdir())
    assert composer_status["calls"] == []


def test_build_filesystem_error_exit_code(cli: CliRunner, tmp_path: Path, answers, composer_status) -> None:
    (tmp_path / "acme-widget").write_text("in the way")
    answers.queue(["acme/widget", "", "", "", ""])
    result = cli.invoke(app, ["build", str(tmp_path)])
    assert result.exit_code == 3


def test_build_config_error_exit_code(cli: CliRunner, tmp_path: Path, composer_status) -> None:
    result = cli.invoke(app, ["build", str(tmp_path), "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code == 4
    assert "Configuration error" in result.output


def test_build_writes_log_file(cli: CliRunner, tmp_path: Path, answers, composer_status) -> None:
    answers.queue(["acme/widget", "", "", "", ""])
    log_file = tmp_path / "logs" / "build.log"
    result = cli.invoke(app, ["build", str(tmp_path), "--log-level", "debug", "--log-file", str(log_file)])
    logger.remove()
    assert result.exit_code == 0, result.output
    assert "Building acme/widget" in log_file.read_text()


def test_init_config(cli: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    result = cli.invoke(app, ["init-config", str(path)])
    assert result.exit_code == 0
    settings = load_settings(path)
    assert settings.composer.binary == "composer"
