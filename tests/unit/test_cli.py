"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from inghams_e2e.cli import main
from inghams_e2e.log import console


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for name in ("ENV", "INGHAMS_ENV", "ECMS_USERNAME", "ECMS_PASSWORD", "PCMS_USERNAME", "PCMS_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    # Wide enough that table cells are never folded
    monkeypatch.setattr(console, "width", 250)
    return CliRunner()


def test_envs_lists_every_environment(runner):
    result = runner.invoke(main, ["envs"])
    assert result.exit_code == 0
    for name in ("dev", "dev_test", "qa", "stg", "staging", "prod"):
        assert name in result.output
    assert "selected by ENV (qa)" in result.output


def test_envs_with_config_file(runner, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("env: prod\n")
    result = runner.invoke(main, ["--config", str(path), "envs"])
    assert result.exit_code == 0
    assert "selected by ENV (prod)" in result.output


def test_setup_auth_needs_credentials(runner):
    result = runner.invoke(main, ["setup-auth", "--system", "ecms"])
    assert result.exit_code == 1
    assert "ECMS_USERNAME" in result.output


def test_setup_auth_unknown_environment(runner, monkeypatch):
    monkeypatch.setenv("ENV", "nowhere")
    result = runner.invoke(main, ["setup-auth", "--system", "pcms"])
    assert result.exit_code == 1
    assert "Unknown environment" in result.output


def test_cleanup_needs_storage_state(runner):
    result = runner.invoke(main, ["cleanup"])
    assert result.exit_code == 1
    assert "setup-auth" in result.output


def test_check_paths_rejects_unknown_product(runner, tmp_path):
    csv_path = tmp_path / "Migration_Ski.csv"
    csv_path.write_text("SourcePath,Alias\n")
    result = runner.invoke(main, ["check-paths", "--product", "cycling", "--csv", str(csv_path)])
    assert result.exit_code == 2


def test_check_paths_with_empty_csv(runner, tmp_path):
    csv_path = tmp_path / "Migration_Ski.csv"
    csv_path.write_text("SourcePath,Alias,Country,Region,Resort\n")
    result = runner.invoke(main, ["check-paths", "--product", "ski", "--csv", str(csv_path)])
    assert result.exit_code == 0
    assert "No source paths found" in result.output


def test_failures_empty(runner, tmp_path):
    result = runner.invoke(main, ["failures", "--dir", str(tmp_path / "failures")])
    assert result.exit_code == 0
    assert "No failures captured" in result.output


def test_failures_table(runner, tmp_path):
    failures_dir = tmp_path / "failures"
    failures_dir.mkdir()
    (failures_dir / "test_home_20250301_120000.html").write_text("<html><head><title>Inghams</title></head></html>")
    result = runner.invoke(main, ["failures", "--dir", str(failures_dir)])
    assert result.exit_code == 0
    assert "test_home" in result.output
    assert "2025-03-01 12:00:00" in result.output
