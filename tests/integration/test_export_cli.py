"""Integration tests for the export_resume command-line script."""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "export_resume.py"

runner = CliRunner()


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """Load the script module with logs redirected to a temporary directory."""
    spec = importlib.util.spec_from_file_location("export_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    yield module
    logger.remove()


@pytest.mark.integration
def test_text_command(cli, resume_dir):
    """Test text export to stdout."""
    result = runner.invoke(cli.app, ["text", str(resume_dir / "jane.json"), "--columns", "60"])
    assert result.exit_code == 0, result.output
    assert "WORK EXPERIENCE" in result.output


@pytest.mark.integration
def test_text_command_to_file(cli, resume_dir, tmp_path):
    """Test text export to a file."""
    output = tmp_path / "jane.txt"
    result = runner.invoke(cli.app, ["text", str(resume_dir / "jane.json"), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert "Jane Q Doe" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_layout_command_writes_json(cli, resume_dir, tmp_path):
    """Test page summary and JSON run dump."""
    dump = tmp_path / "runs.json"
    result = runner.invoke(
        cli.app, ["layout", str(resume_dir / "jane.json"), "-t", "modern", "-p", "fonts_serif", "--json", str(dump)]
    )
    assert result.exit_code == 0, result.output
    assert "1 page(s)" in result.output
    assert dump.exists()


@pytest.mark.integration
def test_check_command(cli, resume_dir):
    """Test check passes for a one-page resume."""
    result = runner.invoke(cli.app, ["check", str(resume_dir / "jane.json"), "--max-pages", "1"])
    assert result.exit_code == 0, result.output
    assert "Layout OK" in result.output


@pytest.mark.integration
def test_bad_preset_exits_nonzero(cli, resume_dir):
    """Test an unknown preset is reported with exit code 1."""
    result = runner.invoke(cli.app, ["layout", str(resume_dir / "jane.json"), "-p", "colors_neon"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_missing_file_exits_nonzero(cli, tmp_path):
    """Test a missing resume file is reported with exit code 1."""
    result = runner.invoke(cli.app, ["text", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


@pytest.mark.integration
def test_templates_command(cli):
    """Test templates and presets are listed."""
    result = runner.invoke(cli.app, ["templates"])
    assert result.exit_code == 0, result.output
    assert "professional (default)" in result.output
    assert "spacing_tight" in result.output
